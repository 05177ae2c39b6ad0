# Copyright 2026 The pyrepo Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Ready-made servants for dataclass and Pydantic entities.

Example::

    @dataclass
    class Person:
        id: int
        name: str

    servant = DataclassServant(Person, id_field_names=["id"])
    servant.serialize(Person(1, "Ada"))        # {"id": 1, "name": "Ada"}
    servant.deserialize({"id": 1, "name": "Ada"})
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def _check_id_fields(entity_type: type, known: Iterable[str], id_field_names: tuple[str, ...]) -> None:
    if not id_field_names:
        raise ValueError(f"{entity_type.__name__} servant requires at least one id field")
    known_names = set(known)
    missing = [name for name in id_field_names if name not in known_names]
    if missing:
        raise ValueError(f"{entity_type.__name__} has no field(s) {', '.join(missing)}")


class DataclassServant(Generic[T]):
    """Servant for dataclass entities.

    Fields are copied one level deep: nested values are stored as they are,
    not converted to mappings. Keys a data source returns that are not
    fields of the dataclass are ignored on deserialization.
    """

    def __init__(self, entity_type: type[T], id_field_names: Iterable[str]) -> None:
        if not dataclasses.is_dataclass(entity_type):
            raise TypeError(f"{entity_type!r} is not a dataclass")
        self._entity_type = entity_type
        self._fields = tuple(f.name for f in dataclasses.fields(entity_type))
        self._id_field_names = tuple(id_field_names)
        _check_id_fields(entity_type, self._fields, self._id_field_names)

    @property
    def id_field_names(self) -> tuple[str, ...]:
        return self._id_field_names

    def serialize(self, entity: T) -> dict[str, Any]:
        return {name: getattr(entity, name) for name in self._fields}

    def deserialize(self, entity: Mapping[str, Any]) -> T:
        return self._entity_type(**{name: entity[name] for name in self._fields if name in entity})


class PydanticServant(Generic[M]):
    """Servant for Pydantic model entities, using ``model_dump`` / ``model_validate``."""

    def __init__(self, model_type: type[M], id_field_names: Iterable[str]) -> None:
        self._model_type = model_type
        self._id_field_names = tuple(id_field_names)
        _check_id_fields(model_type, model_type.model_fields, self._id_field_names)

    @property
    def id_field_names(self) -> tuple[str, ...]:
        return self._id_field_names

    def serialize(self, entity: M) -> dict[str, Any]:
        return entity.model_dump()

    def deserialize(self, entity: Mapping[str, Any]) -> M:
        return self._model_type.model_validate(dict(entity))
