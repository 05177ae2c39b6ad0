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
"""Serialized entity paired with the fields that identify it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pyrepo.data.equality import sequence_equals, structural_hash


@dataclass(frozen=True, eq=False)
class EntityContext:
    """An entity that should be modified in a data source.

    Attributes:
        entity: The entity serialized as a plain mapping.
        id_field_names: Names of the fields that together form the
            entity's identity.
    """

    entity: Mapping[str, Any]
    id_field_names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "id_field_names", tuple(self.id_field_names))

    @property
    def identity(self) -> dict[str, Any]:
        """The ``{id_field: value}`` mapping that locates the entity.

        Raises:
            KeyError: If an identity field is missing from the entity.
        """
        return {name: self.entity[name] for name in self.id_field_names}

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, EntityContext):
            return NotImplemented
        return self.entity == other.entity and sequence_equals(self.id_field_names, other.id_field_names)

    def __hash__(self) -> int:
        return structural_hash(self.entity, self.id_field_names)
