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
"""Outbound ports: the storage contract a collection delegates to."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from pyrepo.data.entity_context import EntityContext
from pyrepo.data.specification import Specification

T = TypeVar("T")


@runtime_checkable
class ReadonlyDataSource(Protocol):
    """A data source that can only be queried."""

    async def find(self, specification: Specification) -> Sequence[Mapping[str, Any]]:
        """Return the entities matching *specification* as plain mappings.

        The data source decides how unset limit/offset are treated. It must
        raise (for instance
        :class:`~pyrepo.kernel.exceptions.UnsupportedSpecificationException`)
        rather than ignore a condition, ordering or pagination it cannot
        honor.
        """
        ...


@runtime_checkable
class DataSource(ReadonlyDataSource, Protocol):
    """A data source that also allows modification.

    It can be anything: a database, a third-party HTTP API, the file
    system, an in-memory dict.
    """

    async def create(self, entity_contexts: Sequence[EntityContext]) -> None:
        """Store entities that were not present before.

        May raise if any of them is already present.
        """
        ...

    async def update(self, entity_context: EntityContext) -> None:
        """Replace exactly one present entity, located by its identity.

        May raise if the entity is absent.
        """
        ...

    async def remove(self, entity_contexts: Sequence[EntityContext]) -> None:
        """Remove the given entities. May raise if any of them is absent."""
        ...

    async def remove_matching(self, specification: Specification) -> None:
        """Remove every entity matching *specification* in one operation."""
        ...


@runtime_checkable
class DataSourceServant(Protocol[T]):
    """Turns domain entities into persistable mappings and back.

    ``deserialize(serialize(entity))`` must equal *entity* for every field
    the data source persists.
    """

    @property
    def id_field_names(self) -> Sequence[str]:
        """Fields that together identify an entity."""
        ...

    def serialize(self, entity: T) -> dict[str, Any]: ...

    def deserialize(self, entity: Mapping[str, Any]) -> T: ...
