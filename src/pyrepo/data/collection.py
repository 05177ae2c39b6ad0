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
"""Collections: typed CRUD façades over a pluggable data source.

:class:`ImmutableCollection` answers queries. :class:`Collection` answers
queries through an :class:`ImmutableCollection` it owns and adds the
mutations. Neither keeps state beyond the injected data source, servant and
properties, and neither retries, caches or reorders anything: each call is a
single round trip to the data source.

Any exception raised by the data source or the servant is wrapped exactly
once into a :class:`~pyrepo.data.errors.CollectionFault` with the original
exception as its cause. Cancellation (``asyncio.CancelledError``) is not an
``Exception`` and passes through untouched.

Example::

    people = Collection(data_source, DataclassServant(Person, ["id"]))
    await people.add_all([alice, bob])
    adults = await people.find_all(Specification().greater_than("age", 17))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from pyrepo.data.entity_context import EntityContext
from pyrepo.data.errors import CollectionFault
from pyrepo.data.messages import FaultMessageRenderer
from pyrepo.data.ports.outbound import DataSource, DataSourceServant, ReadonlyDataSource
from pyrepo.data.properties import CollectionProperties
from pyrepo.data.specification import Specification

T = TypeVar("T")

logger = logging.getLogger(__name__)


class _FaultReporter:
    """Renders and logs faults before they leave a collection."""

    def __init__(self, properties: CollectionProperties) -> None:
        self._renderer = FaultMessageRenderer(properties.message_entity_limit)
        self._log_faults = properties.log_faults

    def report(self, fault: CollectionFault) -> CollectionFault:
        fault.with_message(self._renderer.render(fault))
        if self._log_faults:
            logger.warning("Collection fault (%s): %s", fault.code, fault.message)
        return fault


class ImmutableCollection(Generic[T]):
    """A collection that can only be queried.

    Suits data sources an application only reads from, such as reference
    data or a third-party API.

    Args:
        data_source: Where the entities are read from.
        servant: Turns stored mappings back into entities.
        properties: Collection settings; defaults apply when omitted.
    """

    def __init__(
        self,
        data_source: ReadonlyDataSource,
        servant: DataSourceServant[T],
        properties: CollectionProperties | None = None,
    ) -> None:
        self._data_source = data_source
        self._servant = servant
        self._reporter = _FaultReporter(properties or CollectionProperties())

    async def find_all(self, specification: Specification) -> list[T]:
        """Find every entity matching *specification*.

        An empty result is not an error.

        Raises:
            CollectionFault: ``LOOKUP`` if the data source or the servant fails.
        """
        try:
            rows = await self._data_source.find(specification)
            entities = [self._servant.deserialize(row) for row in rows]
        except Exception as exc:
            raise self._reporter.report(CollectionFault.lookup(specification, exc)) from exc
        logger.debug("find_all matched %d entities", len(entities))
        return entities

    async def find_one(self, specification: Specification) -> T:
        """Find the only entity matching *specification*.

        Raises:
            CollectionFault: ``CARDINALITY`` unless exactly one entity matches,
                ``LOOKUP`` if the lookup itself fails.
        """
        entities = await self.find_all(specification)
        if len(entities) != 1:
            raise self._reporter.report(CollectionFault.cardinality(1, len(entities), specification))
        return entities[0]

    async def find_first(self, specification: Specification) -> T:
        """Find the first entity matching *specification*.

        "First" follows the order returned by the data source. Several
        matches are fine here, unlike :meth:`find_one`.

        Raises:
            CollectionFault: ``CARDINALITY`` if nothing matches, ``LOOKUP``
                if the lookup itself fails.
        """
        entities = await self.find_all(specification)
        if not entities:
            raise self._reporter.report(CollectionFault.cardinality(1, 0, specification))
        return entities[0]


class Collection(Generic[T]):
    """A collection of entities that stores copies of them.

    Since the data source keeps copies, changing an entity obtained from the
    collection has no effect until it is passed to :meth:`update`.

    Args:
        data_source: Where the entities are stored.
        servant: Serializes and deserializes the entities.
        properties: Collection settings; defaults apply when omitted.
    """

    def __init__(
        self,
        data_source: DataSource,
        servant: DataSourceServant[T],
        properties: CollectionProperties | None = None,
    ) -> None:
        resolved = properties or CollectionProperties()
        self._data_source = data_source
        self._servant = servant
        self._reporter = _FaultReporter(resolved)
        self._queries: ImmutableCollection[T] = ImmutableCollection(data_source, servant, resolved)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def find_all(self, specification: Specification) -> list[T]:
        return await self._queries.find_all(specification)

    async def find_one(self, specification: Specification) -> T:
        return await self._queries.find_one(specification)

    async def find_first(self, specification: Specification) -> T:
        return await self._queries.find_first(specification)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def add(self, entity: T) -> None:
        """Add *entity* to the collection."""
        try:
            await self._data_source.create([self._create_entity_context(entity)])
        except Exception as exc:
            raise self._modification_fault("add", [entity], exc) from exc

    async def add_all(self, entities: Iterable[T]) -> None:
        """Add all *entities* with a single data source call."""
        batch = list(entities)
        try:
            await self._data_source.create([self._create_entity_context(e) for e in batch])
        except Exception as exc:
            raise self._modification_fault("add", batch, exc) from exc
        logger.debug("add_all stored %d entities", len(batch))

    async def update(self, entity: T) -> None:
        """Propagate changes of *entity*, already present in the collection."""
        try:
            await self._data_source.update(self._create_entity_context(entity))
        except Exception as exc:
            raise self._modification_fault("update", [entity], exc) from exc

    async def remove_one(self, entity: T) -> None:
        """Remove *entity* from the collection."""
        try:
            await self._data_source.remove([self._create_entity_context(entity)])
        except Exception as exc:
            raise self._modification_fault("remove", [entity], exc) from exc

    async def remove_all(self, entities: Iterable[T]) -> None:
        """Remove all *entities* with a single data source call."""
        batch = list(entities)
        try:
            await self._data_source.remove([self._create_entity_context(e) for e in batch])
        except Exception as exc:
            raise self._modification_fault("remove", batch, exc) from exc
        logger.debug("remove_all removed %d entities", len(batch))

    async def remove(self, specification: Specification) -> None:
        """Remove every entity matching *specification*."""
        try:
            await self._data_source.remove_matching(specification)
        except Exception as exc:
            raise self._reporter.report(
                CollectionFault.modification_specification("remove", specification, exc)
            ) from exc

    def _modification_fault(self, action: str, entities: Sequence[T], cause: Exception) -> CollectionFault:
        return self._reporter.report(CollectionFault.modification_entities(action, entities, cause))

    def _create_entity_context(self, entity: T) -> EntityContext:
        return EntityContext(self._servant.serialize(entity), tuple(self._servant.id_field_names))
