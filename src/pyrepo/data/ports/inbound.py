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
"""Inbound ports: the capabilities a collection offers to application code.

Querying and mutating are separate capabilities. A read-only collection
provides :class:`QueryableCollection`; a full collection provides both.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from pyrepo.data.specification import Specification

T = TypeVar("T")


@runtime_checkable
class QueryableCollection(Protocol[T]):
    """Look up entities by specification."""

    async def find_all(self, specification: Specification) -> Sequence[T]: ...

    async def find_one(self, specification: Specification) -> T: ...

    async def find_first(self, specification: Specification) -> T: ...


@runtime_checkable
class MutableCollection(Protocol[T]):
    """Add, update and remove entities."""

    async def add(self, entity: T) -> None: ...

    async def add_all(self, entities: Iterable[T]) -> None: ...

    async def update(self, entity: T) -> None: ...

    async def remove_one(self, entity: T) -> None: ...

    async def remove_all(self, entities: Iterable[T]) -> None: ...

    async def remove(self, specification: Specification) -> None: ...
