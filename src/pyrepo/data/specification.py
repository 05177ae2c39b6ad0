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
"""Immutable query descriptor: conditions, ordering and pagination.

A :class:`Specification` describes which entities of a collection to select.
Its top-level conditions are combined with AND. Every combinator returns a
new specification and leaves the receiver untouched, so a specification can
be shared freely between callers.

Example::

    base = Specification().equals("city", "Lisbon").greater_than("age", 17)
    page = base.append_order_definition(Order.descending("age")).page(2, 20)

    # base is unchanged; page adds ordering, limit=20 and offset=20
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pyrepo.data.condition import Condition, Order
from pyrepo.data.equality import sequence_equals, structural_hash


@dataclass(frozen=True, eq=False)
class Specification:
    """A set of conditions, ordering definitions and optional limit/offset.

    Attributes:
        conditions: Conditions an entity must all satisfy.
        order_definitions: Ordering applied to the results, first one wins.
        limit: Maximum number of results, or ``None`` when unset.
        offset: Number of leading results to skip, or ``None`` when unset.
    """

    conditions: tuple[Condition, ...] = ()
    order_definitions: tuple[Order, ...] = ()
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))
        object.__setattr__(self, "order_definitions", tuple(self.order_definitions))
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if self.offset is not None and self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    # ------------------------------------------------------------------
    # Query by example
    # ------------------------------------------------------------------

    @classmethod
    def by(cls, **fields: Any) -> Specification:
        """Create a specification of ``equals`` conditions from keyword arguments."""
        return cls(conditions=tuple(Condition.equals(name, value) for name, value in fields.items()))

    @classmethod
    def from_dict(cls, filters: Mapping[str, Any]) -> Specification:
        """Create a specification of ``equals`` conditions from a mapping.

        ``None`` values are skipped.
        """
        return cls(
            conditions=tuple(
                Condition.equals(name, value) for name, value in filters.items() if value is not None
            )
        )

    @classmethod
    def from_example(cls, example: Any) -> Specification:
        """Create a specification from the non-``None`` fields of an example object.

        Supports dataclass instances and any object with ``__dict__``.
        """
        if dataclasses.is_dataclass(example) and not isinstance(example, type):
            values = {f.name: getattr(example, f.name) for f in dataclasses.fields(example)}
        else:
            values = vars(example)
        return cls.from_dict(values)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def add(self, condition: Condition) -> Specification:
        """Return a copy with *condition* appended."""
        return dataclasses.replace(self, conditions=(*self.conditions, condition))

    def equals(self, field: str, value: Any) -> Specification:
        """Select entities whose *field* is equal to *value*."""
        return self.add(Condition.equals(field, value))

    def less_than(self, field: str, value: Any) -> Specification:
        """Select entities whose *field* is less than *value*."""
        return self.add(Condition.less_than(field, value))

    def greater_than(self, field: str, value: Any) -> Specification:
        """Select entities whose *field* is greater than *value*."""
        return self.add(Condition.greater_than(field, value))

    def contains(self, field: str, value: Any, ignore_case: bool = False) -> Specification:
        """Select entities whose *field* "contains" *value*.

        The meaning depends on the field's type; for strings it is a
        substring check. *ignore_case* disables case sensitivity of string
        checks.
        """
        return self.add(Condition.contains(field, value, ignore_case=ignore_case))

    def append_order_definition(self, order: Order) -> Specification:
        """Return a copy with *order* appended to the ordering definitions."""
        return dataclasses.replace(self, order_definitions=(*self.order_definitions, order))

    def set_limit(self, limit: int | None) -> Specification:
        return dataclasses.replace(self, limit=limit)

    def set_offset(self, offset: int | None) -> Specification:
        return dataclasses.replace(self, offset=offset)

    def page(self, page: int, size: int) -> Specification:
        """Return a copy limited to the 1-based *page* of *size* results."""
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")
        return dataclasses.replace(self, limit=size, offset=(page - 1) * size)

    @property
    def leaf_fields(self) -> frozenset[str]:
        """Fields named by the top-level leaf conditions."""
        return frozenset(c.field for c in self.conditions if c.is_leaf and c.field is not None)

    def insert_conditions_from(self, other: Specification) -> Specification:
        """Override this specification's leaf conditions with *other*'s.

        Every top-level leaf condition whose field also appears on one of
        *other*'s leaf conditions is dropped, then all of *other*'s
        conditions are appended in their original order. Combinators are
        never overridden since they carry no field. Ordering, limit and
        offset of this specification are kept.
        """
        overridden = other.leaf_fields
        kept = tuple(c for c in self.conditions if not (c.is_leaf and c.field in overridden))
        return dataclasses.replace(self, conditions=kept + other.conditions)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Specification):
            return NotImplemented
        return (
            sequence_equals(self.conditions, other.conditions)
            and sequence_equals(self.order_definitions, other.order_definitions)
            and self.limit == other.limit
            and self.offset == other.offset
        )

    def __hash__(self) -> int:
        return structural_hash(self.conditions, self.order_definitions, self.limit, self.offset)
