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
"""Query predicate nodes and ordering definitions.

A :class:`Condition` is either a *leaf* that compares one entity field with a
value, or a *combinator* (``AND`` / ``OR``) over child conditions. Together
they form the predicate tree a storage backend interprets.

Example::

    adult = Condition.greater_than("age", 17)
    local = Condition.equals("city", "Lisbon") | Condition.equals("city", "Porto")
    both = adult & local   # Condition.and_([adult, local])

Empty combinators are legal. Backends must treat an empty ``AND`` as always
true and an empty ``OR`` as always false, the identity elements of the two
operations. :attr:`ConditionType.identity` exposes that value.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pyrepo.data.equality import sequence_equals, structural_hash


class ConditionType(Enum):
    """Comparison or combination performed by a :class:`Condition`."""

    EQUALS = "equals"
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"
    CONTAINS = "contains"
    CONTAINS_IGNORE_CASE = "contains_ignore_case"
    AND = "and"
    OR = "or"

    @property
    def is_combinator(self) -> bool:
        """Whether conditions of this type combine children instead of comparing a field."""
        return self in (ConditionType.AND, ConditionType.OR)

    @property
    def identity(self) -> bool | None:
        """Truth value of a combinator with no children.

        ``True`` for ``AND``, ``False`` for ``OR`` and ``None`` for leaf types.
        """
        if self is ConditionType.AND:
            return True
        if self is ConditionType.OR:
            return False
        return None


@dataclass(frozen=True, eq=False)
class Condition:
    """A single node of a predicate tree.

    Attributes:
        type: Comparison or combination applied by this node.
        field: Entity field checked by a leaf; ``None`` for combinators.
        value: Value the field is compared with; ``None`` for combinators.
        children: Child conditions of a combinator; empty for leaves.
    """

    type: ConditionType
    field: str | None = None
    value: Any = None
    children: tuple[Condition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        if self.type.is_combinator:
            if self.field is not None or self.value is not None:
                raise ValueError(f"{self.type.value} condition cannot carry a field or value")
        else:
            if self.field is None:
                raise ValueError(f"{self.type.value} condition requires a field")
            if self.children:
                raise ValueError(f"{self.type.value} condition cannot have children")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def equals(cls, field: str, value: Any) -> Condition:
        """Match entities whose *field* equals *value*."""
        return cls(ConditionType.EQUALS, field, value)

    @classmethod
    def less_than(cls, field: str, value: Any) -> Condition:
        """Match entities whose *field* is less than *value*."""
        return cls(ConditionType.LESS_THAN, field, value)

    @classmethod
    def greater_than(cls, field: str, value: Any) -> Condition:
        """Match entities whose *field* is greater than *value*."""
        return cls(ConditionType.GREATER_THAN, field, value)

    @classmethod
    def contains(cls, field: str, value: Any, ignore_case: bool = False) -> Condition:
        """Match entities whose *field* "contains" *value*.

        What "contains" means (substring, membership, ...) is up to the
        backend and the field's type. With *ignore_case* string checks
        disregard letter case.
        """
        kind = ConditionType.CONTAINS_IGNORE_CASE if ignore_case else ConditionType.CONTAINS
        return cls(kind, field, value)

    @classmethod
    def and_(cls, children: Iterable[Condition]) -> Condition:
        """Match entities matched by every child. Empty means always true."""
        return cls(ConditionType.AND, children=tuple(children))

    @classmethod
    def or_(cls, children: Iterable[Condition]) -> Condition:
        """Match entities matched by at least one child. Empty means always false."""
        return cls(ConditionType.OR, children=tuple(children))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def __and__(self, other: Condition) -> Condition:
        return Condition.and_([self, other])

    def __or__(self, other: Condition) -> Condition:
        return Condition.or_([self, other])

    @property
    def is_leaf(self) -> bool:
        return not self.type.is_combinator

    @property
    def is_combinator(self) -> bool:
        return self.type.is_combinator

    @property
    def is_vacuous(self) -> bool:
        """Whether this is a combinator without children."""
        return self.is_combinator and not self.children

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Condition):
            return NotImplemented
        return (
            self.type is other.type
            and self.field == other.field
            and self.value == other.value
            and sequence_equals(self.children, other.children)
        )

    def __hash__(self) -> int:
        return structural_hash(self.type, self.field, self.value, self.children)


class Direction(Enum):
    """Sort direction of an :class:`Order`."""

    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True, eq=False)
class Order:
    """A single ordering definition: field name plus direction."""

    field: str
    direction: Direction = Direction.ASCENDING

    @staticmethod
    def ascending(field: str) -> Order:
        return Order(field, Direction.ASCENDING)

    @staticmethod
    def descending(field: str) -> Order:
        return Order(field, Direction.DESCENDING)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Order):
            return NotImplemented
        return self.field == other.field and self.direction is other.direction

    def __hash__(self) -> int:
        return structural_hash(self.field, self.direction)
