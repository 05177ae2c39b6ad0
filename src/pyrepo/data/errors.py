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
"""The single fault type raised by collections.

Every failure observed through a collection is a :class:`CollectionFault`.
Its :attr:`~CollectionFault.kind` tells what went wrong and the structured
fields carry the context of the failed call. Human-readable messages are
produced by :class:`~pyrepo.data.messages.FaultMessageRenderer`, not by the
fault itself.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pyrepo.data.specification import Specification
from pyrepo.kernel.exceptions import PyRepoException


class FaultKind(Enum):
    """What kind of collection operation failed."""

    LOOKUP = "lookup"
    CARDINALITY = "cardinality"
    MODIFICATION_ENTITIES = "modification_entities"
    MODIFICATION_SPECIFICATION = "modification_specification"

    @property
    def code(self) -> str:
        return f"COLLECTION_{self.name}"


class CollectionFault(PyRepoException):
    """A collection operation failed.

    Args:
        kind: The kind of failure.
        specification: Specification used by a lookup or a removal.
        entities: Entities passed to a failed modification.
        action: Name of the failed modification (``"add"``, ``"update"``,
            ``"remove"``).
        expected: Number of entities a lookup expected to find.
        actual: Number of entities a lookup actually found.
        cause: The underlying exception, if any.
        message: Rendered message. Rendered on demand when omitted.
    """

    def __init__(
        self,
        kind: FaultKind,
        *,
        specification: Specification | None = None,
        entities: Iterable[Any] = (),
        action: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
        cause: BaseException | None = None,
        message: str = "",
    ) -> None:
        self.kind = kind
        self.specification = specification
        self.entities: tuple[Any, ...] = tuple(entities)
        self.action = action
        self.expected = expected
        self.actual = actual
        self.cause = cause
        context = {
            "kind": kind.value,
            "specification": specification,
            "entities": self.entities,
            "action": action,
            "expected": expected,
            "actual": actual,
            "cause": cause,
        }
        super().__init__(
            message,
            code=kind.code,
            context={key: value for key, value in context.items() if value is not None and value != ()},
        )
        self.message = message

    @classmethod
    def lookup(cls, specification: Specification, cause: BaseException) -> CollectionFault:
        """The data source failed to find entities using *specification*."""
        return cls(FaultKind.LOOKUP, specification=specification, cause=cause)

    @classmethod
    def cardinality(cls, expected: int, actual: int, specification: Specification) -> CollectionFault:
        """*actual* entities matched *specification* while *expected* were required."""
        return cls(FaultKind.CARDINALITY, specification=specification, expected=expected, actual=actual)

    @classmethod
    def modification_entities(
        cls, action: str, entities: Iterable[Any], cause: BaseException
    ) -> CollectionFault:
        """The data source failed to *action* the given entities."""
        return cls(FaultKind.MODIFICATION_ENTITIES, action=action, entities=entities, cause=cause)

    @classmethod
    def modification_specification(
        cls, action: str, specification: Specification, cause: BaseException
    ) -> CollectionFault:
        """The data source failed to *action* the entities matching *specification*."""
        return cls(
            FaultKind.MODIFICATION_SPECIFICATION,
            action=action,
            specification=specification,
            cause=cause,
        )

    def with_message(self, message: str) -> CollectionFault:
        """Attach a rendered *message* to this fault and return it."""
        self.message = message
        self.args = (message,)
        return self

    def __str__(self) -> str:
        if self.message:
            return self.message
        from pyrepo.data.messages import FaultMessageRenderer

        return FaultMessageRenderer().render(self)
