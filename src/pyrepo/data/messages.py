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
"""Human-readable messages for collection faults."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pyrepo.data.errors import CollectionFault, FaultKind


def _describe(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)


def _reason(cause: BaseException | None) -> str:
    try:
        return str(cause)
    except Exception:
        return object.__repr__(cause)


class FaultMessageRenderer:
    """Render a :class:`~pyrepo.data.errors.CollectionFault` as text.

    Rendering never raises: an entity, specification or cause whose
    ``repr``/``str`` fails is shown by its type and address instead.

    Args:
        entity_limit: Maximum number of entities listed in a modification
            message before the rest is summarised as ``... (+N more)``.
    """

    def __init__(self, entity_limit: int = 10) -> None:
        if entity_limit < 1:
            raise ValueError(f"entity_limit must be >= 1, got {entity_limit}")
        self._entity_limit = entity_limit

    def render(self, fault: CollectionFault) -> str:
        kind = fault.kind
        specification = _describe(fault.specification)
        if kind is FaultKind.LOOKUP:
            return f"Failed to find entities using {specification}. Reason: {_reason(fault.cause)}"
        if kind is FaultKind.CARDINALITY:
            return f"Found {fault.actual} entities using {specification}. Expected to find {fault.expected}."
        if kind is FaultKind.MODIFICATION_ENTITIES:
            entities = self.format_entities(fault.entities)
            return f"Failed to {fault.action} {entities}. Reason: {_reason(fault.cause)}"
        return f"Failed to {fault.action} entities using {specification}. Reason: {_reason(fault.cause)}"

    def format_entities(self, entities: Sequence[Any]) -> str:
        shown = ", ".join(_describe(entity) for entity in entities[: self._entity_limit])
        hidden = len(entities) - self._entity_limit
        if hidden > 0:
            return f"[{shown}, ... (+{hidden} more)]"
        return f"[{shown}]"
