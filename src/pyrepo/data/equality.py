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
"""Structural equality helpers shared by the query value objects.

Conditions, orders, specifications and entity contexts compare by value,
never by identity. Sequences compare element by element in order, so
``[a, b]`` and ``[b, a]`` are different.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
from typing import Any


def sequence_equals(left: Iterable[Any], right: Iterable[Any]) -> bool:
    """Order-sensitive element-wise equality of two iterables."""
    left_items = tuple(left)
    right_items = tuple(right)
    if len(left_items) != len(right_items):
        return False
    return all(a == b for a, b in zip(left_items, right_items))


def freeze(value: Any) -> Any:
    """Return a hashable stand-in for *value*.

    Mappings, sets and non-string sequences are converted recursively so
    that values such as ``["a", "b"]`` used with ``contains`` can take part
    in a structural hash.
    """
    if isinstance(value, Mapping):
        return frozenset((key, freeze(item)) for key, item in value.items())
    if isinstance(value, Set):
        return frozenset(freeze(item) for item in value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return tuple(freeze(item) for item in value)
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value


def structural_hash(*parts: Any) -> int:
    """Hash a tuple of parts after freezing each of them."""
    return hash(tuple(freeze(part) for part in parts))
