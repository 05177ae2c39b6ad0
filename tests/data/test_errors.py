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
"""Tests for CollectionFault and FaultMessageRenderer."""

from __future__ import annotations

import pytest

from pyrepo.data.errors import CollectionFault, FaultKind
from pyrepo.data.messages import FaultMessageRenderer
from pyrepo.data.specification import Specification
from pyrepo.kernel.exceptions import PyRepoException


@pytest.fixture
def specification() -> Specification:
    return Specification().equals("name", "Ada")


class TestCollectionFault:
    def test_lookup(self, specification: Specification):
        cause = RuntimeError("connection reset")
        fault = CollectionFault.lookup(specification, cause)
        assert fault.kind is FaultKind.LOOKUP
        assert fault.specification == specification
        assert fault.cause is cause
        assert fault.code == "COLLECTION_LOOKUP"

    def test_cardinality(self, specification: Specification):
        fault = CollectionFault.cardinality(1, 3, specification)
        assert fault.kind is FaultKind.CARDINALITY
        assert (fault.expected, fault.actual) == (1, 3)
        assert fault.cause is None
        assert fault.context == {
            "kind": "cardinality",
            "specification": specification,
            "expected": 1,
            "actual": 3,
        }

    def test_modification_entities(self):
        cause = KeyError("id")
        fault = CollectionFault.modification_entities("add", iter(["a", "b"]), cause)
        assert fault.kind is FaultKind.MODIFICATION_ENTITIES
        assert fault.action == "add"
        assert fault.entities == ("a", "b")
        assert fault.specification is None

    def test_modification_specification(self, specification: Specification):
        fault = CollectionFault.modification_specification("remove", specification, ValueError("x"))
        assert fault.kind is FaultKind.MODIFICATION_SPECIFICATION
        assert fault.code == "COLLECTION_MODIFICATION_SPECIFICATION"
        assert fault.context["action"] == "remove"

    def test_is_pyrepo_exception(self, specification: Specification):
        assert isinstance(CollectionFault.cardinality(1, 0, specification), PyRepoException)

    def test_unrendered_fault_renders_on_str(self, specification: Specification):
        fault = CollectionFault.cardinality(1, 0, specification)
        assert str(fault).startswith("Found 0 entities using Specification(")

    def test_rendered_message_wins(self, specification: Specification):
        fault = CollectionFault.cardinality(1, 0, specification)
        fault.message = "nothing here"
        assert str(fault) == "nothing here"

    def test_with_message_sets_args(self, specification: Specification):
        fault = CollectionFault.cardinality(1, 0, specification).with_message("nothing here")
        assert fault.message == "nothing here"
        assert fault.args == ("nothing here",)


class TestFaultMessageRenderer:
    def test_lookup_message(self, specification: Specification):
        message = FaultMessageRenderer().render(CollectionFault.lookup(specification, RuntimeError("boom")))
        assert message == f"Failed to find entities using {specification!r}. Reason: boom"

    def test_cardinality_message(self, specification: Specification):
        message = FaultMessageRenderer().render(CollectionFault.cardinality(1, 2, specification))
        assert message == f"Found 2 entities using {specification!r}. Expected to find 1."

    def test_modification_entities_message(self):
        fault = CollectionFault.modification_entities("update", ["a"], RuntimeError("absent"))
        assert FaultMessageRenderer().render(fault) == "Failed to update ['a']. Reason: absent"

    def test_modification_specification_message(self, specification: Specification):
        fault = CollectionFault.modification_specification("remove", specification, RuntimeError("locked"))
        assert FaultMessageRenderer().render(fault) == (
            f"Failed to remove entities using {specification!r}. Reason: locked"
        )

    def test_entities_are_truncated(self):
        fault = CollectionFault.modification_entities("add", range(5), RuntimeError("full"))
        message = FaultMessageRenderer(entity_limit=2).render(fault)
        assert message == "Failed to add [0, 1, ... (+3 more)]. Reason: full"

    def test_failing_repr_falls_back_to_identity(self):
        class Opaque:
            def __repr__(self) -> str:
                raise ValueError("no repr")

        fault = CollectionFault.modification_entities("remove", [Opaque()], RuntimeError("gone"))
        message = FaultMessageRenderer().render(fault)
        assert message.startswith("Failed to remove [<")
        assert "Opaque object at 0x" in message
        assert message.endswith("Reason: gone")

    def test_entity_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            FaultMessageRenderer(entity_limit=0)
