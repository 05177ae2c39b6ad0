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
"""Tests for Condition and Order — predicate nodes and ordering definitions."""

from __future__ import annotations

import pytest

from pyrepo.data.condition import Condition, ConditionType, Direction, Order


class TestLeafConditions:
    def test_equals(self):
        condition = Condition.equals("field1", 15)
        assert condition.type is ConditionType.EQUALS
        assert condition.field == "field1"
        assert condition.value == 15
        assert condition.children == ()

    def test_less_than(self):
        assert Condition.less_than("field2", 32.2).type is ConditionType.LESS_THAN

    def test_greater_than(self):
        assert Condition.greater_than("field3", -5).type is ConditionType.GREATER_THAN

    def test_contains_is_case_sensitive_by_default(self):
        assert Condition.contains("field4", "word").type is ConditionType.CONTAINS

    def test_contains_ignore_case(self):
        condition = Condition.contains("field5", "WoRD", ignore_case=True)
        assert condition.type is ConditionType.CONTAINS_IGNORE_CASE
        assert condition.value == "WoRD"

    def test_field_and_value_are_not_validated(self):
        condition = Condition.equals("", object)
        assert condition.field == ""

    def test_leaf_is_not_combinator(self):
        condition = Condition.equals("a", 1)
        assert condition.is_leaf
        assert not condition.is_combinator
        assert not condition.is_vacuous


class TestCombinatorConditions:
    def test_or_with_two_and_children(self):
        and1 = Condition.and_([])
        and2 = Condition.and_([])
        condition = Condition.or_([and1, and2])
        assert condition.type is ConditionType.OR
        assert condition.field is None
        assert condition.value is None
        assert condition.children == (and1, and2)

    def test_children_accept_any_iterable(self):
        condition = Condition.and_(Condition.equals(f, 1) for f in ("a", "b"))
        assert condition.children == (Condition.equals("a", 1), Condition.equals("b", 1))

    def test_operators_build_combinators(self):
        a = Condition.equals("a", 1)
        b = Condition.equals("b", 2)
        assert a & b == Condition.and_([a, b])
        assert a | b == Condition.or_([a, b])

    def test_combinator_rejects_field(self):
        with pytest.raises(ValueError):
            Condition(ConditionType.AND, field="name")

    def test_leaf_requires_field(self):
        with pytest.raises(ValueError):
            Condition(ConditionType.EQUALS, value=1)

    def test_leaf_rejects_children(self):
        with pytest.raises(ValueError):
            Condition(ConditionType.EQUALS, "a", 1, (Condition.equals("b", 2),))


class TestVacuousCombinators:
    """An empty AND is always true, an empty OR is always false."""

    def test_empty_and_identity_is_true(self):
        condition = Condition.and_([])
        assert condition.is_vacuous
        assert condition.type.identity is True

    def test_empty_or_identity_is_false(self):
        condition = Condition.or_([])
        assert condition.is_vacuous
        assert condition.type.identity is False

    def test_leaf_types_have_no_identity(self):
        leaf_types = [t for t in ConditionType if not t.is_combinator]
        assert len(leaf_types) == 5
        assert all(t.identity is None for t in leaf_types)

    def test_non_empty_combinator_is_not_vacuous(self):
        assert not Condition.or_([Condition.equals("a", 1)]).is_vacuous


class TestConditionEquality:
    def test_structurally_equal(self):
        assert Condition.equals("a", 1) == Condition.equals("a", 1)
        assert hash(Condition.equals("a", 1)) == hash(Condition.equals("a", 1))

    def test_different_type_not_equal(self):
        assert Condition.less_than("a", 1) != Condition.greater_than("a", 1)

    def test_nested_children_compare_by_value(self):
        left = Condition.or_([Condition.equals("family", True), Condition.and_([])])
        right = Condition.or_([Condition.equals("family", True), Condition.and_([])])
        assert left == right
        assert left is not right

    def test_children_order_matters(self):
        a = Condition.equals("a", 1)
        b = Condition.equals("b", 2)
        assert Condition.or_([a, b]) != Condition.or_([b, a])

    def test_unhashable_value_can_be_hashed(self):
        condition = Condition.contains("tags", ["x", "y"])
        assert hash(condition) == hash(Condition.contains("tags", ["x", "y"]))
        assert condition in {condition}

    def test_not_equal_to_other_types(self):
        assert Condition.equals("a", 1) != ("a", 1)


class TestOrder:
    def test_ascending(self):
        order = Order.ascending("field1")
        assert order.field == "field1"
        assert order.direction is Direction.ASCENDING

    def test_descending(self):
        assert Order.descending("field2").direction is Direction.DESCENDING

    def test_default_direction_is_ascending(self):
        assert Order("name") == Order.ascending("name")

    def test_structural_equality(self):
        assert Order.descending("x") == Order.descending("x")
        assert hash(Order.descending("x")) == hash(Order.descending("x"))
        assert Order.descending("x") != Order.ascending("x")
