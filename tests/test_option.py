"""Tests for Option type (Some and Nothing)."""

from hypothesis import given
from hypothesis import strategies as st

from fallible import Failure, Nothing, NothingType, Some, Success, from_nullable


class TestOptionQuerying:
    def test_some(self):
        assert Some(1).is_some() is True
        assert Some(1).is_none() is False

    def test_nothing(self):
        assert Nothing.is_some() is False
        assert Nothing.is_none() is True

    def test_nothing_is_singleton_value(self):
        assert NothingType() == Nothing


class TestOptionTransform:
    def test_some_map(self):
        assert Some(2).map(lambda x: x * 2) == Some(4)

    def test_nothing_map(self):
        assert Nothing.map(lambda x: x * 2) is Nothing

    def test_some_flat_map(self):
        assert Some(2).flat_map(lambda x: Nothing) is Nothing
        assert Some(2).flat_map(lambda x: Some(x + 1)) == Some(3)

    def test_nothing_flat_map(self):
        assert Nothing.flat_map(lambda x: Some(x)) is Nothing

    def test_filter(self):
        assert Some(4).filter(lambda x: x > 3) == Some(4)
        assert Some(2).filter(lambda x: x > 3) is Nothing
        assert Nothing.filter(lambda x: True) is Nothing

    def test_unwrap_or(self):
        assert Some(1).unwrap_or(0) == 1
        assert Nothing.unwrap_or(0) == 0
        assert Nothing.unwrap_or_else(lambda: 7) == 7


class TestOptionToOutcome:
    def test_some_to_outcome(self):
        assert Some("Bobby").to_outcome("missing") == Success("Bobby")

    def test_nothing_to_outcome(self):
        assert Nothing.to_outcome("missing") == Failure("missing")

    def test_to_outcome_else_is_lazy(self):
        calls = []
        assert Some(1).to_outcome_else(lambda: calls.append("x")) == Success(1)
        assert calls == []
        assert Nothing.to_outcome_else(lambda: "computed") == Failure("computed")


class TestFromNullable:
    def test_none_is_nothing(self):
        assert from_nullable(None) is Nothing

    @given(st.integers())
    def test_value_is_some(self, value: int):
        assert from_nullable(value) == Some(value)

    def test_falsy_values_are_some(self):
        assert from_nullable(0) == Some(0)
        assert from_nullable("") == Some("")
