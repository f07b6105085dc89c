"""Tests for the @safe decorator."""

import pytest

from fallible import Failure, Success, safe


class TestSafe:
    def test_returns_success(self):
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Success(5.0)

    def test_catches_exception(self):
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        outcome = divide(10, 0)
        assert outcome.is_failure()
        assert isinstance(outcome.error, ZeroDivisionError)

    def test_specific_exceptions(self):
        @safe(exceptions=(KeyError,))
        def lookup(key: str) -> int:
            return {"a": 1}[key]

        assert lookup("a") == Success(1)
        assert isinstance(lookup("b"), Failure)

    def test_uncaught_exception_propagates(self):
        @safe(exceptions=(KeyError,))
        def explode() -> None:
            raise ValueError("not a key error")

        with pytest.raises(ValueError, match="not a key error"):
            explode()

    def test_preserves_metadata(self):
        @safe
        def documented() -> int:
            """Docstring kept."""
            return 1

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring kept."

    def test_method(self):
        class Parser:
            base = 10

            @safe
            def parse(self, text: str) -> int:
                return int(text, self.base)

        assert Parser().parse("12") == Success(12)
        assert isinstance(Parser().parse("x").error, ValueError)
