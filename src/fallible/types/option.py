"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeIs

import msgspec

if TYPE_CHECKING:
    from fallible.types.outcome import Failure, Success

__all__ = ["Nothing", "NothingType", "Option", "Some", "from_nullable"]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).to_outcome("missing")
        Success(value=3)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value."""
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def to_outcome[E](self, _error: E) -> Success[T]:
        """Convert to Outcome, returning Success(value)."""
        from fallible.types.outcome import Success

        return Success(self.value)

    def to_outcome_else[E](self, _f: Callable[[], E]) -> Success[T]:
        """Convert to Outcome without calling the error factory."""
        from fallible.types.outcome import Success

        return Success(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing."""
        return True

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def to_outcome[E](self, error: E) -> Failure[E]:
        """Convert to Outcome, returning Failure(error)."""
        from fallible.types.outcome import Failure

        return Failure(error)

    def to_outcome_else[E](self, f: Callable[[], E]) -> Failure[E]:
        """Convert to Outcome, computing the error."""
        from fallible.types.outcome import Failure

        return Failure(f())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_nullable[T](value: T | None) -> Some[T] | NothingType:
    """Lift a plain optional value: None becomes Nothing."""
    if value is None:
        return Nothing
    return Some(value)
