"""Outcome type: Success[S] | Failure[F] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from fallible.types.option import Option

__all__ = ["Failure", "Outcome", "Success", "collect", "pure", "successes"]


class Success[S](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Outcome containing a value of type S.

    Every transformation returns a new Outcome; a Success is never
    modified in place.

    Examples:
        >>> Success(42).map(lambda x: x * 2)
        Success(value=84)
        >>> Success(42).replace("done")
        Success(value='done')
    """

    value: S

    def is_successful(self) -> TypeIs[Success[S]]:
        """Return True since this is Success.

        This method provides type narrowing - after checking is_successful(),
        the type checker knows the outcome is Success[S].
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def to_optional(self) -> Option[S]:
        """Convert to Option, returning Some(value)."""
        from fallible.types.option import Some

        return Some(self.value)

    def map[U](self, f: Callable[[S], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Success value.

        Returns:
            Success containing the result of applying f to the value.
        """
        return Success(f(self.value))

    def map_error[G](self, _f: Callable[[object], G]) -> Success[S]:
        """Return self unchanged since this is Success."""
        return self

    def flat_map[U, F](self, f: Callable[[S], Success[U] | Failure[F]]) -> Success[U] | Failure[F]:
        """Apply a function that returns an Outcome to the contained value.

        Also known as bind or and_then.

        Args:
            f: Function that takes S and returns Outcome[U, F].

        Returns:
            The Outcome returned by f.
        """
        return f(self.value)

    def flat_map_error[G](self, _f: Callable[[object], Success[S] | Failure[G]]) -> Success[S]:
        """Return self unchanged since there is nothing to recover from."""
        return self

    def replace[U](self, new_value: U) -> Success[U]:
        """Discard the contained value in favour of new_value."""
        return Success(new_value)

    def on_each(
        self,
        on_success: Callable[[S], object] | None = None,
        on_failure: Callable[[object], object] | None = None,  # noqa: ARG002
    ) -> Success[S]:
        """Run the success hook with the value and return self.

        The hook runs synchronously before this call returns.
        """
        if on_success is not None:
            on_success(self.value)
        return self

    def unwrap_or(self, default: S) -> S:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], S]) -> S:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def unwrap(self) -> S:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> S:
        """Return the contained value, ignoring the message."""
        return self.value


class Failure[F](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Outcome containing an error of type F.

    Examples:
        >>> Failure("boom").map(lambda x: x * 2)
        Failure(error='boom')
        >>> Failure("boom").unwrap_or(0)
        0
    """

    error: F

    def is_successful(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[F]]:
        """Return True since this is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the outcome is Failure[F].
        """
        return True

    def to_optional(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Failure."""
        from fallible.types.option import Nothing

        return Nothing

    def map[S, U](self, _f: Callable[[S], U]) -> Failure[F]:
        """Return self unchanged since this is Failure."""
        return self

    def map_error[G](self, f: Callable[[F], G]) -> Failure[G]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Failure containing the transformed error.
        """
        return Failure(f(self.error))

    def flat_map[S, U](self, _f: Callable[[S], Success[U] | Failure[F]]) -> Failure[F]:
        """Return self unchanged; the function is never called."""
        return self

    def flat_map_error[S, G](self, f: Callable[[F], Success[S] | Failure[G]]) -> Success[S] | Failure[G]:
        """Turn the error into a new attempt.

        Args:
            f: Function that takes the error and returns a new Outcome.

        Returns:
            The Outcome returned by f.
        """
        return f(self.error)

    def replace[U](self, _new_value: U) -> Failure[F]:
        """Return self unchanged since there is no value to replace."""
        return self

    def on_each(
        self,
        on_success: Callable[[object], object] | None = None,  # noqa: ARG002
        on_failure: Callable[[F], object] | None = None,
    ) -> Failure[F]:
        """Run the failure hook with the error and return self."""
        if on_failure is not None:
            on_failure(self.error)
        return self

    def unwrap_or[S](self, default: S) -> S:
        """Return the default value since this is Failure."""
        return default

    def unwrap_or_else[S](self, f: Callable[[], S]) -> S:
        """Compute and return a default value since this is Failure."""
        return f()

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Failure.

        Raises:
            RuntimeError: Always, since Failure has no value to unwrap.
        """
        raise RuntimeError(f"Called unwrap on Failure: {self.error!r}")

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(f"{msg}: {self.error!r}")


type Outcome[S, F = Exception] = Success[S] | Failure[F]


def pure[S](value: S) -> Success[S]:
    """Lift a bare value into a Success."""
    return Success(value)


def collect[S, F](outcomes: Iterable[Success[S] | Failure[F]]) -> Success[list[S]] | Failure[F]:
    """Collect an iterable of Outcomes into an Outcome of list.

    Short-circuits on the first Failure encountered.

    Examples:
        >>> collect([Success(1), Success(2)])
        Success(value=[1, 2])
        >>> collect([Success(1), Failure("fail"), Success(3)])
        Failure(error='fail')
    """
    values: list[S] = []
    for outcome in outcomes:
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
    return Success(values)


def successes[T, S](items: Iterable[T], transform: Callable[[T], Success[S] | Failure[object]]) -> list[S]:
    """Transform each item and keep only the successful values."""
    values: list[S] = []
    for item in items:
        outcome = transform(item)
        if isinstance(outcome, Success):
            values.append(outcome.value)
    return values
