"""Point-free combinators: currying, composition and Kleisli arrows.

Plain named functions stand in for the usual infix operators:

    forward(a, f)            a |> f
    compose(f, g)            f >>> g
    compose_optional(f, g)   f >=> g over Option
    compose_outcome(f, g)    f >=> g over Outcome
    apply(fo, xo)            fo <*> xo
    lift(f, g)               f <^> g
    coalesce(o, default)     o ?? default

Example:
    ```python
    add = curry(lambda a, b: a + b)
    forward(2, add(3), str)
    # '5'

    person = apply(apply(pure(curry(Person)), pure("Bobby")), pure(13))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any

from fallible.types.option import NothingType, Some
from fallible.types.outcome import Failure, Success

__all__ = [
    "apply",
    "coalesce",
    "coalesce_with",
    "compose",
    "compose_optional",
    "compose_outcome",
    "curry",
    "curry3",
    "flip",
    "forward",
    "lift",
]


def curry[A, B, R](f: Callable[[A, B], R]) -> Callable[[A], Callable[[B], R]]:
    """Turn a two-argument function into a chain of one-argument functions.

    Example:
        ```python
        curry(divmod)(7)(2)
        # (3, 1)
        ```
    """
    return lambda a: lambda b: f(a, b)


def curry3[A, B, C, R](f: Callable[[A, B, C], R]) -> Callable[[A], Callable[[B], Callable[[C], R]]]:
    """Three-argument form of curry()."""
    return lambda a: lambda b: lambda c: f(a, b, c)


def flip[A, B, R](f: Callable[[A], Callable[[B], R]]) -> Callable[[B], Callable[[A], R]]:
    """Swap the argument order of a curried function."""
    return lambda b: lambda a: f(a)(b)


def forward(value: Any, f: Callable[[Any], Any], *fns: Callable[[Any], Any]) -> Any:
    """Apply f to value, then thread the result through fns left to right.

    Unlike Outcome.map there is no wrapping and no short-circuit.
    """
    return reduce(lambda acc, fn: fn(acc), fns, f(value))


def compose(f: Callable[[Any], Any], g: Callable[[Any], Any], *fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Forward composition: compose(f, g)(a) == g(f(a))."""
    return lambda value: forward(value, f, g, *fns)


def compose_optional[A, B, C](
    f: Callable[[A], Some[B] | NothingType],
    g: Callable[[B], Some[C] | NothingType],
) -> Callable[[A], Some[C] | NothingType]:
    """Kleisli composition over Option.

    Nothing from f is returned as is and g is not called.
    """

    def composed(a: A) -> Some[C] | NothingType:
        match f(a):
            case Some(value=b):
                return g(b)
            case nothing:
                return nothing

    return composed


def compose_outcome[A, B, C, E](
    f: Callable[[A], Success[B] | Failure[E]],
    g: Callable[[B], Success[C] | Failure[E]],
) -> Callable[[A], Success[C] | Failure[E]]:
    """Kleisli composition over Outcome.

    A Failure from f is returned as is and g is not called. Both stages
    share the same error type.
    """

    def composed(a: A) -> Success[C] | Failure[E]:
        match f(a):
            case Success(value=b):
                return g(b)
            case failure:
                return failure

    return composed


def apply[A, B, E](
    fn: Success[Callable[[A], B]] | Failure[E],
    value: Success[A] | Failure[E],
) -> Success[B] | Failure[E]:
    """Applicative apply of a wrapped function to a wrapped value.

    When both sides fail the function side's error is returned.

    Example:
        ```python
        apply(Success(str.upper), Success("a"))
        # Success(value='A')
        apply(Failure("left"), Failure("right"))
        # Failure(error='left')
        ```
    """
    return fn.flat_map(lambda f: value.map(f))


def lift[A, B, C, E](
    f: Callable[[A], Success[B] | Failure[E]],
    g: Callable[[B], C],
) -> Callable[[A], Success[C] | Failure[E]]:
    """Map g over the Outcome produced by f."""
    return lambda a: f(a).map(g)


def coalesce[T](outcome: Success[T] | Failure[Any], default: Callable[[], T]) -> T:
    """Return the Success value, or default() on Failure.

    default is never called for a Success.
    """
    if isinstance(outcome, Success):
        return outcome.value
    return default()


def coalesce_with[A, T](
    f: Callable[[A], Success[T] | Failure[Any]],
    default: Callable[[], T],
) -> Callable[[A], T]:
    """Function-level coalesce: a -> coalesce(f(a), default)."""
    return lambda a: coalesce(f(a), default)
