"""@safe decorator for turning raised exceptions into Failure."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from fallible.types.outcome import Failure, Success

__all__ = ["safe"]


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Failure.

    Wraps a function so that it returns Success(value) on success and
    Failure(exception) if one of the given exceptions is raised. Other
    exceptions propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 0)
        # Failure(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[Any] | Failure[Any]:
        try:
            return Success(wrapped(*args, **kwargs))
        except catch as e:
            return Failure(e)

    if func is not None:
        return wrapper(func)
    return wrapper
