"""Core types: Outcome, Success, Failure, Option, Some, Nothing."""

from fallible.types.option import Nothing, NothingType, Option, Some, from_nullable
from fallible.types.outcome import Failure, Outcome, Success, collect, pure, successes

__all__ = [
    "Failure",
    "Nothing",
    "NothingType",
    "Option",
    "Outcome",
    "Some",
    "Success",
    "collect",
    "from_nullable",
    "pure",
    "successes",
]
