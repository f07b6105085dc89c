"""fallible: Outcome and Option types with codec and HTTP adapters for Python 3.13+.

Flat imports (preferred):
    from fallible import Outcome, Success, Failure, Option, Some, Nothing
    from fallible import curry, flip, compose, compose_outcome, apply, coalesce
    from fallible import decode, encode, HTTP

Submodule imports (for organization):
    from fallible.types import Outcome, Option
    from fallible.compose import compose_optional
    from fallible.codec import MSGPACK, CodingFailure
    from fallible.http import HTTPFailure
"""

# Types
from fallible.types import (
    Failure,
    Nothing,
    NothingType,
    Option,
    Outcome,
    Some,
    Success,
    collect,
    from_nullable,
    pure,
    successes,
)

# Composition
from fallible.compose import (
    apply,
    coalesce,
    coalesce_with,
    compose,
    compose_optional,
    compose_outcome,
    curry,
    curry3,
    flip,
    forward,
    lift,
)

# Decorators
from fallible.decorators import safe

# Codec
from fallible.codec import JSON, MSGPACK, Codec, CodingFailure, decode, encode

# HTTP
from fallible.http import HTTP, HTTPFailure, MalformedRequest, RequestFailed

__all__ = [
    "HTTP",
    "JSON",
    "MSGPACK",
    "Codec",
    "CodingFailure",
    "Failure",
    "HTTPFailure",
    "MalformedRequest",
    "Nothing",
    "NothingType",
    "Option",
    "Outcome",
    "RequestFailed",
    "Some",
    "Success",
    "apply",
    "coalesce",
    "coalesce_with",
    "collect",
    "compose",
    "compose_optional",
    "compose_outcome",
    "curry",
    "curry3",
    "decode",
    "encode",
    "flip",
    "forward",
    "from_nullable",
    "lift",
    "pure",
    "safe",
    "successes",
]
