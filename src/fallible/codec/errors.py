"""Coding failures: closed taxonomy for decode/encode problems.

Each variant is a frozen struct usable as the error side of an Outcome.
Variants are only produced by translating a serialization exception with
translate_decode_error() or translate_encode_error().
"""

from __future__ import annotations

import re

import msgspec

__all__ = [
    "CodingError",
    "CodingFailure",
    "DataCorrupted",
    "InvalidValue",
    "KeyNotFound",
    "TypeMismatch",
    "Uncategorized",
    "ValueNotFound",
    "translate_decode_error",
    "translate_encode_error",
]

ROOT_PATH = "$"

_MISSING_FIELD = re.compile(r"^Object missing required field `(?P<key>[^`]*)`")
_EXPECTED = re.compile(r"^Expected `(?P<expected>[^`]*)`, got `(?P<actual>[^`]*)`")
_AT_PATH = re.compile(r" - at `(?P<path>[^`]*)`$")


class CodingError(Exception):
    """Exception variant carrying a CodingFailure, for raise-based code."""

    def __init__(self, failure: CodingFailure) -> None:
        self.failure = failure
        super().__init__(failure.message)

    def to_struct(self) -> CodingFailure:
        """Convert back to the struct for Outcome-based code."""
        return self.failure


class DataCorrupted(msgspec.Struct, frozen=True, gc=False):
    """Input bytes are not valid for the format (malformed or truncated)."""

    description: str

    @property
    def message(self) -> str:
        return f"Data corrupted: {self.description}"

    def to_exception(self) -> CodingError:
        return CodingError(self)


class KeyNotFound(msgspec.Struct, frozen=True, gc=False):
    """A required field is absent from an object."""

    key: str
    path: str
    description: str

    @property
    def message(self) -> str:
        return f"Key not found: `{self.key}` at `{self.path}`"

    def to_exception(self) -> CodingError:
        return CodingError(self)


class TypeMismatch(msgspec.Struct, frozen=True, gc=False):
    """A value has a different type than the one expected."""

    expected: str
    actual: str
    path: str
    description: str

    @property
    def message(self) -> str:
        return f"Type mismatch at `{self.path}`: expected `{self.expected}`, got `{self.actual}`"

    def to_exception(self) -> CodingError:
        return CodingError(self)


class ValueNotFound(msgspec.Struct, frozen=True, gc=False):
    """A null was found where a value was expected."""

    expected: str
    path: str
    description: str

    @property
    def message(self) -> str:
        return f"Value not found at `{self.path}`: expected `{self.expected}`"

    def to_exception(self) -> CodingError:
        return CodingError(self)


class InvalidValue(msgspec.Struct, frozen=True, gc=False):
    """A value could not be encoded."""

    value: str
    description: str

    @property
    def message(self) -> str:
        return f"Invalid value {self.value}: {self.description}"

    def to_exception(self) -> CodingError:
        return CodingError(self)


class Uncategorized(msgspec.Struct, frozen=True, gc=False):
    """Any failure outside the categories above."""

    description: str

    @property
    def message(self) -> str:
        return f"Uncategorized: {self.description}"

    def to_exception(self) -> CodingError:
        return CodingError(self)


type CodingFailure = DataCorrupted | KeyNotFound | TypeMismatch | ValueNotFound | InvalidValue | Uncategorized


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def _translate_validation_error(exc: msgspec.ValidationError) -> CodingFailure:
    description = _describe(exc)
    at = _AT_PATH.search(description)
    path = at.group("path") if at else ROOT_PATH

    if missing := _MISSING_FIELD.match(description):
        return KeyNotFound(missing.group("key"), path, description)
    if expected := _EXPECTED.match(description):
        if expected.group("actual") == "null":
            return ValueNotFound(expected.group("expected"), path, description)
        return TypeMismatch(expected.group("expected"), expected.group("actual"), path, description)
    return Uncategorized(description)


def translate_decode_error(exc: BaseException) -> CodingFailure:
    """Map an exception raised while decoding to exactly one CodingFailure."""
    # ValidationError subclasses DecodeError, so it is checked first
    if isinstance(exc, msgspec.ValidationError):
        return _translate_validation_error(exc)
    if isinstance(exc, msgspec.DecodeError):
        return DataCorrupted(_describe(exc))
    return Uncategorized(_describe(exc))


def translate_encode_error(exc: BaseException, value: object) -> CodingFailure:
    """Map an exception raised while encoding value to exactly one CodingFailure."""
    if isinstance(exc, TypeError | OverflowError | msgspec.EncodeError):
        return InvalidValue(repr(value), _describe(exc))
    return Uncategorized(_describe(exc))
