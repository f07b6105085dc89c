"""Codec adapter: msgspec JSON/MessagePack with CodingFailure errors."""

from fallible.codec.coder import JSON, MSGPACK, Codec, decode, encode
from fallible.codec.errors import (
    CodingError,
    CodingFailure,
    DataCorrupted,
    InvalidValue,
    KeyNotFound,
    TypeMismatch,
    Uncategorized,
    ValueNotFound,
    translate_decode_error,
    translate_encode_error,
)

__all__ = [
    "JSON",
    "MSGPACK",
    "Codec",
    "CodingError",
    "CodingFailure",
    "DataCorrupted",
    "InvalidValue",
    "KeyNotFound",
    "TypeMismatch",
    "Uncategorized",
    "ValueNotFound",
    "decode",
    "encode",
    "translate_decode_error",
    "translate_encode_error",
]
