"""Codec adapter: msgspec encode/decode reported through Outcome.

Thread Safety:
    - Encoders are NOT thread-safe → use thread-local instances
    - Decoders ARE thread-safe (reentrant) → cached and shared per type

Usage:
    >>> from fallible.codec import JSON, decode, encode
    >>> encode({"name": "Bobby", "age": 13})
    Success(value=b'{"name":"Bobby","age":13}')
    >>> decode(Person, b'{"name": "Bobby"}')
    Failure(error=KeyNotFound(key='age', path='$', ...))
    >>> MSGPACK.decode(list[int], MSGPACK.encode([1, 2]).unwrap())
    Success(value=[1, 2])
"""

from __future__ import annotations

import threading
from types import ModuleType
from typing import Any

import msgspec

from fallible.codec.errors import CodingFailure, translate_decode_error, translate_encode_error
from fallible.decorators.safe import safe
from fallible.types.outcome import Failure, Success

__all__ = ["JSON", "MSGPACK", "Codec", "decode", "encode"]


class Codec:
    """Outcome-returning wrapper around one msgspec protocol module.

    Example:
        >>> codec = Codec(msgspec.json)
        >>> codec.encode([1, 2]).flat_map(lambda data: codec.decode(list[int], data))
        Success(value=[1, 2])

    Attributes:
        _protocol: msgspec.json or msgspec.msgpack.
        _local: Thread-local storage for per-thread encoders.
        _decoders: Shared decoders keyed by target type.
    """

    __slots__ = ("_decoders", "_lock", "_local", "_protocol")

    def __init__(self, protocol: ModuleType) -> None:
        self._protocol = protocol
        self._local = threading.local()
        self._decoders: dict[Any, Any] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._protocol.__name__.rsplit(".", 1)[-1]

    @property
    def _encoder(self) -> Any:
        encoder = getattr(self._local, "encoder", None)
        if encoder is None:
            encoder = self._protocol.Encoder()
            self._local.encoder = encoder
        return encoder

    def _decoder(self, type_: Any) -> Any:
        try:
            return self._decoders[type_]
        except KeyError:
            pass
        except TypeError:
            # unhashable type expression, decode without caching
            return self._protocol.Decoder(type_)

        with self._lock:
            decoder = self._decoders.get(type_)
            if decoder is None:
                decoder = self._protocol.Decoder(type_)
                self._decoders[type_] = decoder
            return decoder

    @safe
    def _decode_raw(self, type_: Any, data: bytes | bytearray | memoryview | str) -> Any:
        return self._decoder(type_).decode(data)

    @safe
    def _encode_raw(self, value: Any) -> bytes:
        return self._encoder.encode(value)

    def decode[T](self, type_: type[T] | Any, data: bytes | bytearray | memoryview | str) -> Success[T] | Failure[CodingFailure]:
        """Decode data into type_.

        Args:
            type_: Any type msgspec can decode into (Struct, dataclass, list[...], ...).
            data: Encoded input.

        Returns:
            Success with the decoded value, or Failure with the translated CodingFailure.
        """
        return self._decode_raw(type_, data).map_error(translate_decode_error)

    def encode(self, value: Any) -> Success[bytes] | Failure[CodingFailure]:
        """Encode value to bytes.

        Returns:
            Success with the encoded bytes, or Failure with InvalidValue/Uncategorized.
        """
        return self._encode_raw(value).map_error(lambda exc: translate_encode_error(exc, value))

    def __repr__(self) -> str:
        return f"Codec({self.name})"


JSON = Codec(msgspec.json)
MSGPACK = Codec(msgspec.msgpack)


def decode[T](type_: type[T] | Any, data: bytes | bytearray | memoryview | str) -> Success[T] | Failure[CodingFailure]:
    """Decode JSON data into type_. See Codec.decode."""
    return JSON.decode(type_, data)


def encode(value: Any) -> Success[bytes] | Failure[CodingFailure]:
    """Encode value as JSON. See Codec.encode."""
    return JSON.encode(value)
