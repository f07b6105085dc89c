"""Tests for the codec adapter: decode/encode and error translation."""

import threading
from decimal import Decimal
from typing import Annotated

import msgspec
import pytest
from hypothesis import given

from fallible import JSON, MSGPACK, Failure, Success, decode, encode
from fallible.codec import (
    Codec,
    CodingError,
    DataCorrupted,
    InvalidValue,
    KeyNotFound,
    TypeMismatch,
    Uncategorized,
    ValueNotFound,
    translate_decode_error,
    translate_encode_error,
)
from tests.models import Person
from tests.strategies import json_values

PERSONS_JSON = b'[{"name": "Bobby", "age": 13, "hobby": "Video Games"}, {"name": "Alice", "age": 31}]'


class Opaque:
    """A type msgspec has no encoding for."""


class TestDecode:
    def test_decode_valid(self, persons):
        assert decode(list[Person], PERSONS_JSON) == Success(persons)

    def test_decode_str_input(self):
        assert decode(dict[str, int], '{"a": 1}') == Success({"a": 1})

    def test_decode_then_map(self):
        total_age = decode(list[Person], PERSONS_JSON).map(lambda people: sum(p.age for p in people))
        assert total_age == Success(44)

    def test_truncated_is_data_corrupted(self):
        outcome = decode(list[Person], PERSONS_JSON[:20])
        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, DataCorrupted)

    def test_malformed_is_data_corrupted(self):
        outcome = decode(Person, b"{name: Bobby}")
        assert isinstance(outcome.error, DataCorrupted)
        assert "malformed" in outcome.error.description

    def test_missing_key(self):
        outcome = decode(list[Person], b'[{"name": "Bobby"}]')
        assert outcome == Failure(
            KeyNotFound("age", "$[0]", "Object missing required field `age` - at `$[0]`")
        )

    def test_missing_key_at_root(self):
        outcome = decode(Person, b'{"age": 3}')
        assert isinstance(outcome.error, KeyNotFound)
        assert outcome.error.key == "name"
        assert outcome.error.path == "$"

    def test_type_mismatch(self):
        outcome = decode(Person, b'{"name": "Bobby", "age": "thirteen"}')
        assert isinstance(outcome.error, TypeMismatch)
        assert outcome.error.expected == "int"
        assert outcome.error.actual == "str"
        assert outcome.error.path == "$.age"

    def test_type_mismatch_at_root(self):
        outcome = decode(list[Person], b'{"name": "Bobby"}')
        assert isinstance(outcome.error, TypeMismatch)
        assert outcome.error.expected == "array"
        assert outcome.error.actual == "object"
        assert outcome.error.path == "$"

    def test_null_is_value_not_found(self):
        outcome = decode(Person, b'{"name": null, "age": 3}')
        assert isinstance(outcome.error, ValueNotFound)
        assert outcome.error.expected == "str"
        assert outcome.error.path == "$.name"

    def test_optional_field_accepts_null(self):
        assert decode(Person, b'{"name": "A", "age": 1, "hobby": null}') == Success(Person("A", 1))

    def test_unrecognized_validation_error_is_uncategorized(self):
        outcome = decode(Annotated[int, msgspec.Meta(ge=0)], b"-1")
        assert isinstance(outcome.error, Uncategorized)
        assert ">= 0" in outcome.error.description

    def test_unsupported_type_is_uncategorized(self):
        outcome = decode(Opaque, b"{}")
        assert isinstance(outcome.error, Uncategorized)


class TestEncode:
    def test_encode_value(self):
        assert encode({"a": [1, 2]}) == Success(b'{"a":[1,2]}')

    def test_encode_struct(self):
        assert encode(Person("Bobby", 13)) == Success(b'{"name":"Bobby","age":13,"hobby":null}')

    def test_unsupported_value_is_invalid_value(self):
        value = Opaque()
        outcome = encode(value)
        assert isinstance(outcome.error, InvalidValue)
        assert outcome.error.value == repr(value)
        assert "unsupported" in outcome.error.description

    def test_decimal_is_supported(self):
        assert encode(Decimal("1.5")) == Success(b'"1.5"')

    def test_round_trip_persons(self, persons):
        outcome = encode(persons).flat_map(lambda data: decode(list[Person], data))
        assert outcome == Success(persons)

    @given(json_values)
    def test_round_trip_json(self, value):
        assert encode(value).flat_map(lambda data: decode(object, data)) == Success(value)

    @given(json_values)
    def test_round_trip_msgpack(self, value):
        assert MSGPACK.encode(value).flat_map(lambda data: MSGPACK.decode(object, data)) == Success(value)


class TestTranslation:
    def test_decode_error_mapping(self):
        assert translate_decode_error(msgspec.DecodeError("Input data was truncated")) == DataCorrupted(
            "Input data was truncated"
        )

    def test_validation_without_path_defaults_to_root(self):
        failure = translate_decode_error(msgspec.ValidationError("Object missing required field `id`"))
        assert failure == KeyNotFound("id", "$", "Object missing required field `id`")

    def test_other_exception_is_uncategorized(self):
        assert translate_decode_error(RuntimeError("boom")) == Uncategorized("boom")

    def test_empty_message_uses_type_name(self):
        assert translate_decode_error(RuntimeError()) == Uncategorized("RuntimeError")

    def test_encode_error_mapping(self):
        assert translate_encode_error(OverflowError("too big"), 2**70) == InvalidValue(repr(2**70), "too big")
        assert translate_encode_error(RuntimeError("boom"), 1) == Uncategorized("boom")

    def test_failure_message_and_exception(self):
        failure = KeyNotFound("age", "$[0]", "Object missing required field `age` - at `$[0]`")
        assert failure.message == "Key not found: `age` at `$[0]`"
        exc = failure.to_exception()
        assert isinstance(exc, CodingError)
        assert exc.to_struct() is failure
        with pytest.raises(CodingError, match="Key not found"):
            raise exc


class TestCodec:
    def test_names(self):
        assert JSON.name == "json"
        assert MSGPACK.name == "msgpack"
        assert repr(JSON) == "Codec(json)"

    def test_decoder_cached_per_type(self):
        codec = Codec(msgspec.json)
        assert codec._decoder(Person) is codec._decoder(Person)

    def test_encoder_per_thread(self):
        codec = Codec(msgspec.json)
        encoders = []

        def capture():
            encoders.append(codec._encoder)

        thread = threading.Thread(target=capture)
        thread.start()
        thread.join()
        capture()
        assert len(encoders) == 2
        assert encoders[0] is not encoders[1]

    def test_msgpack_truncated_is_data_corrupted(self):
        data = MSGPACK.encode([1, 2, 3]).unwrap()
        assert isinstance(MSGPACK.decode(list[int], data[:-1]).error, DataCorrupted)
