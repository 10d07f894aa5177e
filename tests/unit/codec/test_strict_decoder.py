"""
corpus-triage — strict decoder unit tests

File: tests/unit/codec/test_strict_decoder.py

Purpose
- Validate the extra validity rules layered over standard JSON: negative zero,
  non-finite numbers, surrogate pairing and strict UTF-8 input.

Functional requirements
- Offline only.
"""

from __future__ import annotations

import json
import math

import pytest

from corpus_triage.codec.decoder import decode_document, decode_text
from corpus_triage.codec.values import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
)
from corpus_triage.errors import DecodeError, DecodeErrorKind, TextDecodeError

try:
    from hypothesis import given, settings
    from hypothesis import strategies as st
except ModuleNotFoundError:
    HYPOTHESIS_AVAILABLE = False
else:
    HYPOTHESIS_AVAILABLE = True


def _kind(text: str) -> DecodeErrorKind:
    with pytest.raises(DecodeError) as excinfo:
        decode_text(text)
    return excinfo.value.kind


def test_decodes_every_json_type_into_tagged_values() -> None:
    value = decode_text('{"n": null, "t": true, "f": false, "x": 1.5, "s": "hi", "a": [1]}')

    assert value == JsonObject(
        members=(
            ("n", JSON_NULL),
            ("t", JsonBool(True)),
            ("f", JsonBool(False)),
            ("x", JsonNumber(1.5)),
            ("s", JsonString("hi")),
            ("a", JsonArray((JsonNumber(1.0),))),
        )
    )


def test_integers_are_parsed_as_doubles() -> None:
    value = decode_text("[1, 12345678901234567890]")

    assert value == JsonArray((JsonNumber(1.0), JsonNumber(1.2345678901234567e19)))
    assert all(isinstance(item, JsonNumber) for item in value.items)


@pytest.mark.parametrize("literal", ["-0", "-0.0", "-0e10", "-0E-3", "-1e-400"])
def test_negative_zero_is_rejected(literal: str) -> None:
    assert _kind(f'{{"n": {literal}}}') is DecodeErrorKind.NEGATIVE_ZERO


@pytest.mark.parametrize("literal", ["0", "0.0", "0e5", "1e-400"])
def test_positive_zero_is_accepted(literal: str) -> None:
    value = decode_text(literal)

    assert isinstance(value, JsonNumber)
    assert value.value == 0
    assert math.copysign(1.0, value.value) > 0


@pytest.mark.parametrize("literal", ["1e400", "-1e400", "[1, 2e999]"])
def test_overflowing_numbers_are_rejected(literal: str) -> None:
    assert _kind(literal) is DecodeErrorKind.NON_FINITE_NUMBER


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", '{"x": NaN}'])
def test_non_standard_constants_are_syntax_errors(literal: str) -> None:
    assert _kind(literal) is DecodeErrorKind.SYNTAX


@pytest.mark.parametrize(
    "text",
    ["not json", "", "{", "[1,]", "{'a': 1}", '{"a" 1}', "01", '"tab\there"', "[1] [2]"],
)
def test_syntax_errors_are_rejected(text: str) -> None:
    assert _kind(text) is DecodeErrorKind.SYNTAX


def test_syntax_error_reports_line_and_column() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_text('{\n  "a": ?\n}')

    assert excinfo.value.location == "2:8"


@pytest.mark.parametrize(
    "escaped",
    [
        "\\ud800",
        "\\udbff",
        "\\udc00",
        "x\\ud800y",
        "\\ud800\\ud800\\udc00",
        "\\ude00\\ud83d",
        "\\ud83d\\ude00\\ude00",
        "end\\ud83d",
    ],
)
def test_unpaired_surrogates_in_values_are_rejected(escaped: str) -> None:
    assert _kind(f'["{escaped}"]') is DecodeErrorKind.UNPAIRED_SURROGATE


def test_paired_surrogates_are_accepted() -> None:
    value = decode_text('"a\\ud83d\\ude00b"')

    assert value == JsonString("a\U0001f600b")


def test_raw_astral_characters_are_accepted() -> None:
    value = decode_document('{"e": "\U0001f600"}'.encode())

    assert value == JsonObject(members=(("e", JsonString("\U0001f600")),))


def test_object_keys_are_not_checked_for_surrogates() -> None:
    value = decode_text('{"\\ud800": 1}')

    assert isinstance(value, JsonObject)
    assert value.keys() == ("\ud800",)


def test_violation_location_points_at_nested_value() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_text('[1, {"a": [2, -0]}]')

    assert excinfo.value.kind is DecodeErrorKind.NEGATIVE_ZERO
    assert excinfo.value.location == "$[1].a[1]"


def test_first_violation_in_document_order_wins() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_text('{"a": ["ok", "\\ud800"], "b": -0, "c": 1e999}')

    assert excinfo.value.kind is DecodeErrorKind.UNPAIRED_SURROGATE
    assert excinfo.value.location == "$.a[1]"


def test_duplicate_keys_keep_first_position_and_last_value() -> None:
    value = decode_text('{"a": 1, "b": 2, "a": 3}')

    assert value == JsonObject(members=(("a", JsonNumber(3.0)), ("b", JsonNumber(2.0))))


def test_overwritten_duplicate_value_is_not_validated() -> None:
    value = decode_text('{"a": -0, "a": 1}')

    assert value == JsonObject(members=(("a", JsonNumber(1.0)),))


def test_malformed_utf8_is_a_text_decode_error() -> None:
    with pytest.raises(TextDecodeError) as excinfo:
        decode_document(b'{"a": "\xff"}')

    assert excinfo.value.kind is DecodeErrorKind.TEXT_ENCODING
    assert excinfo.value.offset == 7
    assert isinstance(excinfo.value, DecodeError)


def test_utf8_encoded_surrogates_are_a_text_decode_error() -> None:
    with pytest.raises(TextDecodeError):
        decode_document(b'"\xed\xa0\x80"')


def test_byte_order_mark_is_not_stripped() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_document(b'\xef\xbb\xbf{"a": 1}')

    assert excinfo.value.kind is DecodeErrorKind.SYNTAX


def test_excessive_nesting_is_a_decode_error() -> None:
    depth = 100_000
    with pytest.raises(DecodeError) as excinfo:
        decode_text("[" * depth + "]" * depth)

    assert excinfo.value.kind is DecodeErrorKind.NESTING_DEPTH


if HYPOTHESIS_AVAILABLE:

    @given(number=st.floats(allow_nan=False, allow_infinity=False))
    @settings(max_examples=200, deadline=None)
    def test_finite_numbers_are_accepted_unless_negative_zero(number: float) -> None:
        text = json.dumps([number])
        if number == 0 and math.copysign(1.0, number) < 0:
            assert _kind(text) is DecodeErrorKind.NEGATIVE_ZERO
        else:
            assert decode_text(text) == JsonArray((JsonNumber(number),))

    @given(value=st.text(max_size=50))
    @settings(max_examples=200, deadline=None)
    def test_well_formed_strings_survive_ascii_escaping(value: str) -> None:
        assert decode_text(json.dumps(value, ensure_ascii=True)) == JsonString(value)
