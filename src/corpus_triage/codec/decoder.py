"""Strict JSON decoder for corpus triage.

Decoding is two-phase: the standard library scanner parses the text into a
``JsonValue`` tree (every number as a double, ``NaN``/``Infinity`` tokens
refused), then ``validate_value`` walks the tree depth-first in document
order and raises on the first value that breaks the extra validity rules:

- numbers must be finite and must not be negative zero;
- strings, viewed as UTF-16 code units, must only contain paired surrogates.

Only values are inspected; object keys are exempt from the value rules.
"""

from __future__ import annotations

import json
import math
from typing import NoReturn

from corpus_triage.codec.utf16 import first_unpaired_surrogate
from corpus_triage.codec.values import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from corpus_triage.constants import SOURCE_ENCODING
from corpus_triage.errors import DecodeError, DecodeErrorKind, TextDecodeError

_ROOT_PATH = "$"


class _ObjectPairs(list[tuple[str, object]]):
    """Marker type separating parsed object members from parsed arrays."""


def decode_document(data: bytes) -> JsonValue:
    """Decode raw bytes as strict UTF-8, then as strict JSON."""

    try:
        text = data.decode(SOURCE_ENCODING, errors="strict")
    except UnicodeDecodeError as exc:
        raise TextDecodeError(exc.reason, offset=exc.start) from exc
    return decode_text(text)


def decode_text(text: str) -> JsonValue:
    """Parse ``text`` into a validated ``JsonValue`` tree."""

    try:
        raw = json.loads(
            text,
            parse_float=float,
            parse_int=float,
            parse_constant=_reject_constant,
            object_pairs_hook=_ObjectPairs,
        )
    except json.JSONDecodeError as exc:
        raise DecodeError(
            DecodeErrorKind.SYNTAX, exc.msg, location=f"{exc.lineno}:{exc.colno}"
        ) from exc
    except RecursionError as exc:
        raise DecodeError(DecodeErrorKind.NESTING_DEPTH, "document nested too deeply") from exc

    try:
        value = _build(raw)
        validate_value(value)
    except RecursionError as exc:
        raise DecodeError(DecodeErrorKind.NESTING_DEPTH, "document nested too deeply") from exc
    return value


def validate_value(value: JsonValue, path: str = _ROOT_PATH) -> None:
    """Raise ``DecodeError`` for the first invalid number or string value."""

    match value:
        case JsonNumber(value=number):
            if math.isinf(number):
                _fail(DecodeErrorKind.NON_FINITE_NUMBER, f"number {number} is not finite", path)
            if number == 0 and math.copysign(1.0, number) < 0:
                _fail(DecodeErrorKind.NEGATIVE_ZERO, "negative zero is not allowed", path)
        case JsonString(value=text):
            index = first_unpaired_surrogate(text)
            if index is not None:
                _fail(
                    DecodeErrorKind.UNPAIRED_SURROGATE,
                    f"unpaired surrogate at code unit {index}",
                    path,
                )
        case JsonArray(items=items):
            for position, item in enumerate(items):
                validate_value(item, f"{path}[{position}]")
        case JsonObject(members=members):
            for key, item in members:
                validate_value(item, f"{path}.{key}")
        case _:
            pass


def _build(raw: object) -> JsonValue:
    if raw is None:
        return JSON_NULL
    if isinstance(raw, bool):
        return JsonBool(raw)
    if isinstance(raw, float):
        return JsonNumber(raw)
    if isinstance(raw, str):
        return JsonString(raw)
    if isinstance(raw, _ObjectPairs):
        return JsonObject.from_pairs((key, _build(item)) for key, item in raw)
    if isinstance(raw, list):
        return JsonArray(tuple(_build(item) for item in raw))
    raise TypeError(f"unexpected parsed value of type {type(raw).__name__}")


def _reject_constant(token: str) -> NoReturn:
    raise DecodeError(DecodeErrorKind.SYNTAX, f"{token} is not a JSON value")


def _fail(kind: DecodeErrorKind, detail: str, path: str) -> NoReturn:
    raise DecodeError(kind, detail, location=path)


__all__ = ["decode_document", "decode_text", "validate_value"]
