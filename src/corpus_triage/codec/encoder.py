"""Canonical signing encoding.

The layout is the one of ECMAScript ``JSON.stringify(value, null, 2)``:
two-space indentation, ``"key": value`` members, insertion order kept, empty
containers rendered as ``{}``/``[]``. Strings are escaped like ECMAScript's
well-formed stringify, so lone surrogates (only possible in object keys after
decoding) come out as ``\\udxxx`` escapes and the output is always valid
UTF-8 text.
"""

from __future__ import annotations

from typing import Final

from corpus_triage.codec.numbers import format_number
from corpus_triage.codec.utf16 import HIGH_SURROGATE_MIN, LOW_SURROGATE_MAX
from corpus_triage.codec.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from corpus_triage.constants import SIGNING_INDENT
from corpus_triage.errors import EncodeError

_SHORT_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def encode_signing(value: JsonValue, *, indent: str = SIGNING_INDENT) -> str:
    """Return the deterministic signing encoding of ``value``."""

    parts: list[str] = []
    try:
        _encode(value, indent, "", parts)
    except RecursionError as exc:
        raise EncodeError("value nested too deeply to encode") from exc
    return "".join(parts)


def quote_string(text: str) -> str:
    """Quote ``text`` as an ECMAScript JSON string literal."""

    out = ['"']
    for char in text:
        escaped = _SHORT_ESCAPES.get(char)
        if escaped is not None:
            out.append(escaped)
            continue
        point = ord(char)
        if point < 0x20 or HIGH_SURROGATE_MIN <= point <= LOW_SURROGATE_MAX:
            out.append(f"\\u{point:04x}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def _encode(value: JsonValue, indent: str, current: str, parts: list[str]) -> None:
    match value:
        case JsonNull():
            parts.append("null")
        case JsonBool(value=flag):
            parts.append("true" if flag else "false")
        case JsonNumber(value=number):
            try:
                parts.append(format_number(number))
            except ValueError as exc:
                raise EncodeError(str(exc)) from exc
        case JsonString(value=text):
            parts.append(quote_string(text))
        case JsonArray(items=items):
            if not items:
                parts.append("[]")
                return
            inner = current + indent
            parts.append("[\n")
            for position, item in enumerate(items):
                if position:
                    parts.append(",\n")
                parts.append(inner)
                _encode(item, indent, inner, parts)
            parts.append(f"\n{current}]")
        case JsonObject(members=members):
            if not members:
                parts.append("{}")
                return
            inner = current + indent
            parts.append("{\n")
            for position, (key, item) in enumerate(members):
                if position:
                    parts.append(",\n")
                parts.append(f"{inner}{quote_string(key)}: ")
                _encode(item, indent, inner, parts)
            parts.append(f"\n{current}}}")
        case _:
            raise EncodeError(f"unsupported value type {type(value).__name__}")


__all__ = ["encode_signing", "quote_string"]
