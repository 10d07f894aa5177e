"""Strict JSON decoding and canonical signing encoding."""

from corpus_triage.codec.decoder import decode_document, decode_text, validate_value
from corpus_triage.codec.encoder import encode_signing, quote_string
from corpus_triage.codec.numbers import format_number
from corpus_triage.codec.values import (
    JSON_NULL,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = [
    "JSON_NULL",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "decode_document",
    "decode_text",
    "encode_signing",
    "format_number",
    "quote_string",
    "validate_value",
]
