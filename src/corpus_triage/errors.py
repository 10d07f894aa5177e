"""Typed error hierarchy for corpus triage.

Classification-time errors (``DecodeError`` and friends) are converted into a
rejection by the classifier. I/O errors (``ReadError``/``WriteError``) are
collected per file by the orchestrator and reported after the batch.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class DecodeErrorKind(StrEnum):
    TEXT_ENCODING = "text_encoding"
    SYNTAX = "syntax"
    NON_FINITE_NUMBER = "non_finite_number"
    NEGATIVE_ZERO = "negative_zero"
    UNPAIRED_SURROGATE = "unpaired_surrogate"
    NESTING_DEPTH = "nesting_depth"


class TriageError(Exception):
    """Base class for every error raised by the triage pipeline."""


class DecodeError(TriageError):
    """Raised when input is not strictly valid JSON.

    ``location`` is a JSON path (``$.a[0]``) for value-level violations and a
    ``line:column`` pair for syntax errors.
    """

    def __init__(self, kind: DecodeErrorKind, detail: str, *, location: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        self.location = location
        message = f"{kind}: {detail}"
        if location is not None:
            message = f"{message} (at {location})"
        super().__init__(message)


class TextDecodeError(DecodeError):
    """Raised when the raw bytes are not well-formed UTF-8."""

    def __init__(self, detail: str, *, offset: int | None = None) -> None:
        self.offset = offset
        location = None if offset is None else f"byte {offset}"
        super().__init__(DecodeErrorKind.TEXT_ENCODING, detail, location=location)


class EncodeError(TriageError):
    """Raised when a decoded value cannot be rendered as a signing encoding."""


class DigestError(TriageError):
    """Raised when the signing encoding cannot be hashed under the active policy."""


class FileIOError(TriageError):
    """Base for per-file filesystem failures."""

    operation = "io"

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or cause.__class__.__name__
        super().__init__(f"{self.operation} failed for {path}: {reason}")


class ReadError(FileIOError):
    operation = "read"


class WriteError(FileIOError):
    operation = "write"


class LayoutError(TriageError):
    """Raised when the input or output directory layout is unusable."""


__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "DigestError",
    "EncodeError",
    "FileIOError",
    "LayoutError",
    "ReadError",
    "TextDecodeError",
    "TriageError",
    "WriteError",
]
