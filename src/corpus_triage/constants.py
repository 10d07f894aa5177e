"""Stable constants shared across the triage pipeline."""

from __future__ import annotations

from typing import Final

# Output layout below the output root. Both directories must already exist.
ACCEPT_DIR: Final[str] = "yay"
REJECT_DIR: Final[str] = "nay"

# Sibling artifact suffixes for an accepted document ``yay/<name>``.
ORIGINAL_SUFFIX: Final[str] = ""
SIGNING_SUFFIX: Final[str] = ".json_signing"
LENGTH_SUFFIX: Final[str] = ".length"
SHA256_SUFFIX: Final[str] = ".sha256"
ARTIFACT_SUFFIXES: Final[tuple[str, ...]] = (
    ORIGINAL_SUFFIX,
    SIGNING_SUFFIX,
    LENGTH_SUFFIX,
    SHA256_SUFFIX,
)

# Per-file pipelines allowed in flight at once.
DEFAULT_MAX_IN_FLIGHT: Final[int] = 32

# Signing encoding layout.
SIGNING_INDENT: Final[str] = "  "
SOURCE_ENCODING: Final[str] = "utf-8"

__all__ = [
    "ACCEPT_DIR",
    "ARTIFACT_SUFFIXES",
    "DEFAULT_MAX_IN_FLIGHT",
    "LENGTH_SUFFIX",
    "ORIGINAL_SUFFIX",
    "REJECT_DIR",
    "SHA256_SUFFIX",
    "SIGNING_INDENT",
    "SIGNING_SUFFIX",
    "SOURCE_ENCODING",
]
