"""
corpus-triage — hashing utilities

File: src/corpus_triage/utils/hashing.py

Purpose
- Provide the SHA-256 helper used for signing digests.

Non-functional requirements
- Standard library only; behavior is cross-platform deterministic.
"""

from __future__ import annotations

import hashlib

SHA256_DIGEST_SIZE = 32

__all__ = [
    "SHA256_DIGEST_SIZE",
    "sha256_digest",
]


def sha256_digest(data: bytes) -> bytes:
    """Return the raw 32-byte SHA-256 digest for ``data``."""

    return hashlib.sha256(data).digest()
