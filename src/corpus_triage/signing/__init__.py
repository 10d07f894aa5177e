"""Signing length and digest computation."""

from corpus_triage.signing.digest import (
    SigningDigest,
    WideUnitPolicy,
    compute_digest,
    latin1_units,
    signing_length,
)

__all__ = [
    "SigningDigest",
    "WideUnitPolicy",
    "compute_digest",
    "latin1_units",
    "signing_length",
]
