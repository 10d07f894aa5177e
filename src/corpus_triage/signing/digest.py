"""Length and SHA-256 digest of a signing encoding.

Both values are defined over UTF-16 code units. The hash input is the
"latin1" reinterpretation of the encoding: one byte per code unit, not the
UTF-8 bytes. Code units above 0xFF cannot be represented that way;
``WideUnitPolicy`` decides what happens to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from corpus_triage.codec.utf16 import code_unit_length, iter_code_units
from corpus_triage.errors import DigestError
from corpus_triage.utils.hashing import SHA256_DIGEST_SIZE, sha256_digest

_BYTE_MASK: Final[int] = 0xFF


class WideUnitPolicy(StrEnum):
    # Keep the low byte of every code unit; matches the historical artifacts.
    TRUNCATE = "truncate"
    # Refuse encodings that contain code units above 0xFF.
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class SigningDigest:
    """Length (UTF-16 code units) and raw SHA-256 digest of a signing encoding."""

    length: int
    sha256: bytes

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("length must be >= 0")
        if len(self.sha256) != SHA256_DIGEST_SIZE:
            raise ValueError(f"sha256 must be {SHA256_DIGEST_SIZE} bytes")

    @property
    def length_text(self) -> str:
        return str(self.length)

    @property
    def hexdigest(self) -> str:
        return self.sha256.hex()


def signing_length(encoding: str) -> int:
    """Return the length of ``encoding`` in UTF-16 code units."""

    return code_unit_length(encoding)


def latin1_units(encoding: str, policy: WideUnitPolicy = WideUnitPolicy.TRUNCATE) -> bytes:
    """Reinterpret ``encoding`` as one byte per UTF-16 code unit."""

    out = bytearray()
    for index, unit in enumerate(iter_code_units(encoding)):
        if unit > _BYTE_MASK:
            if policy is WideUnitPolicy.REJECT:
                raise DigestError(
                    f"code unit 0x{unit:04x} at index {index} does not fit in one byte"
                )
            unit &= _BYTE_MASK
        out.append(unit)
    return bytes(out)


def compute_digest(
    encoding: str,
    policy: WideUnitPolicy = WideUnitPolicy.TRUNCATE,
) -> SigningDigest:
    """Compute the signing length and hash of ``encoding``."""

    return SigningDigest(
        length=signing_length(encoding),
        sha256=sha256_digest(latin1_units(encoding, policy)),
    )


__all__ = [
    "SigningDigest",
    "WideUnitPolicy",
    "compute_digest",
    "latin1_units",
    "signing_length",
]
