"""Per-file classification into accepted and rejected documents.

Classification is pure: it turns ``(name, bytes)`` into a plan of artifact
writes. Any content problem (bad UTF-8, bad JSON, a rejected value, an
unencodable or unhashable encoding) yields a ``Rejected`` plan; it never
raises for bad content.
"""

from __future__ import annotations

from dataclasses import dataclass

from corpus_triage.codec.decoder import decode_document
from corpus_triage.codec.encoder import encode_signing
from corpus_triage.constants import LENGTH_SUFFIX, ORIGINAL_SUFFIX, SHA256_SUFFIX, SIGNING_SUFFIX
from corpus_triage.errors import TriageError
from corpus_triage.signing.digest import SigningDigest, WideUnitPolicy, compute_digest
from corpus_triage.triage.artifacts import ArtifactWrite, OutputLayout


@dataclass(frozen=True, slots=True)
class Accepted:
    name: str
    original: bytes
    encoding: str
    digest: SigningDigest

    def writes(self, layout: OutputLayout) -> tuple[ArtifactWrite, ...]:
        paths = layout.accepted_paths(self.name)
        return (
            ArtifactWrite(paths[ORIGINAL_SUFFIX], self.original),
            ArtifactWrite(paths[SIGNING_SUFFIX], self.encoding.encode("utf-8")),
            ArtifactWrite(paths[LENGTH_SUFFIX], self.digest.length_text.encode("ascii")),
            ArtifactWrite(paths[SHA256_SUFFIX], self.digest.sha256),
        )


@dataclass(frozen=True, slots=True)
class Rejected:
    name: str
    original: bytes
    reason: TriageError

    def writes(self, layout: OutputLayout) -> tuple[ArtifactWrite, ...]:
        return (ArtifactWrite(layout.rejected_path(self.name), self.original),)


Classification = Accepted | Rejected


def classify(
    name: str,
    data: bytes,
    *,
    policy: WideUnitPolicy = WideUnitPolicy.TRUNCATE,
) -> Classification:
    """Decode, re-encode and digest ``data``; reject on the first failure."""

    try:
        value = decode_document(data)
        encoding = encode_signing(value)
        digest = compute_digest(encoding, policy)
    except TriageError as exc:
        return Rejected(name=name, original=data, reason=exc)
    return Accepted(name=name, original=data, encoding=encoding, digest=digest)


__all__ = ["Accepted", "Classification", "Rejected", "classify"]
