"""Utility exports for filesystem, hashing, and concurrency helpers."""

from corpus_triage.utils.concurrency import WorkerPool
from corpus_triage.utils.fs import (
    atomic_write,
    list_entries,
    read_bytes,
    read_bytes_async,
    require_directory,
    write_async,
)
from corpus_triage.utils.hashing import SHA256_DIGEST_SIZE, sha256_digest

__all__ = [
    "SHA256_DIGEST_SIZE",
    "WorkerPool",
    "atomic_write",
    "list_entries",
    "read_bytes",
    "read_bytes_async",
    "require_directory",
    "sha256_digest",
    "write_async",
]
