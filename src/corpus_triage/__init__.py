"""
corpus-triage — package root

File: src/corpus_triage/__init__.py

Purpose
- Sort a directory of fuzzer-corpus JSON documents into accepted (``yay``)
  and rejected (``nay``) buckets, emitting the signing encoding, its length
  and its SHA-256 digest for every accepted document.

Import boundary rules
- Must not have side effects at import time (no logging init, no I/O).
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
