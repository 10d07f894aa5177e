"""
corpus-triage — file access for the triage pipeline

File: src/corpus_triage/utils/fs.py

Purpose
- List the input directory, read candidates whole and write artifacts whole.
  The ``*_async`` variants hand the blocking call to ``asyncio.to_thread``.

Functional requirements
- An artifact appears under its final name only once fully written: bytes go
  to a hidden ``.part`` file beside it which is then renamed over the target.
- Listing is flat and sorted by name.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

PathLike = str | os.PathLike[str]


def require_directory(path: PathLike) -> Path:
    resolved = Path(path).resolve()
    if not resolved.is_dir():
        if resolved.exists():
            raise NotADirectoryError(f"{resolved} is not a directory")
        raise FileNotFoundError(f"{resolved} does not exist")
    return resolved


def list_entries(directory: PathLike) -> list[str]:
    """Names of the entries directly inside ``directory``."""

    with os.scandir(directory) as scan:
        return sorted(entry.name for entry in scan)


def read_bytes(path: PathLike) -> bytes:
    return Path(path).read_bytes()


def atomic_write(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path`` so that readers see either nothing or all of it."""

    target = Path(path)
    descriptor, part_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".part", dir=target.parent
    )
    try:
        with os.fdopen(descriptor, "wb") as part:
            part.write(data)
        os.replace(part_name, target)
    except BaseException:
        Path(part_name).unlink(missing_ok=True)
        raise


async def read_bytes_async(path: PathLike) -> bytes:
    return await asyncio.to_thread(read_bytes, path)


async def write_async(path: PathLike, data: bytes) -> None:
    await asyncio.to_thread(atomic_write, path, data)


__all__ = [
    "atomic_write",
    "list_entries",
    "read_bytes",
    "read_bytes_async",
    "require_directory",
    "write_async",
]
