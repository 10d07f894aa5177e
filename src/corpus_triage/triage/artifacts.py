"""Output layout and artifact write plans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from corpus_triage.constants import ACCEPT_DIR, ARTIFACT_SUFFIXES, REJECT_DIR
from corpus_triage.errors import LayoutError


@dataclass(frozen=True, slots=True)
class ArtifactWrite:
    """One whole-file write: ``data`` goes to ``path``."""

    path: Path
    data: bytes


@dataclass(frozen=True, slots=True)
class OutputLayout:
    """Accept/reject directories below an output root."""

    root: Path
    accept_dir: str = ACCEPT_DIR
    reject_dir: str = REJECT_DIR

    @property
    def accept_path(self) -> Path:
        return self.root / self.accept_dir

    @property
    def reject_path(self) -> Path:
        return self.root / self.reject_dir

    def accepted_paths(self, name: str) -> dict[str, Path]:
        """Paths of the four artifacts for an accepted input, keyed by suffix."""

        return {
            suffix: self.accept_path / f"{name}{suffix}"
            for suffix in ARTIFACT_SUFFIXES
        }

    def rejected_path(self, name: str) -> Path:
        return self.reject_path / name

    def verify(self) -> None:
        """Raise ``LayoutError`` unless both bucket directories already exist."""

        missing = [
            str(directory)
            for directory in (self.accept_path, self.reject_path)
            if not directory.is_dir()
        ]
        if missing:
            raise LayoutError(
                "output root must already contain the bucket directories; missing: "
                + ", ".join(missing)
            )


__all__ = ["ArtifactWrite", "OutputLayout"]
