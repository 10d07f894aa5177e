"""
corpus-triage — directory orchestrator

File: src/corpus_triage/triage/orchestrator.py

Purpose
- Drive the classifier over every entry of an input directory with a hard cap
  on per-file pipelines in flight, and write the resulting artifacts.

Functional requirements
- Every entry is attempted exactly once; there is no recursion.
- A pipeline holds its slot from the read until all of its writes settle.
- Read and write failures are collected per file and never stop the batch;
  they are reported once after every file has been attempted.

Non-functional requirements
- One event loop; blocking file I/O runs on worker threads. Decoding,
  encoding and hashing run inline once the bytes are in memory.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from corpus_triage.config.schema import TriageConfig, default_config
from corpus_triage.errors import FileIOError, LayoutError, ReadError, WriteError
from corpus_triage.observability.logging import correlation_scope, get_logger
from corpus_triage.triage.artifacts import ArtifactWrite, OutputLayout
from corpus_triage.triage.classifier import Accepted, classify
from corpus_triage.utils.concurrency import WorkerPool
from corpus_triage.utils.fs import list_entries, read_bytes_async, require_directory, write_async

if TYPE_CHECKING:
    import logging

_LOGGER = get_logger(__name__)


class FileStatus(StrEnum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of one file's pipeline."""

    name: str
    status: FileStatus
    reason: str | None = None
    errors: tuple[FileIOError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(slots=True)
class TriageReport:
    """Aggregated outcomes of a triage run, ordered by file name."""

    outcomes: list[FileOutcome] = field(default_factory=list)
    peak_in_flight: int = 0

    def count(self, status: FileStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def accepted(self) -> int:
        return self.count(FileStatus.ACCEPTED)

    @property
    def rejected(self) -> int:
        return self.count(FileStatus.REJECTED)

    @property
    def unreadable(self) -> int:
        return self.count(FileStatus.UNREADABLE)

    @property
    def failed(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    def summary(self) -> dict[str, int]:
        return {
            "files": len(self.outcomes),
            "accepted": self.accepted,
            "rejected": self.rejected,
            "unreadable": self.unreadable,
            "errors": sum(len(outcome.errors) for outcome in self.outcomes),
            "peak_in_flight": self.peak_in_flight,
        }


class TriageOrchestrator:
    """Classify every entry of ``input_dir`` into the buckets below ``output_root``."""

    def __init__(
        self,
        input_dir: str | Path,
        output_root: str | Path,
        config: TriageConfig | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or default_config()
        self._input_dir = Path(input_dir)
        self._layout = OutputLayout(
            root=Path(output_root),
            accept_dir=self._config.accept_dir,
            reject_dir=self._config.reject_dir,
        )
        self._logger = logger or _LOGGER

    async def run(self) -> TriageReport:
        try:
            input_dir = require_directory(self._input_dir)
        except OSError as exc:
            raise LayoutError(f"input directory is not usable: {exc}") from exc
        self._layout.verify()

        names = await asyncio.to_thread(list_entries, input_dir)
        self._logger.debug("triage started", extra={"files": len(names)})

        pool: WorkerPool[FileOutcome] = WorkerPool(self._config.max_in_flight)
        outcomes = [
            outcome
            async for outcome in pool.run(self._process(input_dir, name) for name in names)
        ]
        outcomes.sort(key=lambda outcome: outcome.name)

        report = TriageReport(outcomes=outcomes, peak_in_flight=pool.peak)
        self._report(report)
        return report

    async def _process(self, input_dir: Path, name: str) -> FileOutcome:
        with correlation_scope(file=name):
            path = input_dir / name
            try:
                data = await read_bytes_async(path)
            except OSError as exc:
                return FileOutcome(
                    name=name,
                    status=FileStatus.UNREADABLE,
                    errors=(ReadError(path, exc),),
                )

            classification = classify(name, data, policy=self._config.wide_unit_policy)
            if isinstance(classification, Accepted):
                status = FileStatus.ACCEPTED
                reason = None
                self._logger.debug(
                    "accepted",
                    extra={"length": classification.digest.length},
                )
            else:
                status = FileStatus.REJECTED
                reason = str(classification.reason)
                self._logger.debug("rejected", extra={"reason": reason})

            errors = await self._write_all(classification.writes(self._layout))
            return FileOutcome(name=name, status=status, reason=reason, errors=errors)

    async def _write_all(self, writes: tuple[ArtifactWrite, ...]) -> tuple[FileIOError, ...]:
        results = await asyncio.gather(
            *(write_async(write.path, write.data) for write in writes),
            return_exceptions=True,
        )
        errors: list[FileIOError] = []
        for write, result in zip(writes, results, strict=True):
            if isinstance(result, OSError):
                errors.append(WriteError(write.path, result))
            elif isinstance(result, BaseException):
                raise result
        return tuple(errors)

    def _report(self, report: TriageReport) -> None:
        for outcome in report.failed:
            with correlation_scope(file=outcome.name):
                for error in outcome.errors:
                    self._logger.error(str(error), extra={"operation": error.operation})
        if report.failed:
            self._logger.error(
                "%d of %d file(s) had errors",
                len(report.failed),
                len(report.outcomes),
                extra={"summary": report.summary()},
            )
        else:
            self._logger.info("triage finished", extra={"summary": report.summary()})


async def triage_directory(
    input_dir: str | Path,
    output_root: str | Path,
    config: TriageConfig | None = None,
) -> TriageReport:
    """Triage every entry of ``input_dir`` into ``output_root``."""

    return await TriageOrchestrator(input_dir, output_root, config).run()


def run_triage(
    input_dir: str | Path,
    output_root: str | Path,
    config: TriageConfig | None = None,
) -> TriageReport:
    """Synchronous wrapper around ``triage_directory`` for CLI use."""

    return asyncio.run(triage_directory(input_dir, output_root, config))


__all__ = [
    "FileOutcome",
    "FileStatus",
    "TriageOrchestrator",
    "TriageReport",
    "run_triage",
    "triage_directory",
]
