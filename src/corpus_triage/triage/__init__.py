"""Per-file classification and bounded directory orchestration."""

from corpus_triage.triage.artifacts import ArtifactWrite, OutputLayout
from corpus_triage.triage.classifier import Accepted, Classification, Rejected, classify
from corpus_triage.triage.orchestrator import (
    FileOutcome,
    FileStatus,
    TriageOrchestrator,
    TriageReport,
    run_triage,
    triage_directory,
)

__all__ = [
    "Accepted",
    "ArtifactWrite",
    "Classification",
    "FileOutcome",
    "FileStatus",
    "OutputLayout",
    "Rejected",
    "TriageOrchestrator",
    "TriageReport",
    "classify",
    "run_triage",
    "triage_directory",
]
