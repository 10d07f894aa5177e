"""
corpus-triage — run settings

File: src/corpus_triage/config/schema.py

Purpose
- Hold the settings one triage run uses. The tool takes no configuration
  beyond its two positional arguments, so every run uses ``default_config()``;
  tests build variants directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from corpus_triage.constants import ACCEPT_DIR, DEFAULT_MAX_IN_FLIGHT, REJECT_DIR
from corpus_triage.signing.digest import WideUnitPolicy


@dataclass(frozen=True, slots=True)
class TriageConfig:
    """Effective settings for one triage run."""

    max_in_flight: int = DEFAULT_MAX_IN_FLIGHT
    accept_dir: str = ACCEPT_DIR
    reject_dir: str = REJECT_DIR
    wide_unit_policy: WideUnitPolicy = WideUnitPolicy.TRUNCATE
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_in_flight < 1:
            raise ValueError("max_in_flight must be >= 1")
        if self.accept_dir == self.reject_dir:
            raise ValueError("accept_dir and reject_dir must differ")


def default_config() -> TriageConfig:
    """Return the built-in defaults."""

    return TriageConfig()


__all__ = ["TriageConfig", "default_config"]
