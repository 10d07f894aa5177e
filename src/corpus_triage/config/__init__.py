"""Run settings for corpus-triage."""

from corpus_triage.config.schema import TriageConfig, default_config

__all__ = ["TriageConfig", "default_config"]
