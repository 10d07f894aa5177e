"""Logging for the triage run: JSON lines on standard error, tagged per file."""

from corpus_triage.observability.logging import (
    ROOT_LOGGER_NAME,
    JsonLineFormatter,
    correlation_scope,
    get_correlation_context,
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "ROOT_LOGGER_NAME",
    "JsonLineFormatter",
    "correlation_scope",
    "get_correlation_context",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
