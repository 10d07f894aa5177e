"""
corpus-triage — JSON-lines logging on standard error

File: src/corpus_triage/observability/logging.py

Purpose
- Report per-file failures and the end-of-batch summary as one JSON object
  per line on standard error.

Functional requirements
- Records pass through a ``QueueHandler``; a ``QueueListener`` thread owns
  the stream, so worker threads and the event loop never block on it.
- ``correlation_scope(file=...)`` tags every record logged inside it. The
  tags are read on the emitting task, before the record is queued.
"""

from __future__ import annotations

import contextvars
import json
import logging
import logging.handlers
import queue
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import IO, TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

    from corpus_triage.config.schema import TriageConfig

ROOT_LOGGER_NAME: Final[str] = "corpus_triage"

# Attributes every LogRecord has; anything else came in through ``extra``.
_BUILTIN_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "correlation"}

_correlation: contextvars.ContextVar[tuple[tuple[str, str], ...]] = contextvars.ContextVar(
    "corpus_triage_correlation", default=()
)


@contextmanager
def correlation_scope(**tags: str) -> Iterator[None]:
    """Attach ``tags`` to every record logged inside the block."""

    merged = dict(_correlation.get())
    merged.update(tags)
    token = _correlation.set(tuple(merged.items()))
    try:
        yield
    finally:
        _correlation.reset(token)


def get_correlation_context() -> dict[str, str]:
    return dict(_correlation.get())


class _TaggingQueueHandler(logging.handlers.QueueHandler):
    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        record.correlation = get_correlation_context()
        prepared: logging.LogRecord = super().prepare(record)
        return prepared


class JsonLineFormatter(logging.Formatter):
    """``timestamp``, ``level``, ``logger``, ``message``, the correlation tags
    at top level and any ``extra`` values under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event.update(getattr(record, "correlation", {}))
        fields = {
            key: value
            for key, value in vars(record).items()
            if key not in _BUILTIN_ATTRIBUTES and not key.startswith("_")
        }
        if fields:
            event["fields"] = fields
        return json.dumps(event, ensure_ascii=False, default=str)


@dataclass(slots=True)
class _ActiveLogging:
    logger: logging.Logger
    handler: _TaggingQueueHandler
    listener: logging.handlers.QueueListener

    def close(self) -> None:
        # Stopping the listener drains everything already queued.
        self.listener.stop()
        self.logger.removeHandler(self.handler)
        self.handler.close()


_active: _ActiveLogging | None = None


def setup_logging(
    config: TriageConfig | None = None,
    *,
    stream: IO[str] | None = None,
    logger_name: str = ROOT_LOGGER_NAME,
) -> logging.Logger:
    """Route ``logger_name`` to JSON lines on ``stream`` (standard error by default)."""

    global _active
    shutdown_logging()

    logger = logging.getLogger(logger_name)
    logger.setLevel(config.log_level if config is not None else "WARNING")
    logger.propagate = False

    sink = logging.StreamHandler(stream or sys.stderr)
    sink.setFormatter(JsonLineFormatter())
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue()
    handler = _TaggingQueueHandler(log_queue)
    listener = logging.handlers.QueueListener(log_queue, sink)
    logger.addHandler(handler)
    listener.start()

    _active = _ActiveLogging(logger=logger, handler=handler, listener=listener)
    return logger


def shutdown_logging() -> None:
    """Flush and detach the logging set up by ``setup_logging``, if any."""

    global _active
    active, _active = _active, None
    if active is not None:
        active.close()


def get_logger(name: str) -> logging.Logger:
    """Return ``name`` as a logger below the package logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = [
    "ROOT_LOGGER_NAME",
    "JsonLineFormatter",
    "correlation_scope",
    "get_correlation_context",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
