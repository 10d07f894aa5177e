"""Process entrypoint: run the CLI and turn failures into exit codes."""

from __future__ import annotations

import sys
import traceback
from enum import IntEnum
from typing import TYPE_CHECKING

from corpus_triage.errors import LayoutError
from corpus_triage.ui.cli import main

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class ExitCode(IntEnum):
    """``SUCCESS`` also covers a batch in which some files failed to read or write."""

    SUCCESS = 0
    USAGE_ERROR = 2
    INTERNAL_ERROR = 4


# Failures caused by the arguments rather than by a bug.
_USAGE_FAILURES = (LayoutError, FileNotFoundError, NotADirectoryError, PermissionError)


def cli_entrypoint(argv: Sequence[str] | None = None) -> int:
    """Entrypoint used by ``python -m corpus_triage`` and the console script."""

    try:
        return main(argv)
    except SystemExit as exc:
        # argparse exits with 2 on bad usage and 0 after --help.
        return exc.code if isinstance(exc.code, int) else int(ExitCode.USAGE_ERROR)
    except Exception as exc:  # noqa: BLE001 - process boundary.
        if any(isinstance(item, _USAGE_FAILURES) for item in _causes(exc)):
            print(f"error: {exc}", file=sys.stderr)
            return int(ExitCode.USAGE_ERROR)
        traceback.print_exception(exc)
        return int(ExitCode.INTERNAL_ERROR)


def _causes(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


__all__ = ["ExitCode", "cli_entrypoint"]
