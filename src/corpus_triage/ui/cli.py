"""Command-line interface for corpus-triage."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from corpus_triage.config import default_config
from corpus_triage.errors import LayoutError
from corpus_triage.observability import setup_logging, shutdown_logging
from corpus_triage.triage import run_triage

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class CLIError(RuntimeError):
    """Typed CLI failure with an explicit process exit code."""

    message: str
    exit_code: int = 2

    def __str__(self) -> str:
        return self.message


def build_parser() -> argparse.ArgumentParser:
    """Build the two-argument parser."""

    parser = argparse.ArgumentParser(
        prog="corpus-triage",
        description=(
            "Sort fuzzer-corpus JSON documents into OUTPUT_ROOT/yay (strictly valid, with\n"
            "signing encoding, length and SHA-256) and OUTPUT_ROOT/nay (everything else).\n"
            "Both bucket directories must already exist."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input_dir", help="Directory of candidate documents (not recursed).")
    parser.add_argument("output_root", help="Directory containing the yay/ and nay/ buckets.")
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse argv, run the triage and return the process exit code.

    Per-file read/write errors are reported on standard error but do not
    change the exit code.
    """

    parser = build_parser()
    namespace = parser.parse_args(list(argv) if argv is not None else None)
    config = default_config()

    setup_logging(config)
    try:
        run_triage(namespace.input_dir, namespace.output_root, config)
    except LayoutError as exc:
        raise CLIError(str(exc)) from exc
    finally:
        shutdown_logging()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI, rendering ``CLIError`` as a one-line message."""

    try:
        return run_cli(argv)
    except CLIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code


__all__ = ["CLIError", "build_parser", "main", "run_cli"]
