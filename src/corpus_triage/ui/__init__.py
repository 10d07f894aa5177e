"""Command-line surface for corpus-triage."""

from corpus_triage.ui.cli import CLIError, build_parser, main, run_cli

__all__ = ["CLIError", "build_parser", "main", "run_cli"]
