"""Module entrypoint for ``python -m corpus_triage``."""

from __future__ import annotations

from corpus_triage.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
