"""CLI package for SearchSieve command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from SearchSieve.cli.runner import CommandRunner
from SearchSieve.cli.ui import cli


def main() -> None:
    """Run SearchSieve CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
