"""CLI package for FacetFilter command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from FacetFilter.cli.runner import CommandRunner
from FacetFilter.cli.ui import cli


def main() -> None:
    """Run FacetFilter CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
