"""Command runner for coordinating CLI execution.

Handles logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml

from FacetFilter.cli.commands import DeriveCommand, parse_snapshots
from FacetFilter.config import AppConfig
from FacetFilter.services import create_filter_deriver
from FacetFilter.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution for the CLI."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_derive(self, action: str, data_path: Path) -> None:
        """Execute the derive command.

        Args:
            action: The CLI command name (e.g., 'derive').
            data_path: YAML or JSON file with selection data.

        Raises:
            click.Abort: When derivation fails.
        """
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path is not None:
            log.info("Logging to %s", log_path)
        try:
            snapshots = parse_snapshots(yaml.safe_load(data_path.read_text(encoding="utf-8")))
            log.info("Loaded %d selection snapshot(s) from %s", len(snapshots), data_path)

            command = DeriveCommand(
                config=self.config,
                deriver=create_filter_deriver(self.config),
                emit=click.echo,
            )
            command.execute(snapshots)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Derive failed: %s", e)
            raise click.Abort from e
