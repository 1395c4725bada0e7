"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from FacetFilter.cli.runner import CommandRunner
from FacetFilter.config import load_config, load_config_with_defaults


@click.group(help="FacetFilter: turn UI selections into search filter clauses.")
@click.option(
    "--defaults",
    "default_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to the base YAML config.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Optional YAML override deep-merged onto --defaults.",
)
@click.pass_context
def cli(ctx: click.Context, default_path: Path, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()

    if config_path is None:
        ctx.obj = load_config(default_path)
    else:
        ctx.obj = load_config_with_defaults(config_path, default_path=default_path)


@cli.command("derive")
@click.option(
    "--data",
    "data_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    required=True,
    help="YAML/JSON selection data: one object, or a list of snapshots.",
)
@click.pass_context
def derive_cmd(ctx: click.Context, data_path: Path) -> None:
    """Derive filter clauses and print them as JSON.

    Raises:
        click.Abort: When derivation fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_derive(action=ctx.command.name, data_path=data_path)
