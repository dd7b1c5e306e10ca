"""Root CLI command registration."""

from __future__ import annotations

from pathlib import Path

import click

from cmdflags import __version__
from cmdflags.debug_log import setup_debug_logging

from .common import CliState
from .join import join_cmd
from .presets import presets_cmd
from .splat import splat_cmd
from .split import split_cmd


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, verbose: bool, config_path: Path | None) -> None:
    """Split, join and splat command-line arguments."""
    setup_debug_logging(verbose)
    if version:
        click.echo(f"cmdflags {__version__}")
        ctx.exit(0)

    ctx.obj = CliState(config_path=config_path)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(split_cmd)
cli.add_command(join_cmd)
cli.add_command(splat_cmd)
cli.add_command(presets_cmd)
