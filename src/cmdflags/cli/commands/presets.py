"""Preset listing command."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from .common import get_state


@click.command(name="presets")
@click.pass_context
def presets_cmd(ctx: click.Context) -> None:
    """List the splat presets defined in the config file."""
    config = get_state(ctx).config()
    if not config.presets:
        click.secho("No presets configured.", fg="yellow")
        return

    table = Table("Preset", "Command", "Prefix", "Assign")
    for name, preset in sorted(config.presets.items()):
        command = preset.command
        if isinstance(command, list):
            command = " ".join(command)
        table.add_row(name, command or "", preset.prefix, preset.assign or "")
    Console().print(table)
