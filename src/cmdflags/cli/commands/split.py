"""Split command."""

from __future__ import annotations

import json

import click

from cmdflags.split import split


@click.command(name="split")
@click.argument("command")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(("json", "lines")),
    default="json",
    show_default=True,
    help="Print a JSON array or one argument per line",
)
def split_cmd(command: str, output_format: str) -> None:
    """Split COMMAND into arguments.

    \b
    Examples:
        cmdflags split "git commit -m 'first commit'"
        cmdflags split 'deno run "mod.ts"' --format lines
    """
    tokens = split(command)
    if output_format == "lines":
        for token in tokens:
            click.echo(token)
        return
    click.echo(json.dumps(tokens))
