"""Splat command."""

from __future__ import annotations

import json
import logging

import click

from cmdflags.errors import CmdFlagsError
from cmdflags.join import join
from cmdflags.splat import splat

from .common import PLATFORM_CHOICES, fail, get_state, resolve_platform

logger = logging.getLogger(__name__)


def _read_source(source: str) -> dict[str, object]:
    text = click.get_text_stream("stdin").read() if source == "-" else source
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        fail(f"Invalid JSON: {error}")
    if not isinstance(data, dict):
        fail(f"Expected a JSON object, got {type(data).__name__}")
    return data


@click.command(name="splat")
@click.argument("source", default="-")
@click.option("--preset", default=None, help="Named options from the config file")
@click.option(
    "-p",
    "--platform",
    "platform_name",
    type=click.Choice(PLATFORM_CHOICES, case_sensitive=False),
    default=None,
    help="Quoting dialect for --format shell",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(("json", "lines", "shell")),
    default=None,
    help="Output format (defaults to general.output_format)",
)
@click.pass_context
def splat_cmd(
    ctx: click.Context,
    source: str,
    preset: str | None,
    platform_name: str | None,
    output_format: str | None,
) -> None:
    """Compile a JSON object from SOURCE (or stdin) into arguments.

    \b
    Examples:
        cmdflags splat '{"foo": "bar", "yes": true}'
        echo '{"_": ["src"], "splat": {"command": "ruff check"}}' | cmdflags splat
        cmdflags splat '{"message": "wip"}' --preset git --format shell
    """
    config = get_state(ctx).config()
    data = _read_source(source)
    if preset:
        logger.debug("Using preset %r", preset)

    try:
        options = config.get_preset(preset) if preset else None
        args = splat(data, options)
    except CmdFlagsError as error:
        fail(str(error))

    match output_format or config.general.output_format:
        case "lines":
            for arg in args:
                click.echo(arg)
        case "shell":
            click.echo(join(args, resolve_platform(ctx, platform_name)))
        case _:
            click.echo(json.dumps(args))
