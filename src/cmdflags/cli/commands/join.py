"""Join command."""

from __future__ import annotations

import click

from cmdflags.join import join

from .common import PLATFORM_CHOICES, resolve_platform


@click.command(name="join")
@click.argument("args", nargs=-1)
@click.option(
    "-p",
    "--platform",
    "platform_name",
    type=click.Choice(PLATFORM_CHOICES, case_sensitive=False),
    default=None,
    help="Quoting dialect (defaults to the config file, then the current OS)",
)
@click.pass_context
def join_cmd(ctx: click.Context, args: tuple[str, ...], platform_name: str | None) -> None:
    """Join ARGS into one quoted command string.

    Put ``--`` before arguments that start with a dash.

    \b
    Examples:
        cmdflags join echo "hello world"
        cmdflags join --platform windows -- git commit -m 'say "hi"'
    """
    click.echo(join(args, resolve_platform(ctx, platform_name)))
