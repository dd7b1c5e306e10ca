"""Shared helpers for cmdflags CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

import click

from cmdflags.config import CmdFlagsConfig
from cmdflags.errors import CmdFlagsError
from cmdflags.platforms import Platform, parse_platform

if TYPE_CHECKING:
    from pathlib import Path

PLATFORM_CHOICES = ("auto", "posix", "windows")


@dataclass(slots=True)
class CliState:
    """Per-invocation state stored on the click context."""

    config_path: Path | None = None
    _config: CmdFlagsConfig | None = field(default=None, repr=False)

    def config(self) -> CmdFlagsConfig:
        """Load the config file once, exiting with an error message on failure."""
        if self._config is None:
            try:
                self._config = CmdFlagsConfig.load(self.config_path)
            except CmdFlagsError as error:
                fail(str(error))
        return self._config


def fail(message: str) -> NoReturn:
    """Print *message* in red on stderr and exit with status 1."""
    click.secho(f"Error: {message}", fg="red", err=True)
    click.get_current_context().exit(1)


def get_state(ctx: click.Context) -> CliState:
    """Return the CliState for *ctx*, creating a default one when missing."""
    return ctx.ensure_object(CliState)


def resolve_platform(ctx: click.Context, name: str | None) -> Platform:
    """Pick the platform from the option, falling back to the config file."""
    if name is not None and name != "auto":
        resolved = parse_platform(name)
        if resolved is not None:
            return resolved
    return get_state(ctx).config().general.resolve_platform()
