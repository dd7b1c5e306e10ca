"""Structured splat configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cmdflags.errors import ValidationError
from cmdflags.options import SplatOptions
from cmdflags.values import FlagValue, to_flag_value, to_flag_values

POSITIONAL_KEY = "*"
REMAINING_KEY = "_"
EXTRA_KEY = "--"
OPTIONS_KEY = "splat"
RESERVED_KEYS = frozenset({POSITIONAL_KEY, REMAINING_KEY, EXTRA_KEY, OPTIONS_KEY})


def _require_sequence(channel: str, value: object) -> tuple[FlagValue, ...]:
    match value:
        case list() | tuple():
            return to_flag_values(value)
        case _:
            raise ValidationError.for_channel(channel, value)


@dataclass(frozen=True, slots=True)
class SplatObject:
    """A configuration to compile into an argument vector.

    The reserved channels are named fields, so no option name can collide
    with them. ``options`` keeps the caller's insertion order.
    """

    options: tuple[tuple[str, FlagValue], ...] = ()
    command: str | tuple[str, ...] | None = None
    positional_args: tuple[FlagValue, ...] = ()
    remaining_args: tuple[FlagValue, ...] = ()
    extra_args: tuple[FlagValue, ...] = ()
    argument_names: tuple[str, ...] | None = None
    splat: SplatOptions | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__.
        object.__setattr__(
            self, "remaining_args", _require_sequence(REMAINING_KEY, self.remaining_args)
        )
        object.__setattr__(self, "extra_args", _require_sequence(EXTRA_KEY, self.extra_args))
        object.__setattr__(self, "positional_args", to_flag_values(self.positional_args))
        if isinstance(self.command, list):
            object.__setattr__(self, "command", tuple(self.command))
        if self.argument_names is not None:
            object.__setattr__(self, "argument_names", tuple(self.argument_names))
        normalized: list[tuple[str, FlagValue]] = []
        for key, raw in self.options:
            value = to_flag_value(raw)
            if value is not None:
                normalized.append((key, value))
        object.__setattr__(self, "options", tuple(normalized))

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        *,
        command: str | list[str] | tuple[str, ...] | None = None,
        argument_names: list[str] | tuple[str, ...] | None = None,
    ) -> SplatObject:
        """Build a SplatObject from the dictionary form.

        ``"*"`` holds positional values, ``"_"`` remaining arguments, ``"--"``
        extra arguments and ``"splat"`` nested :class:`SplatOptions`. Every
        other key is an option. The mapping is not modified.
        """
        options: list[tuple[str, Any]] = []
        positional: tuple[FlagValue, ...] = ()
        remaining: tuple[FlagValue, ...] = ()
        extra: tuple[FlagValue, ...] = ()
        nested: SplatOptions | None = None

        for key, value in mapping.items():
            match key:
                case "*":
                    positional = positional + to_flag_values(value)
                case "_":
                    remaining = _require_sequence(REMAINING_KEY, value)
                case "--":
                    extra = _require_sequence(EXTRA_KEY, value)
                case "splat":
                    if value is not None:
                        nested = SplatOptions.parse(value)
                case _:
                    options.append((str(key), value))

        return cls(
            options=tuple(options),
            command=tuple(command) if isinstance(command, list) else command,
            positional_args=positional,
            remaining_args=remaining,
            extra_args=extra,
            argument_names=tuple(argument_names) if argument_names is not None else None,
            splat=nested,
        )
