"""Compile a configuration object into command-line arguments.

A port of the ideas in the ``dargs`` package (MIT, Sindre Sorhus) reshaped
around :class:`~cmdflags.model.SplatObject`:

    >>> splat({"foo": "bar"})
    ['--foo', 'bar']
    >>> splat({"*": ["a", "b"], "yes": True, "_": ["baz"], "--": ["--baz"]})
    ['a', 'b', '--yes', 'baz', '--', '--baz']
    >>> splat({"foo": "bar", "test": "baz"}, {"argumentNames": ["foo"], "assign": "="})
    ['bar', '--test=baz']
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from cmdflags.model import SplatObject
from cmdflags.options import SplatOptions, matches_any
from cmdflags.split import split
from cmdflags.text import dasherize
from cmdflags.values import BoolValue, FlagValue, ListValue, flatten, render

logger = logging.getLogger(__name__)

EXTRA_SEPARATOR = "--"


class _OptionWriter:
    """Accumulates rendered option tokens for one splat call."""

    def __init__(self, options: SplatOptions) -> None:
        self.options = options
        self.tokens: list[str] = []

    def _emit(self, flag: str, value: str | None) -> None:
        if self.options.assign:
            self.tokens.append(f"{flag}{self.options.assign}{value}" if value else flag)
            return
        self.tokens.append(flag)
        if value:
            self.tokens.append(value)

    def flag(self, key: str, value: str | None = None) -> None:
        prefix = "-" if self.options.short_flag and len(key) == 1 else self.options.prefix
        name = key if self.options.preserve_case else dasherize(key)
        self._emit(prefix + name, value)

    def alias(self, token: str, value: str | None = None) -> None:
        if not token.startswith(("-", "/")):
            token = "-" + token
        self._emit(token, value)

    def write(self, key: str, value: FlagValue) -> None:
        options = self.options
        alias = options.aliases.get(key)
        match value:
            case BoolValue(value=True):
                if options.ignore_true:
                    return
                text = options.no_flag_values.t if options.is_no_flag(key) else None
                if alias:
                    self.alias(alias, text)
                else:
                    self.flag(key, text)
            case BoolValue(value=False):
                if options.ignore_false:
                    return
                if options.is_no_flag(key):
                    if alias:
                        self.alias(alias, options.no_flag_values.f)
                    else:
                        self.flag(key, options.no_flag_values.f)
                elif alias:
                    logger.debug("No negated form for aliased key %r; skipping", key)
                else:
                    self.flag(f"no-{key}", None)
            case ListValue(items=items):
                for item in items:
                    for text in flatten(item):
                        if alias:
                            self.alias(alias, text)
                        else:
                            self.flag(key, text)
            case _:
                text = render(value)
                if alias:
                    self.alias(alias, text)
                else:
                    self.flag(key, text)


def _is_placeable(value: FlagValue) -> bool:
    match value:
        case BoolValue(value=False):
            return False
        case ListValue(items=items):
            return bool(items)
        case _:
            return render(value) != ""


def _resolve_command(config: SplatObject, options: SplatOptions) -> list[str]:
    command = config.command if config.command else options.command
    match command:
        case str():
            return split(command)
        case list() | tuple():
            return [str(token) for token in command]
        case _:
            return []


def splat(
    config: SplatObject | Mapping[str, Any],
    options: SplatOptions | Mapping[str, Any] | None = None,
) -> list[str]:
    """Convert *config* into an ordered argument vector.

    Args:
        config: A :class:`SplatObject` or its dictionary form.
        options: Options that override any options nested in *config*.

    Returns:
        The arguments: command tokens, positional values (unless
        ``append_arguments``), options in insertion order, positional values
        (if ``append_arguments``), remaining arguments, then ``--`` and the
        extra arguments when there are any.

    Raises:
        ValidationError: if the ``_`` or ``--`` channel is not a list, or the
            options are malformed.
    """
    if not isinstance(config, SplatObject):
        config = SplatObject.from_mapping(config)
    overrides = SplatOptions.parse(dict(options) if isinstance(options, Mapping) else options)
    base = config.splat if config.splat is not None else SplatOptions()
    effective = base.merged(overrides)

    argument_names = list(
        config.argument_names
        if config.argument_names is not None
        else effective.argument_names or ()
    )
    slots: dict[int, FlagValue] = {}
    writer = _OptionWriter(effective)

    for key, value in config.options:
        if key in argument_names:
            if not _is_placeable(value):
                continue
            index = argument_names.index(key)
            match value:
                case ListValue(items=items):
                    for offset, item in enumerate(items):
                        slots[index + offset] = item
                case _:
                    slots[index] = value
            continue

        if effective.excludes is not None and matches_any(effective.excludes, key):
            logger.debug("Excluded option %r", key)
            continue
        if effective.includes is not None and not matches_any(effective.includes, key):
            logger.debug("Option %r not in includes", key)
            continue

        writer.write(key, value)

    positional = [
        text
        for index in sorted(slots)
        for text in flatten(slots[index])
        if text
    ]
    positional.extend(
        text for value in config.positional_args if _is_placeable(value) for text in flatten(value)
    )

    args = _resolve_command(config, effective)
    if not effective.append_arguments:
        args.extend(positional)
    args.extend(writer.tokens)
    if effective.append_arguments:
        args.extend(positional)
    args.extend(text for value in config.remaining_args for text in flatten(value))
    if config.extra_args:
        args.append(EXTRA_SEPARATOR)
        args.extend(text for value in config.extra_args for text in flatten(value))
    return args
