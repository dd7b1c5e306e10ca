"""Join argument vectors into a single, safely quoted command string."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdflags.platforms import Platform, current_platform

if TYPE_CHECKING:
    from collections.abc import Iterable

_UNIX_SPECIAL = frozenset({'"', "'", "\\", "$", "`"})
_UNIX_ESCAPED = frozenset({"$", "`", '"', "\\"})
_WINDOWS_SPECIAL = frozenset({" ", '"'})


def _needs_unix_quotes(arg: str) -> bool:
    return any(c in _UNIX_SPECIAL or c.isspace() for c in arg)


def _needs_windows_quotes(arg: str) -> bool:
    return any(c in _WINDOWS_SPECIAL for c in arg)


def _quote_unix(arg: str) -> str:
    if not _needs_unix_quotes(arg):
        return arg
    body = "".join(f"\\{c}" if c in _UNIX_ESCAPED else c for c in arg)
    return f'"{body}"'


def _quote_windows(arg: str) -> str:
    """Quote one argument following the MSVC C runtime re-parsing rules.

    Backslashes are literal unless they precede a double quote, in which case
    each one is doubled and one more escapes the quote itself.
    """
    if not _needs_windows_quotes(arg):
        return arg

    parts = ['"']
    backslashes = 0
    for c in arg:
        if c == "\\":
            backslashes += 1
            continue
        if c == '"':
            parts.append("\\" * (2 * backslashes + 1))
            parts.append('"')
        else:
            parts.append("\\" * backslashes)
            parts.append(c)
        backslashes = 0
    parts.append("\\" * backslashes)
    parts.append('"')
    return "".join(parts)


def unix_join(args: Iterable[str]) -> str:
    """Join *args* for a POSIX shell.

    Arguments containing whitespace, quotes, backslashes, ``$`` or backticks
    are wrapped in double quotes with ``$``, backtick, ``"`` and ``\\``
    backslash-escaped.
    """
    return " ".join(_quote_unix(arg) for arg in args)


def windows_join(args: Iterable[str]) -> str:
    """Join *args* for ``CreateProcess``/cmd.exe command-line parsing."""
    return " ".join(_quote_windows(arg) for arg in args)


def join(args: Iterable[str], platform: Platform | None = None) -> str:
    """Join *args* using the quoting rules of *platform*.

    When *platform* is omitted the current platform is used.
    """
    target = platform if platform is not None else current_platform()
    if target is Platform.WINDOWS:
        return windows_join(args)
    return unix_join(args)
