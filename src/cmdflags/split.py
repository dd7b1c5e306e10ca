r"""Split a shell-style command string into arguments.

Handles single and double quoted arguments, space separated arguments and
multi-line commands that use a trailing backslash (bash) or backtick
(PowerShell) to continue a line.

    >>> split("hello 'dog world'")
    ['hello', 'dog world']
    >>> split('--hello \\\n"world"')
    ['--hello', 'world']

Escapes are resolved inside quotes but kept verbatim outside of them, so
``split('a \\"b\\"')`` returns ``['a', '\\"b\\"']``.
"""

from __future__ import annotations

from enum import Enum

SPACE = " "
BACKSLASH = "\\"
BACKTICK = "`"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
LINE_FEED = "\n"
CARRIAGE_RETURN = "\r"

_CONTINUATION_MARKERS = frozenset({BACKSLASH, BACKTICK})
_ESCAPABLE = frozenset({SPACE, SINGLE_QUOTE, DOUBLE_QUOTE})


class QuoteState(Enum):
    """Quoting mode active while scanning."""

    NONE = 0
    SINGLE = 1
    DOUBLE = 2


_QUOTE_CHARS = {QuoteState.SINGLE: SINGLE_QUOTE, QuoteState.DOUBLE: DOUBLE_QUOTE}


def _continuation_length(value: str, index: int) -> int:
    """Return how many characters after the space at *index* form a continuation.

    Returns 0 when there is none. Only ``\\`` or a backtick directly followed
    by ``\\n`` or ``\\r\\n`` qualify, and only when more than two characters
    remain after the space.
    """
    remaining = len(value) - 1 - index
    if remaining <= 2 or value[index + 1] not in _CONTINUATION_MARKERS:
        return 0
    following = value[index + 2]
    if following == LINE_FEED:
        return 2
    if remaining > 3 and following == CARRIAGE_RETURN and value[index + 3] == LINE_FEED:
        return 3
    return 0


def split(value: str) -> list[str]:
    """Split *value* into a list of argument tokens. Never raises."""
    quote = QuoteState.NONE
    tokens: list[str] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            tokens.append("".join(buffer))
            buffer.clear()

    i = 0
    length = len(value)
    while i < length:
        c = value[i]

        if quote is not QuoteState.NONE:
            if c == _QUOTE_CHARS[quote]:
                if i > 0 and value[i - 1] == BACKSLASH:
                    if buffer and buffer[-1] == BACKSLASH:
                        buffer.pop()
                    buffer.append(c)
                else:
                    quote = QuoteState.NONE
                    flush()
            else:
                buffer.append(c)
            i += 1
            continue

        if c == SPACE:
            # consume the marker; the delimiter is implied by the newline
            i += _continuation_length(value, i)
            flush()
            i += 1
            continue

        if c == BACKSLASH:
            following = value[i + 1] if i + 1 < length else ""
            if following in _ESCAPABLE:
                buffer.append(c)
                buffer.append(following)
                i += 2
                continue
            buffer.append(c)
            i += 1
            continue

        # a backslash before a quote was consumed with it above
        if not buffer and c in (SINGLE_QUOTE, DOUBLE_QUOTE):
            quote = QuoteState.SINGLE if c == SINGLE_QUOTE else QuoteState.DOUBLE
            i += 1
            continue

        buffer.append(c)
        i += 1

    flush()
    return tokens
