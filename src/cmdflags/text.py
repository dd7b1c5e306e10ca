"""String helpers for rendering option names."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[_\s]+")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")


def dasherize(value: str) -> str:
    """Convert an identifier-style key to lowercase dash-case.

    ``fooBar``, ``foo_bar``, ``FooBar`` and ``foo bar`` all become ``foo-bar``;
    ``HTTPServer`` becomes ``http-server``.
    """
    if not value:
        return value
    result = _SEPARATORS.sub("-", value)
    result = _ACRONYM_WORD.sub(r"\1-\2", result)
    result = _LOWER_UPPER.sub(r"\1-\2", result)
    return result.lower()
