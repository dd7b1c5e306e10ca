"""Option values for splat configurations.

Raw Python values are converted once, when a configuration is built, into the
closed ``FlagValue`` variant. The compiler only ever pattern-matches on these
four shapes.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StrValue:
    value: str


@dataclass(frozen=True, slots=True)
class NumValue:
    value: int | float | Decimal | Fraction


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class ListValue:
    items: tuple[FlagValue, ...]


type FlagValue = StrValue | NumValue | BoolValue | ListValue


def _is_finite(number: int | float | Decimal | Fraction) -> bool:
    match number:
        case Decimal():
            return number.is_finite()
        case float():
            return math.isfinite(number)
        case _:
            return True


def to_flag_value(obj: object) -> FlagValue | None:
    """Convert a raw value into a FlagValue.

    Returns ``None`` for values that cannot be rendered on a command line:
    ``None``, non-finite numbers, mappings and other arbitrary objects.
    List elements that convert to ``None`` are dropped.
    """
    match obj:
        case StrValue() | NumValue() | BoolValue() | ListValue():
            return obj
        case bool():
            return BoolValue(obj)
        case int() | float() | Decimal() | Fraction():
            if not _is_finite(obj):
                logger.debug("Dropping non-finite number %r", obj)
                return None
            return NumValue(obj)
        case str():
            return StrValue(obj)
        case os.PathLike():
            return StrValue(os.fspath(obj))
        case list() | tuple():
            items = (to_flag_value(item) for item in obj)
            return ListValue(tuple(item for item in items if item is not None))
        case None:
            return None
        case _:
            logger.debug("Dropping unsupported value of type %s", type(obj).__name__)
            return None


def to_flag_values(obj: object) -> tuple[FlagValue, ...]:
    """Convert a sequence of raw values, dropping the ones that do not render."""
    match obj:
        case ListValue(items=items):
            return items
        case list() | tuple():
            converted = (to_flag_value(item) for item in obj)
            return tuple(item for item in converted if item is not None)
        case _:
            value = to_flag_value(obj)
            return () if value is None else (value,)


def _format_number(number: int | float | Decimal | Fraction) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def render(value: FlagValue) -> str:
    """Render a scalar value as a single argument string.

    Lists render as their elements joined by a comma; callers that need one
    argument per element use :func:`flatten`.
    """
    match value:
        case StrValue(value=text):
            return text
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case NumValue(value=number):
            return _format_number(number)
        case ListValue(items=items):
            return ",".join(render(item) for item in items)


def flatten(value: FlagValue) -> list[str]:
    """Render *value* as a list of argument strings, expanding nested lists."""
    match value:
        case ListValue(items=items):
            return [text for item in items for text in flatten(item)]
        case _:
            return [render(value)]
