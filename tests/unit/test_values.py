"""Tests for option value conversion and rendering."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from cmdflags.text import dasherize
from cmdflags.values import (
    BoolValue,
    ListValue,
    NumValue,
    StrValue,
    flatten,
    render,
    to_flag_value,
    to_flag_values,
)

pytestmark = pytest.mark.unit


class TestToFlagValue:
    def test_bool_is_not_a_number(self) -> None:
        assert to_flag_value(True) == BoolValue(True)

    def test_numbers(self) -> None:
        assert to_flag_value(3) == NumValue(3)
        assert to_flag_value(Decimal("1.5")) == NumValue(Decimal("1.5"))
        assert to_flag_value(Fraction(1, 2)) == NumValue(Fraction(1, 2))

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, Decimal("NaN")])
    def test_non_finite_numbers_are_dropped(self, value: object) -> None:
        assert to_flag_value(value) is None

    def test_lists_drop_unrenderable_items(self) -> None:
        assert to_flag_value(["a", None, math.nan, 1]) == ListValue((StrValue("a"), NumValue(1)))

    def test_mappings_are_dropped(self) -> None:
        assert to_flag_value({"a": 1}) is None

    def test_existing_values_pass_through(self) -> None:
        value = StrValue("x")
        assert to_flag_value(value) is value

    def test_to_flag_values_wraps_scalars(self) -> None:
        assert to_flag_values("a") == (StrValue("a"),)
        assert to_flag_values(None) == ()


class TestRender:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (StrValue("x"), "x"),
            (BoolValue(True), "true"),
            (BoolValue(False), "false"),
            (NumValue(2.0), "2"),
            (NumValue(2.5), "2.5"),
            (NumValue(-7), "-7"),
            (NumValue(Fraction(3, 4)), "3/4"),
        ],
    )
    def test_scalars(self, value: object, expected: str) -> None:
        assert render(value) == expected  # type: ignore[arg-type]

    def test_flatten_nested_lists(self) -> None:
        nested = ListValue((StrValue("a"), ListValue((NumValue(1), BoolValue(True)))))
        assert flatten(nested) == ["a", "1", "true"]


class TestDasherize:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("foo", "foo"),
            ("fooBar", "foo-bar"),
            ("FooBar", "foo-bar"),
            ("foo_bar", "foo-bar"),
            ("foo bar", "foo-bar"),
            ("HTTPServer", "http-server"),
            ("allowRead2", "allow-read2"),
            ("no-dryRun", "no-dry-run"),
            ("already-dashed", "already-dashed"),
            ("", ""),
        ],
    )
    def test_cases(self, key: str, expected: str) -> None:
        assert dasherize(key) == expected
