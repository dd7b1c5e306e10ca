"""Property-based tests for splat."""

from __future__ import annotations

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cmdflags.splat import splat
from tests.strategies import plain_arg, splat_mapping

pytestmark = pytest.mark.unit


class TestSplatProperties:
    @given(splat_mapping)
    def test_idempotent_and_non_mutating(self, mapping: dict[str, object]) -> None:
        """Splatting twice gives the same result and leaves the input alone."""
        snapshot = copy.deepcopy(mapping)
        assert splat(mapping) == splat(mapping)
        assert mapping == snapshot

    @given(splat_mapping)
    def test_output_is_strings(self, mapping: dict[str, object]) -> None:
        assert all(isinstance(arg, str) for arg in splat(mapping))

    @given(splat_mapping, st.lists(plain_arg, min_size=1, max_size=4))
    def test_extra_args_follow_separator(
        self, mapping: dict[str, object], extra: list[str]
    ) -> None:
        args = splat({**mapping, "--": extra})
        assert args[-len(extra) - 1 :] == ["--", *extra]

    @given(splat_mapping, st.lists(plain_arg, min_size=1, max_size=4))
    def test_command_comes_first(self, mapping: dict[str, object], command: list[str]) -> None:
        args = splat(mapping, {"command": command})
        assert args[: len(command)] == command

    @given(splat_mapping)
    def test_ignoring_both_polarities_drops_booleans(self, mapping: dict[str, object]) -> None:
        without_bools = {key: value for key, value in mapping.items() if not isinstance(value, bool)}
        options = {"ignoreTrue": True, "ignoreFalse": True}
        assert splat(mapping, options) == splat(without_bools)
