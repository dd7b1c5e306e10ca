"""Pytest fixtures for cmdflags tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

if TYPE_CHECKING:
    from pathlib import Path


settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the host's config directory and platform override out of tests."""
    monkeypatch.setenv("CMDFLAGS_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("CMDFLAGS_PLATFORM", raising=False)


@pytest.fixture(autouse=True)
def _mock_platform_system(monkeypatch: pytest.MonkeyPatch, request: pytest.FixtureRequest) -> None:
    """Handle @pytest.mark.mock_platform_system("Windows") marker."""
    marker = request.node.get_closest_marker("mock_platform_system")
    if marker:
        target_platform = marker.args[0]
        monkeypatch.setattr("platform.system", lambda: target_platform)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Return the isolated config directory, created on demand."""
    path = tmp_path / "config"
    path.mkdir(parents=True, exist_ok=True)
    return path
