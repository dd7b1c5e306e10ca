"""Tests for loading cmdflags.toml configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cmdflags.config import CmdFlagsConfig
from cmdflags.errors import ConfigError
from cmdflags.paths import get_config_path
from cmdflags.platforms import Platform

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.integration


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = CmdFlagsConfig.load(tmp_path / "nope.toml")
    assert config.general.platform == "auto"
    assert config.general.output_format == "json"
    assert config.presets == {}


def test_default_path_uses_env_override(config_dir: Path) -> None:
    assert get_config_path() == config_dir.resolve() / "config.toml"
    (config_dir / "config.toml").write_text('[general]\nplatform = "windows"\n')
    assert CmdFlagsConfig.load().general.resolve_platform() is Platform.WINDOWS


def test_presets_are_parsed(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        """
[presets.git]
command = ["git"]
assign = "="
excludes = ["/^_/"]

[presets.docker]
command = "docker run"
shortFlag = false
noFlags = ["tty"]
"""
    )
    config = CmdFlagsConfig.load(path)
    git = config.get_preset("git")
    assert git.command == ["git"]
    assert git.assign == "="
    docker = config.get_preset("docker")
    assert docker.short_flag is False
    assert docker.is_no_flag("tty")


def test_invalid_general_values_are_coerced(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('[general]\nplatform = "amiga"\noutput_format = "xml"\n')
    config = CmdFlagsConfig.load(path)
    assert config.general.platform == "auto"
    assert config.general.output_format == "json"


def test_bad_toml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[general\n")
    with pytest.raises(ConfigError) as exc_info:
        CmdFlagsConfig.load(path)
    assert exc_info.value.code == "INVALID_CONFIG"


def test_invalid_preset_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[presets.bad]\naliases = 3\n")
    with pytest.raises(ConfigError, match="Invalid config"):
        CmdFlagsConfig.load(path)


def test_unknown_preset(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unknown preset 'git'"):
        CmdFlagsConfig().get_preset("git")
