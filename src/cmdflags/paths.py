"""Config path helpers for cmdflags."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_DIR_ENV_VAR = "CMDFLAGS_CONFIG_DIR"


def get_config_dir() -> Path:
    """Get the config directory (holds config.toml)."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override).resolve()
    return Path(user_config_dir("cmdflags"))


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"
