"""Configuration loader for cmdflags.

Example ``config.toml``::

    [general]
    platform = "auto"
    output_format = "shell"

    [presets.git]
    command = ["git"]
    assign = "="
    excludes = ["/^_/"]
"""

from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from cmdflags.errors import ConfigError
from cmdflags.options import SplatOptions
from cmdflags.paths import get_config_path
from cmdflags.platforms import Platform, current_platform, parse_platform

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

type PlatformLiteral = Literal["auto", "posix", "windows"]
type OutputFormatLiteral = Literal["json", "lines", "shell"]

PLATFORM_VALUES = frozenset({"auto", "posix", "windows"})
OUTPUT_FORMAT_VALUES = frozenset({"json", "lines", "shell"})


class GeneralConfig(BaseModel):
    """General settings."""

    platform: PlatformLiteral = Field(
        default="auto",
        description="Quoting dialect for joined output: auto, posix or windows",
    )
    output_format: OutputFormatLiteral = Field(
        default="json", description="Default output of the splat command"
    )

    @field_validator("platform", mode="before")
    @classmethod
    def validate_platform(cls, value: object) -> str:
        """Coerce unknown platform names to 'auto'."""
        match value:
            case str() as name if name.lower() in PLATFORM_VALUES:
                return name.lower()
            case _:
                pass
        return "auto"

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, value: object) -> str:
        """Coerce unknown formats to 'json'."""
        match value:
            case str() as name if name in OUTPUT_FORMAT_VALUES:
                return name
            case _:
                pass
        return "json"

    def resolve_platform(self) -> Platform:
        """Return the configured platform, detecting it when set to 'auto'."""
        return parse_platform(self.platform) or current_platform()


class CmdFlagsConfig(BaseModel):
    """Root configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    presets: dict[str, SplatOptions] = Field(
        default_factory=dict, description="Named splat options"
    )

    @classmethod
    def load(cls, config_path: Path | None = None) -> CmdFlagsConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            logger.debug("No config at %s; using defaults", config_path)
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as error:
            raise ConfigError(f"Cannot read {config_path}: {error}") from error

        try:
            return cls.model_validate(data)
        except PydanticValidationError as error:
            raise ConfigError(f"Invalid config {config_path}: {error}") from error

    def get_preset(self, name: str) -> SplatOptions:
        """Return the named preset, raising ConfigError if it is not defined."""
        preset = self.presets.get(name)
        if preset is None:
            known = ", ".join(sorted(self.presets)) or "none"
            raise ConfigError(f"Unknown preset {name!r} (defined: {known})")
        return preset
