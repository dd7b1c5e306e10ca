"""Error types raised by cmdflags."""

from __future__ import annotations


class CmdFlagsError(ValueError):
    """Base for cmdflags errors with a machine-readable code."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


class ValidationError(CmdFlagsError):
    """Raised when a splat configuration is malformed."""

    def __init__(self, message: str, *, channel: str | None = None) -> None:
        super().__init__(
            message,
            code="INVALID_CHANNEL" if channel is not None else "INVALID_OPTIONS",
        )
        self.channel = channel

    @classmethod
    def for_channel(cls, channel: str, value: object) -> ValidationError:
        """Build the error for a reserved channel that was not list-valued."""
        return cls(
            f"Expected key `{channel}` to be a list, got {type(value).__name__}",
            channel=channel,
        )


class ConfigError(CmdFlagsError):
    """Raised when the TOML config file cannot be read or validated."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_CONFIG")
