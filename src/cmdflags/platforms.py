"""Target platform detection for command-line quoting."""

from __future__ import annotations

import logging
import os
import platform
from enum import StrEnum

logger = logging.getLogger(__name__)

PLATFORM_ENV_VAR = "CMDFLAGS_PLATFORM"


class Platform(StrEnum):
    """Command-line quoting dialects."""

    POSIX = "posix"
    WINDOWS = "windows"


def is_windows() -> bool:
    """Return True when running on Windows."""
    return platform.system() == "Windows"


def parse_platform(value: str | Platform | None) -> Platform | None:
    """Map a user-supplied platform name to a Platform.

    ``None``, ``""`` and ``"auto"`` mean "detect", and return ``None``.
    Unknown names also return ``None``.
    """
    match value:
        case Platform():
            return value
        case str() as name if name.strip().lower() in {"posix", "unix", "linux", "macos"}:
            return Platform.POSIX
        case str() as name if name.strip().lower() in {"windows", "win32", "nt"}:
            return Platform.WINDOWS
        case _:
            return None


def current_platform() -> Platform:
    """Return the quoting dialect for this process.

    ``CMDFLAGS_PLATFORM`` overrides detection when it names a known platform.
    """
    override = os.environ.get(PLATFORM_ENV_VAR, "")
    if override and override.strip().lower() != "auto":
        resolved = parse_platform(override)
        if resolved is not None:
            return resolved
        logger.warning("Ignoring unknown %s value %r", PLATFORM_ENV_VAR, override)
    return Platform.WINDOWS if is_windows() else Platform.POSIX
