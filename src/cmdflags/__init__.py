"""cmdflags: split, join and splat command-line arguments.

    >>> from cmdflags import join, splat, split
    >>> split("echo 'hello world'")
    ['echo', 'hello world']
    >>> splat({"foo": "bar", "splat": {"command": ["git", "clone"]}})
    ['git', 'clone', '--foo', 'bar']
"""

from cmdflags.errors import CmdFlagsError, ConfigError, ValidationError
from cmdflags.join import join, unix_join, windows_join
from cmdflags.model import SplatObject
from cmdflags.options import NoFlagValues, SplatOptions
from cmdflags.platforms import Platform, current_platform
from cmdflags.splat import splat
from cmdflags.split import split

__version__ = "0.1.0"

__all__ = [
    "CmdFlagsError",
    "ConfigError",
    "NoFlagValues",
    "Platform",
    "SplatObject",
    "SplatOptions",
    "ValidationError",
    "current_platform",
    "join",
    "splat",
    "split",
    "unix_join",
    "windows_join",
]
