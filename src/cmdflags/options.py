"""Options controlling how a configuration is splatted into arguments."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from cmdflags.errors import ValidationError

type KeyPattern = str | re.Pattern[str]

_REGEX_LITERAL = re.compile(r"^/(?P<body>.+)/(?P<flags>[imsx]*)$")
_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def _compile_key_pattern(value: object) -> object:
    """Compile ``/regex/flags`` strings; other values pass through unchanged."""
    if not isinstance(value, str):
        return value
    found = _REGEX_LITERAL.match(value)
    if found is None:
        return value
    flags = 0
    for letter in found.group("flags"):
        flags |= _REGEX_FLAGS[letter]
    return re.compile(found.group("body"), flags)


def matches_any(patterns: list[KeyPattern], key: str) -> bool:
    """Return True if *key* equals a string pattern or is found by a regex."""
    for pattern in patterns:
        match pattern:
            case re.Pattern():
                if pattern.search(key):
                    return True
            case str():
                if pattern == key:
                    return True
    return False


class NoFlagValues(BaseModel):
    """Values emitted in place of bare flags for ``no_flags`` keys."""

    model_config = ConfigDict(frozen=True)

    t: str = Field(default="true", description="Value emitted for True")
    f: str = Field(default="false", description="Value emitted for False")


class SplatOptions(BaseModel):
    """Rendering options for :func:`cmdflags.splat`.

    Field names accept both snake_case and the camelCase spelling used in JSON
    and TOML configs (``shortFlag``, ``argumentNames``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    command: str | list[str] | None = Field(
        default=None, description="Leading command or subcommand tokens"
    )
    prefix: str = Field(default="--", description="Prefix for long options")
    short_flag: bool = Field(
        default=True,
        alias="shortFlag",
        description="Use '-' for single character keys",
    )
    aliases: dict[str, str] = Field(
        default_factory=dict, description="Literal flag tokens keyed by option name"
    )
    assign: str | None = Field(
        default=None,
        description="Join option and value into one token with this separator",
    )
    preserve_case: bool = Field(
        default=False, alias="preserveCase", description="Do not dasherize keys"
    )
    includes: list[KeyPattern] | None = Field(
        default=None, description="Only render keys matching one of these"
    )
    excludes: list[KeyPattern] | None = Field(
        default=None, description="Never render keys matching one of these"
    )
    ignore_true: bool = Field(default=False, alias="ignoreTrue")
    ignore_false: bool = Field(default=False, alias="ignoreFalse")
    no_flags: bool | list[str] | None = Field(
        default=None,
        alias="noFlags",
        description="Keys (or all keys when True) that emit a value instead of a flag",
    )
    no_flag_values: NoFlagValues = Field(default_factory=NoFlagValues, alias="noFlagValues")
    argument_names: list[str] | None = Field(
        default=None,
        alias="argumentNames",
        description="Keys rendered positionally, in this order",
    )
    append_arguments: bool = Field(
        default=False,
        alias="appendArguments",
        description="Place positional arguments after the options",
    )

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def compile_regex_literals(cls, value: object) -> object:
        match value:
            case list() | tuple():
                return [_compile_key_pattern(item) for item in value]
            case _:
                return value

    @classmethod
    def parse(cls, data: SplatOptions | dict[str, Any] | None) -> SplatOptions:
        """Validate *data*, raising :class:`cmdflags.errors.ValidationError` on failure."""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except PydanticValidationError as error:
            raise ValidationError(f"Invalid splat options: {error}") from error

    def merged(self, override: SplatOptions | None) -> SplatOptions:
        """Return a copy where every field explicitly set on *override* wins."""
        if override is None:
            return self
        update = {name: getattr(override, name) for name in override.model_fields_set}
        return self.model_copy(update=update)

    def is_no_flag(self, key: str) -> bool:
        """Return True if *key* emits a ``no_flag_values`` value."""
        match self.no_flags:
            case bool() as enabled:
                return enabled
            case list() as keys:
                return key in keys
            case _:
                return False
