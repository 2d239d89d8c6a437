# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionSpec` dataclass, the immutable description of one named option.

Each `OptionSpec` describes one `--name` input of a command node: its declared value
type, help text, whether it is required, how to produce a value when it is absent,
and how to turn its raw token into a value.

Key Attributes:
- `name`: The long flag (`--count`). A bare `count` is normalized to `--count`.
- `type`: The declared value type. `bool` makes the option a flag.
- `default` / `default_factory`: Constant default, or zero-argument generator.
- `parser`: Optional callable converting the raw token.
- `required`: Whether the option must be supplied when no default exists.

Flags never consume a following token. Presence of a flag yields `True`, or the
negation of its declared constant default. Value options consume exactly one token.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable

from argtree.conversion import (
    NumberParseError,
    can_convert,
    coerce_value,
    numeric_target,
    parse_number,
)
from argtree.cursor import TokenCursor
from argtree.errors import (
    ConversionError,
    InternalLogicError,
    InternalLogicErrorKind,
    InvalidConfigKind,
    InvalidConfiguration,
    InvalidNumber,
    MissingOptionValue,
    is_parse_error,
)
from argtree.exceptions import OptionConfigurationError, ParseFailure

HELP_TOKEN = "--help"

_OPTION_NAME_RE = re.compile(r"--[A-Za-z0-9][A-Za-z0-9_-]*")


class _Missing:
    """Sentinel type for an option without a constant default."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def normalize_option_name(name: str) -> str:
    """Return `name` in `--name` form, validating its characters."""
    if not isinstance(name, str):
        raise OptionConfigurationError(f"Option name must be a string, got {name!r}")
    if not name.startswith("-"):
        name = f"--{name}"
    if not _OPTION_NAME_RE.fullmatch(name):
        raise OptionConfigurationError(
            f"Invalid option name '{name}': use '--' followed by letters, digits, "
            "'-' or '_', starting with a letter or digit"
        )
    return name


@dataclass(frozen=True)
class OptionSpec:
    """
    Represents one named command-line option.

    Attributes:
        name (str): Long flag for the option, always in `--name` form.
        type (Any): Declared value type (e.g. str, int, float, bool, an Enum).
        help (str): Help text for the option.
        required (bool): True if the option must be supplied when it has no default.
        default (Any): Constant default value, or `MISSING`.
        default_factory (Callable[[], Any] | None): Zero-argument default generator.
        parser (Callable[[str], Any] | None): Converts the raw token into a value.
            Returning None signals a conversion failure. Raising `ParseFailure`
            hands a custom error to the caller unchanged.
    """

    name: str
    type: Any = str
    help: str = ""
    required: bool = False
    default: Any = MISSING
    default_factory: Callable[[], Any] | None = None
    parser: Callable[[str], Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_option_name(self.name))
        if self.name == HELP_TOKEN:
            raise OptionConfigurationError(f"'{HELP_TOKEN}' is reserved")
        if self.is_flag and self.parser is not None:
            raise OptionConfigurationError(
                f"Flag option '{self.name}' cannot have a value parser"
            )
        if self.parser is not None and not callable(self.parser):
            raise OptionConfigurationError(f"parser for '{self.name}' must be callable")
        if self.default_factory is not None:
            if not callable(self.default_factory):
                raise OptionConfigurationError(
                    f"default_factory for '{self.name}' must be callable"
                )
            if self.default is not MISSING:
                raise OptionConfigurationError(
                    f"Option '{self.name}' cannot have both default and default_factory"
                )

    @property
    def dest(self) -> str:
        """Key used for this option in a `ParsedCommand`."""
        return self.name.lstrip("-").replace("-", "_").lower()

    @property
    def is_flag(self) -> bool:
        return self.type is bool

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING or self.default_factory is not None

    def get_metavar(self) -> str:
        """Placeholder shown for the option's value in usage text, empty for flags."""
        if self.is_flag:
            return ""
        return f"<{self.name.lstrip('-').upper()}>"

    def resolve(self, cursor: TokenCursor) -> Any:
        """
        Produce this option's value; the cursor sits just past the option's name.

        Raises:
            ParseFailure: With `MissingOptionValue` when no token is left for a
                value option, or whatever conversion of the token failed with.
        """
        if self.is_flag:
            if self.default is not MISSING:
                return not self.default
            return True

        if cursor.exhausted():
            raise ParseFailure(MissingOptionValue(self.name))
        return self.convert(cursor.advance())

    def convert(self, raw_arg: str) -> Any:
        """Convert one raw token into this option's value."""
        if self.parser is not None:
            return self._run_parser(raw_arg)

        if self.type is str:
            return raw_arg

        number_type = numeric_target(self.type)
        if number_type is not None:
            try:
                return parse_number(raw_arg, number_type)
            except NumberParseError as error:
                raise ParseFailure(
                    InvalidNumber(self.name, raw_arg, error.reason)
                ) from error

        if not can_convert(self.type):
            raise ParseFailure(
                InvalidConfiguration(self.name, InvalidConfigKind.EMPTY_PARSER)
            )
        try:
            return coerce_value(raw_arg, self.type)
        except (ValueError, TypeError) as error:
            raise ParseFailure(ConversionError(self.name, raw_arg, str(error))) from error

    def _run_parser(self, raw_arg: str) -> Any:
        assert self.parser is not None, "parser should not be None"
        try:
            value = self.parser(raw_arg)
        except (ValueError, TypeError) as error:
            raise ParseFailure(ConversionError(self.name, raw_arg, str(error))) from error
        if value is None:
            raise ParseFailure(ConversionError(self.name, raw_arg))
        if is_parse_error(value):
            raise ParseFailure(
                InternalLogicError(
                    self.name, InternalLogicErrorKind.INVALID_FUNCTION_RETURN_TYPE
                )
            )
        return value

    def __str__(self) -> str:
        return (
            f"OptionSpec(name='{self.name}', type={getattr(self.type, '__name__', self.type)}, "
            f"required={self.required}, default={self.default!r})"
        )
