# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The closed set of errors a resolution can end with.

Every variant is a frozen dataclass that knows how to render itself with `str()`.
`ParseError` is the union of all variants and `PARSE_ERROR_TYPES` the matching
tuple for `isinstance` checks. `render_error()` walks the set exhaustively and
refuses anything outside it.

User-input errors:
- UnknownOption, DuplicateOption, MissingOptionValue, ConversionError,
  InvalidNumber, RequiredOption

Configuration errors:
- InvalidConfiguration, InternalLogicError, DefaultGenerationError

Control flow:
- ShowHelp: help was requested; carries the rendered usage text.

Catch-all:
- UnknownError
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class InternalLogicErrorKind(Enum):
    """Kinds of `InternalLogicError`."""

    INVALID_FUNCTION_RETURN_TYPE = "InvalidFunctionReturnType"

    def __str__(self) -> str:
        return self.value


class InvalidConfigKind(Enum):
    """
    Kinds of `InvalidConfiguration`.

    Members:
        EMPTY_DEFAULT: The option has no default and its type has no zero value.
        EMPTY_PARSER: The option has no parser and its type cannot convert a string.
    """

    EMPTY_DEFAULT = "EmptyDefault"
    EMPTY_PARSER = "EmptyParser"

    def __str__(self) -> str:
        return self.value


class NumberErrorReason(Enum):
    """Why a built-in numeric conversion failed."""

    INVALID_ARGUMENT = "invalid_argument"
    RESULT_OUT_OF_RANGE = "result_out_of_range"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnknownError:
    def __str__(self) -> str:
        return "unknown error"


@dataclass(frozen=True)
class InternalLogicError:
    name: str
    kind: InternalLogicErrorKind

    def __str__(self) -> str:
        return f"internal logic error: name='{self.name}' kind='{self.kind}'"


@dataclass(frozen=True)
class UnknownOption:
    token: str

    def __str__(self) -> str:
        return f"unknown option: arg='{self.token}'"


@dataclass(frozen=True)
class ShowHelp:
    """Help was requested. Not a fault; `rendered_text` is meant to be printed."""

    rendered_text: str

    def __str__(self) -> str:
        return self.rendered_text


@dataclass(frozen=True)
class DuplicateOption:
    name: str

    def __str__(self) -> str:
        return f"duplicate option: name='{self.name}'"


@dataclass(frozen=True)
class MissingOptionValue:
    name: str

    def __str__(self) -> str:
        return f"missing value for option: name='{self.name}'"


@dataclass(frozen=True)
class ConversionError:
    """The option's parser rejected `raw_arg`."""

    name: str
    raw_arg: str
    detail: str = ""

    def __str__(self) -> str:
        message = f"value parser failed: name='{self.name}' arg='{self.raw_arg}'"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message


@dataclass(frozen=True)
class InvalidNumber:
    name: str
    raw_arg: str
    reason: NumberErrorReason

    def __str__(self) -> str:
        return (
            f"invalid number: option='{self.name}' arg='{self.raw_arg}' "
            f"reason='{self.reason}'"
        )


@dataclass(frozen=True)
class RequiredOption:
    name: str

    def __str__(self) -> str:
        return f"missing required option: name='{self.name}'"


@dataclass(frozen=True)
class InvalidConfiguration:
    name: str
    kind: InvalidConfigKind

    def __str__(self) -> str:
        return f"invalid configuration: name='{self.name}' kind='{self.kind}'"


@dataclass(frozen=True)
class DefaultGenerationError:
    name: str
    detail: str = ""

    def __str__(self) -> str:
        message = f"failed to generate default value: name='{self.name}'"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message


ParseError = Union[
    UnknownError,
    InternalLogicError,
    UnknownOption,
    ShowHelp,
    DuplicateOption,
    MissingOptionValue,
    ConversionError,
    InvalidNumber,
    RequiredOption,
    InvalidConfiguration,
    DefaultGenerationError,
]

PARSE_ERROR_TYPES: tuple[type, ...] = (
    UnknownError,
    InternalLogicError,
    UnknownOption,
    ShowHelp,
    DuplicateOption,
    MissingOptionValue,
    ConversionError,
    InvalidNumber,
    RequiredOption,
    InvalidConfiguration,
    DefaultGenerationError,
)

USER_ERROR_TYPES: tuple[type, ...] = (
    UnknownOption,
    DuplicateOption,
    MissingOptionValue,
    ConversionError,
    InvalidNumber,
    RequiredOption,
)

CONFIGURATION_ERROR_TYPES: tuple[type, ...] = (
    InvalidConfiguration,
    InternalLogicError,
    DefaultGenerationError,
)


def is_parse_error(value: object) -> bool:
    """Return True if `value` is one of the `ParseError` variants."""
    return isinstance(value, PARSE_ERROR_TYPES)


def is_user_error(error: ParseError) -> bool:
    """Return True if `error` was caused by the tokens the user supplied."""
    return isinstance(error, USER_ERROR_TYPES)


def is_configuration_error(error: ParseError) -> bool:
    """Return True if `error` points at a defect in the command tree itself."""
    return isinstance(error, CONFIGURATION_ERROR_TYPES)


def render_error(error: ParseError) -> str:
    """
    Render any `ParseError` variant as a human-readable message.

    Args:
        error (ParseError): The error to render.

    Returns:
        str: The variant's stable message.

    Raises:
        TypeError: If `error` is not part of the closed `ParseError` set.
    """
    if isinstance(error, ShowHelp):
        return error.rendered_text
    if isinstance(
        error,
        (
            UnknownError,
            InternalLogicError,
            UnknownOption,
            DuplicateOption,
            MissingOptionValue,
            ConversionError,
            InvalidNumber,
            RequiredOption,
            InvalidConfiguration,
            DefaultGenerationError,
        ),
    ):
        return str(error)
    raise TypeError(f"Not a ParseError variant: {error!r}")
