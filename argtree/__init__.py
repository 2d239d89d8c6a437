"""
Argtree CLI Resolver

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import (
    CommandBuilder,
    CommandNode,
    Failure,
    ParsedCommand,
    ParseResult,
    Success,
)
from .errors import (
    ConversionError,
    DefaultGenerationError,
    DuplicateOption,
    InternalLogicError,
    InternalLogicErrorKind,
    InvalidConfigKind,
    InvalidConfiguration,
    InvalidNumber,
    MissingOptionValue,
    NumberErrorReason,
    ParseError,
    RequiredOption,
    ShowHelp,
    UnknownError,
    UnknownOption,
    render_error,
)
from .exceptions import (
    ArgtreeError,
    CommandConfigurationError,
    ConfigLoadError,
    OptionConfigurationError,
    ParseFailure,
)
from .logger import logger
from .option import MISSING, OptionSpec
from .selection import NO_SUBCOMMAND, NoSubcommand, Selection, Subcommand
from .version import __version__

__all__ = [
    "ArgtreeError",
    "CommandBuilder",
    "CommandConfigurationError",
    "CommandNode",
    "ConfigLoadError",
    "ConversionError",
    "DefaultGenerationError",
    "DuplicateOption",
    "Failure",
    "InternalLogicError",
    "InternalLogicErrorKind",
    "InvalidConfigKind",
    "InvalidConfiguration",
    "InvalidNumber",
    "MISSING",
    "MissingOptionValue",
    "NO_SUBCOMMAND",
    "NoSubcommand",
    "NumberErrorReason",
    "OptionConfigurationError",
    "OptionSpec",
    "ParseError",
    "ParseFailure",
    "ParseResult",
    "ParsedCommand",
    "RequiredOption",
    "Selection",
    "ShowHelp",
    "Subcommand",
    "Success",
    "UnknownError",
    "UnknownOption",
    "__version__",
    "logger",
    "render_error",
]
