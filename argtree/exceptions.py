# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argtree.

Configuration problems found while a command tree is being assembled are raised
immediately as exceptions, since they are programmer errors. Problems found while
resolving a token list are described by a `ParseError` value (see `argtree.errors`)
and travel inside a `ParseFailure`.

All exceptions inherit from `ArgtreeError`, the base exception for the package.

Exception Hierarchy:
- ArgtreeError
    ├── OptionConfigurationError
    ├── CommandConfigurationError
    ├── ConfigLoadError
    └── ParseFailure
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argtree.errors import ParseError


class ArgtreeError(Exception):
    """Base exception for argtree."""


class OptionConfigurationError(ArgtreeError):
    """Exception raised when an option is declared with invalid settings."""


class CommandConfigurationError(ArgtreeError):
    """Exception raised when a command node is assembled with invalid settings."""


class ConfigLoadError(ArgtreeError):
    """Exception raised when a command tree cannot be loaded from a config file."""


class ParseFailure(ArgtreeError):
    """
    Carries a `ParseError` out of a resolution.

    Raised by `CommandNode.parse()` when resolution fails or help is requested.
    Custom parsers and default factories may raise it themselves to hand their
    own error to the caller unchanged.

    Attributes:
        error (ParseError): The structured error. Defaults to `UnknownError()`.
    """

    def __init__(self, error: ParseError | None = None) -> None:
        if error is None:
            from argtree.errors import UnknownError

            error = UnknownError()
        self.error: ParseError = error
        super().__init__(str(error))
