# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tagged record of which subcommand (if any) a command node resolved.

`Selection` is either `NoSubcommand` or `Subcommand(name, value)`. A resolved
node always carries one of the two; "nothing selected" is the explicit
`NO_SUBCOMMAND` value, never a missing field.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class NoSubcommand:
    """No child subcommand was named on the command line."""

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "<no subcommand>"


@dataclass(frozen=True)
class Subcommand:
    """
    A child subcommand was selected.

    Attributes:
        name (str): The child's name as typed on the command line.
        value (Any): The child's own resolved result.
    """

    name: str
    value: Any

    def __str__(self) -> str:
        return self.name


Selection = Union[NoSubcommand, Subcommand]

NO_SUBCOMMAND = NoSubcommand()
