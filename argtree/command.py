# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandNode`, the immutable description of a command and
its nested subcommands, together with `CommandBuilder`, the mutable helper used to
assemble one.

A node owns an ordered tuple of `OptionSpec`s and an ordered tuple of child nodes.
Resolving a node produces whatever its `build` callable returns when called as
`build(selection, *option_values)`, with option values in declaration order and
`selection` being `NO_SUBCOMMAND` or `Subcommand(name, child_value)`. Without a
`build` callable the result is a `ParsedCommand`.

Public Interface:
- `CommandNode.parse(tokens)`: Return the result, or raise `ParseFailure`.
- `CommandNode.try_parse(tokens)`: Return `Success(value)` or `Failure(error)`.
- `CommandNode.get_usage()`: Plain-text help for the node.
- `CommandBuilder.add_option()` / `add_flag()` / `add_subcommand()` / `finalize()`.

Example Usage:
    leaf = (
        CommandBuilder("leaf", "a nested command")
        .add_option("--num", type=int, default=1)
        .finalize()
    )
    root = (
        CommandBuilder("cmd", "sample command")
        .add_flag("--verbose", help="chatty output")
        .add_subcommand(leaf)
        .finalize()
    )

    result = root.parse(["--verbose", "leaf", "--num", "3"])
    # result.verbose is True
    # result.subcommand == Subcommand("leaf", ParsedCommand("leaf", NO_SUBCOMMAND, {"num": 3}))
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar, Union

from rich.console import Console

from argtree.cursor import TokenCursor
from argtree.errors import ParseError
from argtree.exceptions import CommandConfigurationError, ParseFailure
from argtree.option import MISSING, OptionSpec
from argtree.resolver import resolve
from argtree.selection import Selection
from argtree.usage import get_usage_text, render_help

T = TypeVar("T")

RESERVED_DESTS = frozenset({"command", "subcommand", "values"})


@dataclass(frozen=True)
class ParsedCommand:
    """
    Default result of a resolved command node.

    Option values are reachable by `dest` as attributes or items:
    `result.dry_run` and `result["dry_run"]` both read `--dry-run`.
    """

    command: str
    subcommand: Selection
    values: dict[str, Any] = field(default_factory=dict)

    def __getattr__(self, name: str) -> Any:
        values = self.__dict__.get("values", {})
        if name in values:
            return values[name]
        raise AttributeError(f"'{self.command}' has no option '{name}'")

    def __getitem__(self, dest: str) -> Any:
        return self.values[dest]

    def __contains__(self, dest: object) -> bool:
        return dest in self.values


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: ParseError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ParseFailure(self.error)


ParseResult = Union[Success[T], Failure]


def _validate_command_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise CommandConfigurationError("Command name must be a non-empty string")
    if name.startswith("-"):
        raise CommandConfigurationError(
            f"Command name '{name}' must not start with '-'"
        )
    if any(char.isspace() for char in name):
        raise CommandConfigurationError(f"Command name '{name}' must not contain spaces")


def _check_dest(spec: OptionSpec, command: str) -> None:
    """`ParsedCommand` fields would shadow these destinations."""
    if spec.dest in RESERVED_DESTS:
        raise CommandConfigurationError(
            f"Option '{spec.name}' of '{command}' uses reserved destination "
            f"'{spec.dest}' (one of {', '.join(sorted(RESERVED_DESTS))})"
        )


@dataclass(frozen=True)
class CommandNode:
    """
    Immutable command with options and nested subcommands.

    Attributes:
        name (str): Token that selects this command when it is a subcommand.
        help (str): One-line description used in help output.
        options (tuple[OptionSpec, ...]): Options in declaration order.
        children (tuple[CommandNode, ...]): Subcommands in declaration order.
        build (Callable | None): Called as `build(selection, *values)` to assemble
            the result. Defaults to producing a `ParsedCommand`.
    """

    name: str
    help: str = ""
    options: tuple[OptionSpec, ...] = ()
    children: tuple[CommandNode, ...] = ()
    build: Callable[..., Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        _validate_command_name(self.name)
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "children", tuple(self.children))
        if self.build is not None and not callable(self.build):
            raise CommandConfigurationError(f"build for '{self.name}' must be callable")

        names: set[str] = set()
        dests: set[str] = set()
        for spec in self.options:
            if not isinstance(spec, OptionSpec):
                raise CommandConfigurationError(
                    f"Options of '{self.name}' must be OptionSpec instances, got {spec!r}"
                )
            if spec.name in names:
                raise CommandConfigurationError(
                    f"Duplicate option '{spec.name}' in command '{self.name}'"
                )
            if spec.dest in dests:
                raise CommandConfigurationError(
                    f"Option '{spec.name}' of '{self.name}' reuses destination '{spec.dest}'"
                )
            if self.build is None:
                _check_dest(spec, self.name)
            names.add(spec.name)
            dests.add(spec.dest)

        child_names: set[str] = set()
        for child in self.children:
            if not isinstance(child, CommandNode):
                raise CommandConfigurationError(
                    f"Subcommands of '{self.name}' must be CommandNode instances, got {child!r}"
                )
            if child.name in child_names:
                raise CommandConfigurationError(
                    f"Duplicate subcommand '{child.name}' in command '{self.name}'"
                )
            child_names.add(child.name)

    def get_child(self, name: str) -> CommandNode | None:
        """Return the first subcommand called `name`, if any."""
        return next((child for child in self.children if child.name == name), None)

    def get_option(self, name: str) -> OptionSpec | None:
        """Return the option called `name` (`--name` or bare), if any."""
        if not name.startswith("-"):
            name = f"--{name}"
        return next((spec for spec in self.options if spec.name == name), None)

    def build_result(self, selection: Selection, values: Sequence[Any]) -> Any:
        """Assemble this node's result from its selection and option values."""
        if self.build is None:
            return ParsedCommand(
                command=self.name,
                subcommand=selection,
                values={spec.dest: value for spec, value in zip(self.options, values)},
            )
        return self.build(selection, *values)

    def parse(self, tokens: Iterable[str] | None = None) -> Any:
        """
        Resolve a token list against this command.

        Args:
            tokens (Iterable[str] | None): Command-line tokens without the program
                name. None means no tokens.

        Returns:
            Any: The value produced by `build` (a `ParsedCommand` by default).

        Raises:
            ParseFailure: With the first `ParseError` encountered, including
                `ShowHelp` when `--help` was given.
        """
        return resolve(self, TokenCursor(tokens))

    def try_parse(self, tokens: Iterable[str] | None = None) -> ParseResult:
        """Like `parse()`, but return `Success` or `Failure` instead of raising."""
        try:
            return Success(self.parse(tokens))
        except ParseFailure as failure:
            return Failure(failure.error)

    def get_usage(self, parent_path: str = "") -> str:
        return get_usage_text(self, parent_path)

    def render_help(self, parent_path: str = "", console: Console | None = None) -> None:
        render_help(self, parent_path, console)

    def __str__(self) -> str:
        required = sum(spec.required for spec in self.options)
        return (
            f"CommandNode(name='{self.name}', options={len(self.options)}, "
            f"children={len(self.children)}, required={required})"
        )


class CommandBuilder:
    """
    Mutable helper that collects options and subcommands, checking each one as it
    is registered, then freezes them into a `CommandNode` with `finalize()`.
    """

    def __init__(
        self,
        name: str,
        help: str = "",
        build: Callable[..., Any] | None = None,
    ) -> None:
        _validate_command_name(name)
        self.name: str = name
        self.help: str = help
        self.build: Callable[..., Any] | None = build
        self._options: list[OptionSpec] = []
        self._children: list[CommandNode] = []
        self._dest_set: set[str] = set()

    def add_option(
        self,
        name: str,
        type: Any = str,
        help: str = "",
        required: bool = False,
        default: Any = MISSING,
        default_factory: Callable[[], Any] | None = None,
        parser: Callable[[str], Any] | None = None,
    ) -> CommandBuilder:
        """
        Register an option.

        Args:
            name (str): Long flag (`--count`) or bare name (`count`).
            type (Any): Declared value type; `bool` declares a flag.
            help (str): Help text.
            required (bool): Must be supplied when no default is declared.
            default (Any): Constant default.
            default_factory (Callable | None): Zero-argument default generator.
            parser (Callable | None): Converts the raw token.

        Raises:
            OptionConfigurationError: If the option itself is invalid.
            CommandConfigurationError: If the name or destination is already taken.
        """
        spec = OptionSpec(
            name=name,
            type=type,
            help=help,
            required=required,
            default=default,
            default_factory=default_factory,
            parser=parser,
        )
        return self.add_spec(spec)

    def add_flag(self, name: str, help: str = "", default: Any = MISSING) -> CommandBuilder:
        """Register a boolean flag. A declared default is inverted by the flag."""
        return self.add_option(name, type=bool, help=help, default=default)

    def add_spec(self, spec: OptionSpec) -> CommandBuilder:
        if self.build is None:
            _check_dest(spec, self.name)
        if any(existing.name == spec.name for existing in self._options):
            raise CommandConfigurationError(
                f"Option '{spec.name}' is already defined in command '{self.name}'"
            )
        if spec.dest in self._dest_set:
            raise CommandConfigurationError(
                f"Destination '{spec.dest}' is already used in command '{self.name}'"
            )
        self._options.append(spec)
        self._dest_set.add(spec.dest)
        return self

    def add_subcommand(self, subcommand: CommandNode | CommandBuilder) -> CommandBuilder:
        """Register a finished subcommand, or a builder that is finalized now."""
        if isinstance(subcommand, CommandBuilder):
            subcommand = subcommand.finalize()
        if not isinstance(subcommand, CommandNode):
            raise CommandConfigurationError(
                f"Subcommand must be a CommandNode or CommandBuilder, got {subcommand!r}"
            )
        if any(child.name == subcommand.name for child in self._children):
            raise CommandConfigurationError(
                f"Subcommand '{subcommand.name}' is already defined in command '{self.name}'"
            )
        self._children.append(subcommand)
        return self

    def finalize(self) -> CommandNode:
        return CommandNode(
            name=self.name,
            help=self.help,
            options=tuple(self._options),
            children=tuple(self._children),
            build=self.build,
        )

    def __str__(self) -> str:
        return (
            f"CommandBuilder(name='{self.name}', options={len(self._options)}, "
            f"children={len(self._children)})"
        )

    def __repr__(self) -> str:
        return str(self)
