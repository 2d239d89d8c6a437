"""
Argtree CLI Resolver

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import shlex
import sys
from pathlib import Path
from typing import Literal, Optional, Sequence

from rich.markup import escape
from rich.pretty import Pretty

from argtree.command import CommandBuilder, CommandNode, Failure
from argtree.config import loader
from argtree.console import console
from argtree.errors import ParseError, ShowHelp, is_configuration_error, render_error
from argtree.exceptions import ConfigLoadError, ParseFailure
from argtree.selection import NoSubcommand
from argtree.utils import setup_logging
from argtree.version import __version__

EXIT_OK = 0
EXIT_CONFIG_LOAD = 1
EXIT_USAGE = 2
EXIT_CONFIGURATION = 3


def get_cli() -> CommandNode:
    check = (
        CommandBuilder("check", "Resolve a token list against the loaded command tree.")
        .add_option(
            "--args",
            type=str,
            help="Tokens to resolve, split like a shell command line",
            default="",
        )
        .finalize()
    )
    show = CommandBuilder("show", "Show help for the loaded command tree.").finalize()
    return (
        CommandBuilder(
            "argtree", "Resolve command lines against a declarative command tree."
        )
        .add_option(
            "--config", type=Optional[Path], help="Command tree file (YAML or TOML)"
        )
        .add_option(
            "--log-mode",
            type=Optional[Literal["cli", "json"]],
            help="Console log format: cli or json",
        )
        .add_option(
            "--log-file", type=Optional[Path], help="Also append every log record here"
        )
        .add_flag("--verbose", help="Log resolution steps")
        .add_flag("--version", help="Show the argtree version and exit")
        .add_subcommand(check)
        .add_subcommand(show)
        .finalize()
    )


def find_config(explicit: Path | None = None) -> Path | None:
    if explicit is not None:
        return explicit
    candidates = [
        Path(os.environ.get("ARGTREE_CONFIG", "argtree.yaml")),
        Path.cwd() / "argtree.yaml",
        Path.cwd() / "argtree.yml",
        Path.cwd() / "argtree.toml",
    ]
    return next((path for path in candidates if path.exists()), None)


def exit_code_for(error: ParseError) -> int:
    if isinstance(error, ShowHelp):
        return EXIT_OK
    if is_configuration_error(error):
        return EXIT_CONFIGURATION
    return EXIT_USAGE


def report(error: ParseError) -> int:
    """Print a parse outcome that ended on the error channel and map it to an exit code."""
    if isinstance(error, ShowHelp):
        console.print(error.rendered_text, markup=False, highlight=False)
    else:
        console.print(f"[error]error:[/error] {escape(render_error(error))}", highlight=False)
    return exit_code_for(error)


def main(argv: Sequence[str] | None = None) -> int:
    cli_tree = get_cli()
    try:
        cli = cli_tree.parse(sys.argv[1:] if argv is None else argv)
    except ParseFailure as failure:
        return report(failure.error)

    if cli.version:
        console.print(f"argtree {__version__}", highlight=False)
        return EXIT_OK

    setup_logging(mode=cli.log_mode, verbose=cli.verbose, log_file=cli.log_file)

    if isinstance(cli.subcommand, NoSubcommand):
        cli_tree.render_help()
        return EXIT_OK

    config_path = find_config(cli.config)
    if config_path is None:
        console.print(
            "[error]error:[/error] no command tree found; pass --config or create "
            "argtree.yaml"
        )
        return EXIT_CONFIG_LOAD
    try:
        tree = loader(config_path)
    except ConfigLoadError as error:
        console.print(f"[error]error:[/error] {escape(str(error))}", highlight=False)
        return EXIT_CONFIG_LOAD

    if cli.subcommand.name == "show":
        tree.render_help()
        return EXIT_OK

    try:
        tokens = shlex.split(cli.subcommand.value.args)
    except ValueError as error:
        console.print(f"[error]error:[/error] --args: {escape(str(error))}", highlight=False)
        return EXIT_USAGE
    outcome = tree.try_parse(tokens)
    if isinstance(outcome, Failure):
        return report(outcome.error)
    console.print(Pretty(outcome.value))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
