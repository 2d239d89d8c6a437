"""nested_subcommands.py

Try it:
    python examples/nested_subcommands.py --version subcmd1 --str-opt x subsubcmd --num 3
    python examples/nested_subcommands.py subcmd2 --text foo
    python examples/nested_subcommands.py subcmd1 --help
"""

import sys
from dataclasses import dataclass
from typing import Optional

from argtree import (
    CommandBuilder,
    ConversionError,
    Failure,
    ParseFailure,
    Selection,
    ShowHelp,
    Subcommand,
)
from argtree.console import console


@dataclass
class SubSubCmd:
    subcommand: Selection
    num: int


@dataclass
class SubCmd1:
    subcommand: Selection
    str_opt: Optional[str]


@dataclass
class SubCmd2:
    subcommand: Selection
    text: str


@dataclass
class Cmd:
    subcommand: Selection
    version: bool
    verbose: bool


def only_foo(arg: str) -> str:
    if arg == "foo":
        return arg
    raise ParseFailure(ConversionError("--text", arg, "only 'foo' is accepted"))


parser = (
    CommandBuilder("cmd", "sample command", build=Cmd)
    .add_flag("version", help="show version")
    .add_flag("verbose", help="show verbose")
    .add_subcommand(
        CommandBuilder("subcmd1", "subcommand 1", build=SubCmd1)
        .add_subcommand(
            CommandBuilder("subsubcmd", "subcommand of subcmd1", build=SubSubCmd)
            .add_option("num", type=int, help="number", default=1)
        )
        .add_option("str-opt", type=Optional[str], help="optional string", default=".")
    )
    .add_subcommand(
        CommandBuilder("subcmd2", "subcommand 2", build=SubCmd2)
        .add_option("text", help="must be 'foo'", required=True, parser=only_foo)
    )
    .finalize()
)


def show(cmd: Cmd) -> None:
    console.print(f"[command]\\[cmd][/command] version = {cmd.version}")
    if not isinstance(cmd.subcommand, Subcommand):
        return
    value = cmd.subcommand.value
    if isinstance(value, SubCmd1):
        console.print(f"  [command]\\[subcmd1][/command] str_opt = {value.str_opt}")
        if isinstance(value.subcommand, Subcommand):
            console.print(
                f"    [command]\\[subsubcmd][/command] num = {value.subcommand.value.num}"
            )
    elif isinstance(value, SubCmd2):
        console.print(f"  [command]\\[subcmd2][/command] text = {value.text}")


if __name__ == "__main__":
    outcome = parser.try_parse(sys.argv[1:])
    if isinstance(outcome, Failure):
        console.print(str(outcome.error), markup=False, highlight=False)
        sys.exit(0 if isinstance(outcome.error, ShowHelp) else 2)
    show(outcome.value)
