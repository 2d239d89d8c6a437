from dataclasses import dataclass

import pytest

from argtree import (
    NO_SUBCOMMAND,
    CommandBuilder,
    CommandNode,
    InvalidNumber,
    NumberErrorReason,
    OptionSpec,
    ParseFailure,
    Selection,
    ShowHelp,
    Subcommand,
    UnknownOption,
)


@dataclass
class SubSubCmd:
    subcommand: Selection
    num: int


@dataclass
class SubCmd1:
    subcommand: Selection
    str_opt: str


@dataclass
class SubCmd2:
    subcommand: Selection
    text: str


@dataclass
class Cmd:
    subcommand: Selection
    version: bool
    verbose: bool


def build_tree() -> CommandNode:
    subsub = CommandNode(
        "subsubcmd",
        "subcommand of subcmd1",
        options=(OptionSpec("--num", type=int, help="number", default=1),),
        build=SubSubCmd,
    )
    sub1 = CommandNode(
        "subcmd1",
        "subcommand 1",
        options=(OptionSpec("--str-opt", help="string option", default="."),),
        children=(subsub,),
        build=SubCmd1,
    )
    sub2 = CommandNode(
        "subcmd2",
        "subcommand 2",
        options=(OptionSpec("--text", help="text", required=True),),
        build=SubCmd2,
    )
    return CommandNode(
        "cmd",
        "sample command",
        options=(
            OptionSpec("--version", type=bool, help="show version"),
            OptionSpec("--verbose", type=bool, help="show verbose"),
        ),
        children=(sub1, sub2),
        build=Cmd,
    )


def test_no_subcommand_selected():
    result = build_tree().parse(["--verbose"])
    assert result == Cmd(NO_SUBCOMMAND, version=False, verbose=True)


def test_nested_subcommands():
    result = build_tree().parse(["--version", "subcmd1", "subsubcmd", "--num", "4"])
    assert result.version is True
    assert result.subcommand.name == "subcmd1"
    sub1 = result.subcommand.value
    assert sub1 == SubCmd1(Subcommand("subsubcmd", SubSubCmd(NO_SUBCOMMAND, 4)), ".")


def test_child_without_grandchild_gets_none_tag():
    result = build_tree().parse(["subcmd1", "--str-opt", "x"])
    assert result.subcommand.value == SubCmd1(NO_SUBCOMMAND, "x")


def test_parent_options_after_subcommand_are_not_parent_options():
    # Once a child is selected, trailing tokens belong to the child.
    with pytest.raises(ParseFailure) as excinfo:
        build_tree().parse(["subcmd2", "--text", "a", "--verbose"])
    assert excinfo.value.error == UnknownOption("--verbose")


def test_child_error_propagates():
    with pytest.raises(ParseFailure) as excinfo:
        build_tree().parse(["subcmd1", "subsubcmd", "--num", "abc"])
    assert excinfo.value.error == InvalidNumber(
        "--num", "abc", NumberErrorReason.INVALID_ARGUMENT
    )


def test_subcommand_name_only_matches_exactly():
    with pytest.raises(ParseFailure) as excinfo:
        build_tree().parse(["subcmd"])
    assert excinfo.value.error == UnknownOption("subcmd")


def test_grandchild_name_not_visible_from_root():
    with pytest.raises(ParseFailure) as excinfo:
        build_tree().parse(["subsubcmd"])
    assert excinfo.value.error == UnknownOption("subsubcmd")


def test_first_declared_child_wins():
    sub = CommandBuilder("go").add_flag("--fast").finalize()
    root = CommandBuilder("root").add_option("--go").add_subcommand(sub).finalize()
    result = root.parse(["go", "--fast"])
    assert result.subcommand.name == "go"
    assert result.subcommand.value.fast is True


def test_help_in_child_renders_child_usage():
    with pytest.raises(ParseFailure) as excinfo:
        build_tree().parse(["subcmd1", "--help"])
    error = excinfo.value.error
    assert isinstance(error, ShowHelp)
    assert "Usage: cmd subcmd1 [OPTIONS] [COMMAND]" in error.rendered_text
    assert "subsubcmd" in error.rendered_text


def test_help_in_grandchild_includes_full_path():
    with pytest.raises(ParseFailure) as excinfo:
        build_tree().parse(["subcmd1", "subsubcmd", "--help"])
    assert "Usage: cmd subcmd1 subsubcmd [OPTIONS]" in str(excinfo.value.error)


def test_help_short_circuits_before_errors():
    with pytest.raises(ParseFailure) as excinfo:
        build_tree().parse(["--verbose", "--help", "--bogus"])
    assert isinstance(excinfo.value.error, ShowHelp)


def test_value_option_takes_next_token_verbatim():
    node = CommandBuilder("cmd").add_option("--name").finalize()
    assert node.parse(["--name", "--help"]).name == "--help"


def test_default_result_carries_selection():
    leaf = CommandBuilder("leaf").add_option("--num", type=int, default=1).finalize()
    root = CommandBuilder("cmd").add_flag("--verbose").add_subcommand(leaf).finalize()
    result = root.parse(["leaf", "--num", "3"])
    assert result.verbose is False
    assert isinstance(result.subcommand, Subcommand)
    assert result.subcommand.value.num == 3
    assert result.subcommand.value.subcommand == NO_SUBCOMMAND
