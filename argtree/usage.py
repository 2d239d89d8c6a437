# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage and help rendering for command nodes.

`get_usage_text()` builds the plain-text help carried by `ShowHelp`:

    sample command

    Usage: cmd sub [OPTIONS] [COMMAND]

    Options:
        --count <COUNT>    how many [default: 10]
        --verbose          chatty output
        --help             Show this help message.

    Commands:
        leaf    a nested command

`render_help()` prints the same content to a Rich console.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from argtree.console import console as default_console
from argtree.option import HELP_TOKEN, MISSING, OptionSpec

if TYPE_CHECKING:
    from argtree.command import CommandNode

DEFAULT_INDENT_WIDTH = 4
HELP_DESCRIPTION = "Show this help message."


def get_option_label(spec: OptionSpec) -> str:
    metavar = spec.get_metavar()
    return f"{spec.name} {metavar}" if metavar else spec.name


def get_option_help(spec: OptionSpec) -> str:
    """Help text of an option with its required/default annotations."""
    parts = [spec.help] if spec.help else []
    if spec.required and not spec.has_default:
        parts.append("(required)")
    if spec.default is not MISSING and not spec.is_flag:
        parts.append(f"[default: {spec.default}]")
    return " ".join(parts)


def get_usage_line(node: CommandNode, parent_path: str = "") -> str:
    command = f"{parent_path} {node.name}" if parent_path else node.name
    usage = f"{command} [OPTIONS]"
    if node.children:
        usage += " [COMMAND]"
    return usage


def _option_rows(node: CommandNode) -> list[tuple[str, str]]:
    rows = [(get_option_label(spec), get_option_help(spec)) for spec in node.options]
    rows.append((HELP_TOKEN, HELP_DESCRIPTION))
    return rows


def _format_rows(rows: list[tuple[str, str]], indent_width: int) -> list[str]:
    width = max(len(label) for label, _ in rows)
    lines = []
    for label, help_text in rows:
        line = f"{' ' * indent_width}{label:<{width + indent_width}}{help_text}"
        lines.append(line.rstrip())
    return lines


def get_usage_text(
    node: CommandNode, parent_path: str = "", indent_width: int = DEFAULT_INDENT_WIDTH
) -> str:
    """
    Render the plain-text help for `node`.

    Args:
        node (CommandNode): The command to describe.
        parent_path (str): Names of the enclosing commands, space separated.
        indent_width (int): Spaces before each entry and between columns.

    Returns:
        str: Multi-line help text ending with a newline.
    """
    sections = []
    if node.help:
        sections.append(node.help)
    sections.append(f"Usage: {get_usage_line(node, parent_path)}")
    sections.append("\n".join(["Options:", *_format_rows(_option_rows(node), indent_width)]))
    if node.children:
        command_rows = [(child.name, child.help) for child in node.children]
        sections.append(
            "\n".join(["Commands:", *_format_rows(command_rows, indent_width)])
        )
    return "\n\n".join(sections) + "\n"


def render_help(
    node: CommandNode, parent_path: str = "", console: Console | None = None
) -> None:
    """
    Print formatted help text for `node` using Rich output.

    Includes usage, description, options and subcommands.
    """
    console = console or default_console
    console.print(f"[bold]usage: {escape(get_usage_line(node, parent_path))}[/bold]\n")

    if node.help:
        console.print(escape(node.help) + "\n")

    console.print("[bold]options:[/bold]")
    rows = _option_rows(node)
    width = max(len(label) for label, _ in rows)
    for label, help_text in rows:
        console.print(f"  [option]{escape(label):<{width}}[/option]  {escape(help_text)}")

    if node.children:
        console.print("\n[bold]commands:[/bold]")
        width = max(len(child.name) for child in node.children)
        for child in node.children:
            console.print(
                f"  [command]{escape(child.name):<{width}}[/command]  {escape(child.help)}"
            )
