# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The resolution loop: matches tokens against a command node's subcommands and
options, recurses into a selected subcommand, then fills defaults and builds the
node's result.

The loop is a single forward pass over a shared `TokenCursor`:

1. `--help` stops resolution with `ShowHelp` for the node that sees it.
2. While nothing is selected, a token equal to a child's name consumes that token
   and resolves the child on the rest of the cursor. A resolved child ends this
   node's loop for good; there is no returning to the parent's options.
3. Otherwise a token equal to an option's name consumes the name and lets the
   option take its value. A second occurrence fails with `DuplicateOption`.
4. Anything else fails with `UnknownOption`.

The first error aborts the whole resolution.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argtree.cursor import TokenCursor
from argtree.defaults import fill_defaults
from argtree.errors import DuplicateOption, ShowHelp, UnknownOption
from argtree.exceptions import ParseFailure
from argtree.logger import logger
from argtree.option import HELP_TOKEN
from argtree.selection import Subcommand
from argtree.slots import OptionSlot, SlotTable
from argtree.usage import get_usage_text

if TYPE_CHECKING:
    from argtree.command import CommandNode


def join_command_path(parent_path: str, name: str) -> str:
    return f"{parent_path} {name}" if parent_path else name


def _consume_option(slot: OptionSlot, cursor: TokenCursor) -> None:
    spec = slot.spec
    if slot.is_set:
        raise ParseFailure(DuplicateOption(spec.name))
    position = cursor.position
    cursor.advance()
    if not spec.is_flag and not cursor.exhausted() and cursor.peek() == spec.name:
        # `--count --count 1`: the repeated name is a second occurrence, not a value
        raise ParseFailure(DuplicateOption(spec.name))
    slot.set_value(spec.resolve(cursor), position)
    logger.debug("Resolved '%s' -> %r", spec.name, slot.value)


def resolve_slots(
    node: CommandNode, cursor: TokenCursor, parent_path: str = ""
) -> SlotTable:
    """
    Run the match/consume/recurse loop for `node` and fill its defaults.

    Args:
        node (CommandNode): The node being resolved.
        cursor (TokenCursor): Shared cursor, positioned just past the node's name.
        parent_path (str): Names of the enclosing commands, used in help text.

    Returns:
        SlotTable: Every slot set and the selection cell closed.

    Raises:
        ParseFailure: With the first error encountered.
    """
    table = SlotTable.for_options(node.options)
    command_path = join_command_path(parent_path, node.name)

    while not cursor.exhausted():
        token = cursor.peek()
        if token == HELP_TOKEN:
            logger.debug("Help requested for '%s'", command_path)
            raise ParseFailure(ShowHelp(get_usage_text(node, parent_path)))

        if not table.has_selection:
            child = node.get_child(token)
            if child is not None:
                cursor.advance()
                logger.debug("Dispatching '%s' -> '%s'", command_path, child.name)
                value = resolve(child, cursor, command_path)
                table.selection = Subcommand(child.name, value)
                break

        slot = table.find(token)
        if slot is None:
            raise ParseFailure(UnknownOption(token))
        _consume_option(slot, cursor)

    if not cursor.exhausted():
        raise ParseFailure(UnknownOption(cursor.peek()))

    table.close_selection()
    fill_defaults(table)
    return table


def resolve(node: CommandNode, cursor: TokenCursor, parent_path: str = "") -> Any:
    """Resolve `node` against `cursor` and return the node's built result."""
    table = resolve_slots(node, cursor, parent_path)
    assert table.selection is not None, "selection should be closed"
    return node.build_result(table.selection, table.values())
