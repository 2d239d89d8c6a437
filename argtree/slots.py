# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-call state for resolving one command node.

- `OptionSlot`: Tracks an option and whether it has received a value.
- `SlotTable`: All slots of a node plus the subcommand selection cell.

A `SlotTable` is created at the start of a resolution, written only by that
resolution, and dropped when it ends.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from argtree.option import MISSING, OptionSpec
from argtree.selection import NO_SUBCOMMAND, Selection


@dataclass
class OptionSlot:
    """Tracks an option and the value it resolved to."""

    spec: OptionSpec
    value: Any = MISSING
    is_set: bool = False
    consumed_position: int | None = None

    def set_value(self, value: Any, position: int | None = None) -> None:
        """Store a value, optionally recording where on the command line it came from."""
        self.value = value
        self.is_set = True
        self.consumed_position = position


@dataclass
class SlotTable:
    """Value cells for one node, in option declaration order."""

    slots: list[OptionSlot] = field(default_factory=list)
    selection: Selection | None = None

    @classmethod
    def for_options(cls, options: Sequence[OptionSpec]) -> SlotTable:
        return cls(slots=[OptionSlot(spec) for spec in options])

    def find(self, token: str) -> OptionSlot | None:
        """Return the first slot whose option name equals `token`."""
        return next((slot for slot in self.slots if slot.spec.name == token), None)

    def unset(self) -> list[OptionSlot]:
        return [slot for slot in self.slots if not slot.is_set]

    @property
    def has_selection(self) -> bool:
        return self.selection is not None

    def close_selection(self) -> Selection:
        """Replace an empty selection cell with the explicit `NO_SUBCOMMAND` tag."""
        if self.selection is None:
            self.selection = NO_SUBCOMMAND
        return self.selection

    def values(self) -> list[Any]:
        """Slot values in declaration order. Every slot must be set."""
        assert all(slot.is_set for slot in self.slots), "unset slot after default fill"
        return [slot.value for slot in self.slots]
