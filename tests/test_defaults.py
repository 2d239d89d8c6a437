from datetime import datetime
from enum import Enum
from typing import Optional

import pytest

from argtree import (
    CommandNode,
    ConversionError,
    DefaultGenerationError,
    InternalLogicError,
    InternalLogicErrorKind,
    InvalidConfigKind,
    InvalidConfiguration,
    OptionSpec,
    ParseFailure,
    RequiredOption,
)
from argtree.defaults import default_for, fill_defaults
from argtree.slots import SlotTable


class Level(Enum):
    LOW = "low"
    HIGH = "high"


def test_constant_default():
    assert default_for(OptionSpec("--n", type=int, default=5)) == 5


def test_constant_default_is_copied():
    spec = OptionSpec("--tags", type=list, default=["a"])
    first = default_for(spec)
    first.append("b")
    assert default_for(spec) == ["a"]
    assert spec.default == ["a"]


def test_factory_default():
    calls = []

    def factory():
        calls.append(1)
        return 7

    spec = OptionSpec("--n", type=int, default_factory=factory)
    assert default_for(spec) == 7
    assert default_for(spec) == 7
    assert len(calls) == 2


def test_factory_returning_none():
    with pytest.raises(ParseFailure) as excinfo:
        default_for(OptionSpec("--n", type=int, default_factory=lambda: None))
    assert excinfo.value.error == DefaultGenerationError("--n")


def test_factory_raising():
    def factory():
        raise RuntimeError("no clock")

    with pytest.raises(ParseFailure) as excinfo:
        default_for(OptionSpec("--when", type=datetime, default_factory=factory))
    assert excinfo.value.error == DefaultGenerationError("--when", "no clock")


def test_factory_failure_passes_through():
    custom = ConversionError("--n", "", "nothing to read")

    def factory():
        raise ParseFailure(custom)

    with pytest.raises(ParseFailure) as excinfo:
        default_for(OptionSpec("--n", type=int, default_factory=factory))
    assert excinfo.value.error is custom


def test_factory_returning_error_value():
    spec = OptionSpec("--n", type=int, default_factory=lambda: RequiredOption("--n"))
    with pytest.raises(ParseFailure) as excinfo:
        default_for(spec)
    assert excinfo.value.error == InternalLogicError(
        "--n", InternalLogicErrorKind.INVALID_FUNCTION_RETURN_TYPE
    )


def test_required_without_default():
    with pytest.raises(ParseFailure) as excinfo:
        default_for(OptionSpec("--name", required=True))
    assert excinfo.value.error == RequiredOption("--name")


def test_required_with_default_uses_default():
    assert default_for(OptionSpec("--name", required=True, default="x")) == "x"
    spec = OptionSpec("--name", required=True, default_factory=lambda: "y")
    assert default_for(spec) == "y"


@pytest.mark.parametrize(
    "target_type, expected",
    [(bool, False), (int, 0), (float, 0.0), (str, ""), (Optional[int], None)],
)
def test_zero_values(target_type, expected):
    assert default_for(OptionSpec("--v", type=target_type)) == expected


@pytest.mark.parametrize("target_type", [Level, datetime])
def test_no_zero_value_is_configuration_error(target_type):
    with pytest.raises(ParseFailure) as excinfo:
        default_for(OptionSpec("--v", type=target_type))
    assert excinfo.value.error == InvalidConfiguration(
        "--v", InvalidConfigKind.EMPTY_DEFAULT
    )


def test_fill_defaults_only_touches_unset_slots():
    table = SlotTable.for_options(
        [OptionSpec("--a", type=int, default=1), OptionSpec("--b", type=int, default=2)]
    )
    table.slots[0].set_value(9, position=0)
    fill_defaults(table)
    assert table.values() == [9, 2]
    assert table.slots[0].consumed_position == 0
    assert table.slots[1].consumed_position is None


def test_fill_defaults_stops_at_first_error():
    node = CommandNode(
        "cmd",
        options=(
            OptionSpec("--first", required=True),
            OptionSpec("--second", type=Level),
        ),
    )
    with pytest.raises(ParseFailure) as excinfo:
        node.parse([])
    assert excinfo.value.error == RequiredOption("--first")


def test_defaults_filled_after_values():
    node = CommandNode(
        "cmd",
        options=(
            OptionSpec("--level", type=Level, default=Level.LOW),
            OptionSpec("--count", type=int),
        ),
    )
    result = node.parse(["--level", "high"])
    assert result.level is Level.HIGH
    assert result.count == 0
