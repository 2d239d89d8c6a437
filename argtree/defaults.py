# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Fills the slots a resolution left unset.

For each unset slot, in declaration order:
- a constant `default` is used (copied, so results never share state with the tree),
- a `default_factory` is invoked,
- otherwise a `required` option fails with `RequiredOption`,
- otherwise the type's zero value is used,
- otherwise the tree is misconfigured (`InvalidConfiguration`, `EMPTY_DEFAULT`).

A declared default always satisfies `required`.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any

from argtree.conversion import MISSING_ZERO, zero_value
from argtree.errors import (
    DefaultGenerationError,
    InternalLogicError,
    InternalLogicErrorKind,
    InvalidConfigKind,
    InvalidConfiguration,
    RequiredOption,
    is_parse_error,
)
from argtree.exceptions import ParseFailure
from argtree.logger import logger
from argtree.option import MISSING, OptionSpec
from argtree.slots import SlotTable


def generate_default(spec: OptionSpec) -> Any:
    """
    Invoke the option's `default_factory`.

    Raises:
        ParseFailure: `DefaultGenerationError` if the factory returned None or raised,
            the factory's own error if it raised `ParseFailure`, or
            `InternalLogicError` if it returned a `ParseError` instead of raising it.
    """
    assert spec.default_factory is not None, "default_factory should not be None"
    try:
        value = spec.default_factory()
    except ParseFailure:
        raise
    except Exception as error:
        logger.debug("Default factory for '%s' failed: %s", spec.name, error)
        raise ParseFailure(DefaultGenerationError(spec.name, str(error))) from error
    if value is None:
        raise ParseFailure(DefaultGenerationError(spec.name))
    if is_parse_error(value):
        raise ParseFailure(
            InternalLogicError(spec.name, InternalLogicErrorKind.INVALID_FUNCTION_RETURN_TYPE)
        )
    return value


def default_for(spec: OptionSpec) -> Any:
    """Return the value an absent option takes, or raise `ParseFailure`."""
    if spec.default is not MISSING:
        return deepcopy(spec.default)
    if spec.default_factory is not None:
        return generate_default(spec)
    if spec.required:
        raise ParseFailure(RequiredOption(spec.name))
    value = zero_value(spec.type)
    if value is MISSING_ZERO:
        raise ParseFailure(InvalidConfiguration(spec.name, InvalidConfigKind.EMPTY_DEFAULT))
    return value


def fill_defaults(table: SlotTable) -> None:
    """Resolve every unset slot of `table` in place."""
    for slot in table.unset():
        slot.set_value(default_for(slot.spec))
        logger.debug("Filled '%s' with default %r", slot.spec.name, slot.value)
