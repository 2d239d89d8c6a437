# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion helpers used when an option has no custom parser.

This module turns a raw token into the option's declared type. Numbers go through
a strict parser that reports *why* a token was rejected; everything else goes
through `coerce_value`, which understands `Enum`, `bool`, `datetime`, `Literal`,
`Union`/`Optional` and plain classes that accept a single string.

Functions:
- parse_number: Strict int/float conversion raising `NumberParseError`.
- numeric_target: The number type behind `int`, `float` or `Optional` of either.
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type.
- can_convert: Whether `coerce_value` can produce the given type at all.
- zero_value: The canonical empty value of a type, if it has one.
"""
from __future__ import annotations

import math
import re
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argtree.errors import NumberErrorReason

MISSING_ZERO = object()

CONTAINER_TYPES: tuple[type, ...] = (list, tuple, set, frozenset, dict)

_DECIMAL_RE = re.compile(r"-?[0-9]+")
_HEX_RE = re.compile(r"0x[0-9a-fA-F]+")
_FLOAT_RE = re.compile(
    r"-?(?:[0-9]+\.?[0-9]*(?:[eE][-+]?[0-9]+)?|\.[0-9]+(?:[eE][-+]?[0-9]+)?"
    r"|inf|infinity|nan)",
    re.IGNORECASE,
)


class NumberParseError(ValueError):
    """Raised by `parse_number` with the reason the token was rejected."""

    def __init__(self, value: str, reason: NumberErrorReason) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"'{value}' is not a valid number ({reason})")


def parse_number(value: str, target_type: type) -> int | float:
    """
    Convert a token to `int` or `float` without the leniency of the builtins.

    Integers accept decimal digits with an optional leading '-', or a '0x' prefixed
    hexadecimal literal (hexadecimal cannot be negative). Floats accept plain,
    exponent, 'inf' and 'nan' forms. Leading '+', whitespace and '_' separators
    are rejected.

    Args:
        value (str): The raw token.
        target_type (type): `int` or `float` (or a subclass of either).

    Returns:
        int | float: The converted number.

    Raises:
        NumberParseError: With `INVALID_ARGUMENT` for malformed text, or
            `RESULT_OUT_OF_RANGE` for finite text that overflows a float or has
            more digits than the interpreter converts to an int.
    """
    if issubclass(target_type, bool):
        raise TypeError("bool is not a numeric option type")
    if issubclass(target_type, int):
        if _HEX_RE.fullmatch(value):
            digits, base = value[2:], 16
        elif _DECIMAL_RE.fullmatch(value):
            digits, base = value, 10
        else:
            raise NumberParseError(value, NumberErrorReason.INVALID_ARGUMENT)
        try:
            return target_type(int(digits, base))
        except ValueError as error:
            # well-formed but past the interpreter's int string conversion limit
            raise NumberParseError(value, NumberErrorReason.RESULT_OUT_OF_RANGE) from error

    if not _FLOAT_RE.fullmatch(value):
        raise NumberParseError(value, NumberErrorReason.INVALID_ARGUMENT)
    number = float(value)
    if math.isinf(number) and "inf" not in value.lower():
        raise NumberParseError(value, NumberErrorReason.RESULT_OUT_OF_RANGE)
    return target_type(number)


def is_numeric_type(target_type: Any) -> bool:
    return (
        get_origin(target_type) is None
        and isinstance(target_type, type)
        and not isinstance(target_type, EnumMeta)
        and issubclass(target_type, (int, float))
        and not issubclass(target_type, bool)
    )


def numeric_target(target_type: Any) -> type | None:
    """
    Return the number type an option converts to, looking through `Optional`.

    `int` and `Optional[int]` both give `int`; anything else gives None.
    """
    if is_numeric_type(target_type):
        return target_type
    if _is_union(target_type):
        args = [arg for arg in get_args(target_type) if arg is not type(None)]
        if len(args) == 1 and is_numeric_type(args[0]):
            return args[0]
    return None


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "off"}:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, value, or coerced base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def _is_union(target_type: Any) -> bool:
    return isinstance(target_type, types.UnionType) or get_origin(target_type) is Union


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles typing constructs such as Union, Literal, Enum, and datetime.

    Args:
        value (str): The input string to convert.
        target_type (type): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if _is_union(target_type):
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if is_numeric_type(target_type):
        return parse_number(value, target_type)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    return target_type(value)


def can_convert(target_type: Any) -> bool:
    """Return True if `coerce_value` is able to build `target_type` from a string."""
    if target_type is Any:
        return False
    if get_origin(target_type) is Literal:
        return True
    if _is_union(target_type):
        return any(
            can_convert(arg) for arg in get_args(target_type) if arg is not type(None)
        )
    if get_origin(target_type) is not None:
        return False
    if not isinstance(target_type, type):
        return False
    return not issubclass(target_type, CONTAINER_TYPES)


def zero_value(target_type: Any) -> Any:
    """
    Return the canonical empty value of `target_type`.

    `bool` -> False, `int` -> 0, `str` -> "", containers -> empty, Optional -> None,
    and any other class that can be built without arguments -> `target_type()`.

    Returns:
        Any: The zero value, or `MISSING_ZERO` when the type has none.
    """
    if _is_union(target_type):
        if type(None) in get_args(target_type):
            return None
        return MISSING_ZERO
    origin = get_origin(target_type)
    if origin is not None and origin is not Literal and isinstance(origin, type):
        target_type = origin
    if not isinstance(target_type, type) or isinstance(target_type, EnumMeta):
        return MISSING_ZERO
    try:
        return target_type()
    except TypeError:
        return MISSING_ZERO
