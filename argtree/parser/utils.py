# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains the value codec used by argtree options and positional parameters.

Every value-bearing option or parameter declares a target `type`. The raw string
from the command line is converted with `decode_value`, which either returns the
typed value or raises `OptionError` with a message describing the bad input.

Supported targets:
- `str` (passthrough), `bool`, `int`, `float`
- `Enum` subclasses (matched against member values)
- `Literal[...]`, `Union[...]` / `X | Y`
- `datetime` (parsed with dateutil)
- Types implementing the `OptionValue` protocol
- Any other callable taking a single string (e.g. `pathlib.Path`)

Functions:
- decode_bool: Convert a string to a boolean.
- decode_int: Convert a base-10 string to an integer.
- decode_float: Convert a decimal, `inf` or `nan` string to a float.
- decode_enum: Convert a string to an Enum member by value.
- decode_value: General-purpose decoding to a target type.
"""
import re
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argtree.exceptions import OptionError
from argtree.protocols import OptionValue

TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on", "enable"})
FALSE_VALUES = frozenset({"0", "false", "no", "n", "off", "disable"})

_INTEGER = re.compile(r"[+-]?[0-9]+")


def decode_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts (case-insensitively) `1, true, yes, y, on, enable` and
    `0, false, no, n, off, disable`.

    Raises:
        OptionError: If the string is not one of the accepted spellings.
    """
    normalized = value.lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise OptionError(f"Invalid boolean value: '{value}'")


def decode_int(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise OptionError(f"Invalid integer value: '{value}'")
    return int(value)


def decode_float(value: str) -> float:
    # float() tolerates surrounding whitespace and digit separators
    if value != value.strip() or "_" in value:
        raise OptionError(f"Invalid floating point value: '{value}'")
    try:
        return float(value)
    except ValueError:
        raise OptionError(f"Invalid floating point value: '{value}'") from None


def decode_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a string to the Enum member whose value matches it exactly.

    Raises:
        OptionError: If no member has a matching value.
    """
    for member in enum_type:
        if str(member.value) == value:
            return member
    raise OptionError(f"Invalid value: '{value}'")


def decode_value(value: str, target_type: Any) -> Any:
    """
    Convert a command-line string to the given target type.

    Handles typing constructs such as Union and Literal, Enum classes, datetime,
    and types exposing `from_option_value`.

    Args:
        value (str): The raw string from the command line.
        target_type (Any): The desired type or converter.

    Returns:
        Any: The decoded value.

    Raises:
        OptionError: If the string cannot be decoded.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        for literal in args:
            if str(literal) == value:
                return literal
        raise OptionError(f"Invalid value: '{value}'")

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return decode_value(value, arg)
            except OptionError:
                continue
        raise OptionError(f"Invalid value: '{value}'")

    if target_type is str:
        return value

    if target_type is bool:
        return decode_bool(value)

    if target_type is int:
        return decode_int(value)

    if target_type is float:
        return decode_float(value)

    if isinstance(target_type, EnumMeta):
        return decode_enum(value, target_type)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError):
            raise OptionError(f"Invalid date value: '{value}'") from None

    if isinstance(target_type, type) and isinstance(target_type, OptionValue):
        try:
            return target_type.from_option_value(value)
        except (ValueError, TypeError):
            raise OptionError(f"Invalid value: '{value}'") from None

    if not callable(target_type):
        raise TypeError(f"Cannot decode values of type {target_type!r}")

    try:
        return target_type(value)
    except (ValueError, TypeError):
        raise OptionError(f"Invalid value: '{value}'") from None
