# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion utilities for excmd value parsers.

This module converts raw command-line strings into Python values, including
`Enum`, `bool`, `datetime`, `Literal` and union types.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type.
- type_name: Human readable name of a target type, used in messages and help.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_STRINGS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    elif normalized in FALSE_STRINGS:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


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

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(
                f"Value '{value}' could not be parsed as a datetime"
            ) from error

    try:
        return target_type(value)
    except TypeError as error:
        raise ValueError(str(error)) from error


def type_name(target_type: Any) -> str:
    """Return a short display name for a target type."""
    return getattr(target_type, "__name__", None) or str(target_type)
