# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tagged markers accepted by `add_option()` and `add_argument()`.

Markers are small frozen dataclasses that can be passed in any order:

    parser.add_option_group("Log Options").add_option(
        "log-level",
        Description("Only display logs with this severity or higher."),
        DefaultValue("trace"),
        Allowed(["trace", "debug", "info"]),
    )

- `Description(text)`: help text.
- `DefaultValue(value)`: default reported when the option is not given.
- `Allowed(values)`: raw strings the option accepts.
- `Optional()`: the positional argument may be omitted (arguments only).
- `Value(type)`: the option takes a value of this type, or uses this `ValueParser`.

A `DefaultValue`, `Allowed` or `Value` marker makes an option value-requiring;
without any of them it is a boolean flag.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from excmd.exceptions import InvalidDefinitionError
from excmd.parser.values import ValueParser, value_parser_for


@dataclass(frozen=True)
class Description:
    text: str


@dataclass(frozen=True)
class DefaultValue:
    value: Any


@dataclass(frozen=True)
class Allowed:
    values: tuple[Any, ...]

    def __init__(self, values: Iterable[Any]) -> None:
        # Strings and mappings stay as given so the value parser rejects them.
        if not isinstance(values, (str, dict)):
            values = tuple(values)
        object.__setattr__(self, "values", values)


@dataclass(frozen=True)
class Optional:
    pass


@dataclass(frozen=True)
class Value:
    type: Any = str


@dataclass
class ResolvedModifiers:
    """The combined effect of all markers given for one option or argument."""

    description: str = ""
    optional: bool = False
    value_parser: ValueParser | None = None
    seen: set[type] = field(default_factory=set)


def resolve_modifiers(
    name: str,
    modifiers: Iterable[Any],
    *,
    positional: bool = False,
) -> ResolvedModifiers:
    """
    Fold markers into a `ResolvedModifiers`.

    Raises:
        InvalidDefinitionError: On unknown or repeated markers, `Optional` on a
            named option, or a default/choice set the value parser rejects.
    """
    resolved = ResolvedModifiers()
    default: Any = None
    choices: Any = None
    value: Value | None = None

    for modifier in modifiers:
        marker_type = type(modifier)
        if marker_type not in (Description, DefaultValue, Allowed, Optional, Value):
            raise InvalidDefinitionError(name, f"unknown modifier {modifier!r}")
        if marker_type in resolved.seen:
            raise InvalidDefinitionError(
                name, f"{marker_type.__name__} given more than once"
            )
        resolved.seen.add(marker_type)

        if isinstance(modifier, Description):
            resolved.description = modifier.text
        elif isinstance(modifier, DefaultValue):
            default = modifier.value
        elif isinstance(modifier, Allowed):
            choices = modifier.values
        elif isinstance(modifier, Optional):
            if not positional:
                raise InvalidDefinitionError(
                    name, "Optional can only be used with positional arguments"
                )
            resolved.optional = True
        else:
            value = modifier

    if value is not None and isinstance(value.type, ValueParser):
        if default is not None or choices is not None:
            raise InvalidDefinitionError(
                name,
                "DefaultValue and Allowed cannot be combined with a ValueParser instance",
            )
        resolved.value_parser = value.type
        return resolved

    if value is None and default is None and choices is None and not positional:
        return resolved

    try:
        resolved.value_parser = value_parser_for(
            value.type if value is not None else None,
            default=default,
            choices=choices,
        )
    except ValueError as error:
        raise InvalidDefinitionError(name, str(error)) from error
    return resolved


def keyword_modifiers(
    description: str | None = None,
    default: Any = None,
    choices: Iterable[Any] | None = None,
    type: Any = None,
    optional: bool = False,
) -> list[Any]:
    """Translate keyword shortcuts into markers."""
    modifiers: list[Any] = []
    if description is not None:
        modifiers.append(Description(description))
    if default is not None:
        modifiers.append(DefaultValue(default))
    if choices is not None:
        modifiers.append(Allowed(choices))
    if type is not None:
        modifiers.append(Value(type))
    if optional:
        modifiers.append(Optional())
    return modifiers
