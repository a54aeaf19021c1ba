# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the registration model used by `CommandLineParser`.

- `Option`: one flag, valued option, or positional argument.
- `OptionGroup`: a named, ordered bundle of options. Groups are owned by the
  parser and may be attached to any number of commands.
- `Command`: a named sub-parser with ordered positional arguments and the
  option groups visible while it is active.

`split_option_name()` turns an option spec such as "v,version" into its short
and long names.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from excmd.exceptions import InvalidOptionNameError
from excmd.parser.values import ValueParser

SHORT_NAME_PATTERN = re.compile(r"[A-Za-z]")
LONG_NAME_PATTERN = re.compile(r"[A-Za-z0-9][-_A-Za-z0-9]+")


def split_option_name(spec: str) -> tuple[str, str]:
    """
    Split an option spec into `(short_name, long_name)`.

    Accepted shapes are "x", "long", "x,long" and "long,x". When a comma is
    present exactly one side has to be a single character.

    Raises:
        InvalidOptionNameError: If the spec does not have one of those shapes.
    """
    if not isinstance(spec, str) or not spec:
        raise InvalidOptionNameError(str(spec), "name must be a non-empty string")

    short_name, long_name = "", ""
    left, comma, right = spec.partition(",")
    if comma:
        if len(left) == 1:
            short_name, long_name = left, right
        elif len(right) == 1:
            short_name, long_name = right, left
        else:
            raise InvalidOptionNameError(
                spec, "exactly one side of ',' must be a single character"
            )
    elif len(spec) == 1:
        short_name = spec
    else:
        long_name = spec

    if short_name and not SHORT_NAME_PATTERN.fullmatch(short_name):
        raise InvalidOptionNameError(spec, "short names must be a single letter")
    if comma and not long_name:
        raise InvalidOptionNameError(spec, "long name is empty")
    if long_name and not LONG_NAME_PATTERN.fullmatch(long_name):
        raise InvalidOptionNameError(
            spec,
            "long names must start with a letter or digit and contain only "
            "letters, digits, '-' and '_'",
        )
    return short_name, long_name


@dataclass(eq=False)
class Option:
    """
    A single option or positional argument definition.

    Attributes:
        name (str): Canonical name; the long name, else the short name, else the
            literal argument name for positionals.
        short_name (str): Single-letter name, or "".
        long_name (str): Long name, or "".
        description (str): Help text.
        optional (bool): Positional arguments only; may be omitted.
        value_parser (ValueParser | None): Value conversion. None means the option
            is a boolean presence flag.
        positional (bool): True for command arguments.
    """

    name: str
    short_name: str = ""
    long_name: str = ""
    description: str = ""
    optional: bool = False
    value_parser: ValueParser | None = None
    positional: bool = False

    @property
    def requires_value(self) -> bool:
        return self.value_parser is not None

    def get_default_value(self) -> str | None:
        if self.value_parser is None:
            return None
        return self.value_parser.get_default_value()

    @property
    def default(self) -> Any:
        if self.value_parser is None or not self.value_parser.has_default():
            return None
        return self.value_parser.default

    def matches(self, name: str) -> bool:
        """Return True if `name` is this option's short or long name."""
        if self.positional:
            return False
        return name in (self.short_name, self.long_name) and bool(name)

    def __repr__(self) -> str:
        kind = "argument" if self.positional else "option"
        return f"Option({kind}={self.name!r}, requires_value={self.requires_value})"


@dataclass(eq=False)
class OptionGroup:
    """A named, ordered collection of options."""

    name: str
    options: list[Option] = field(default_factory=list)

    def find(self, name: str) -> Option | None:
        for option in self.options:
            if option.matches(name):
                return option
        return None


@dataclass(eq=False)
class Command:
    """A named sub-parser with positional arguments and attached option groups."""

    name: str
    arguments: list[Option] = field(default_factory=list)
    groups: list[OptionGroup] = field(default_factory=list)

    def get_argument(self, name: str) -> Option | None:
        return next((arg for arg in self.arguments if arg.name == name), None)
