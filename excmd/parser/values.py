# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value parsers convert the raw string given to an option into a typed value.

A value parser is the only thing that makes an option value-requiring: options
without one are boolean presence flags. Value parsers are stateless, so a
built registry can be shared between parses; the converted value lives in the
resulting `OptionState`, not in the parser.

Variants:
- StringValue: the raw string, unchanged.
- IntValue: base-10 integers.
- BoolValue: 'true'/'false', 'yes'/'no', '1'/'0', 'on'/'off'.
- ChoiceValue: a string restricted to an allowed set.
- TypedValue: anything `coerce_value` understands (Enum, Path, datetime, ...).

Use `value_parser_for()` to pick the right variant for a type.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from excmd.parser.utils import coerce_bool, coerce_value, type_name


class ValueParser(ABC):
    """
    Base class for value conversion.

    Args:
        default (Any): Value reported when the option is not given. Strings are
            converted with `convert()` when the parser is created.
        choices (Iterable | None): Raw strings the option accepts. Anything else
            is rejected before conversion.

    Raises:
        ValueError: If the default is not one of the choices or cannot be converted.
    """

    value_type: Any = str

    def __init__(self, default: Any = None, choices: Iterable[Any] | None = None) -> None:
        self._allowed: frozenset[str] | None = None
        if choices is not None:
            if isinstance(choices, (str, dict)):
                raise ValueError("choices must be a list, tuple or set of values")
            self._allowed = frozenset(str(choice) for choice in choices)
        self._raw_default: str | None = None
        self._default: Any = None
        if default is not None:
            self._raw_default = self.format_value(default)
            if self._allowed is not None and self._raw_default not in self._allowed:
                raise ValueError(
                    f"default '{self._raw_default}' is not one of {self.choices_text()}"
                )
            self._default = self.convert(default) if isinstance(default, str) else default

    @abstractmethod
    def convert(self, raw: str) -> Any:
        """Convert a raw string, raising ValueError if it is not acceptable."""

    def parse(self, raw: str) -> Any:
        """Check `raw` against the allowed set and convert it."""
        if self._allowed is not None and raw not in self._allowed:
            raise ValueError(f"must be one of {self.choices_text()}")
        return self.convert(raw)

    def format_value(self, value: Any) -> str:
        """Render a value the way it would be typed on the command line."""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def has_default(self) -> bool:
        return self._raw_default is not None

    def get_default_value(self) -> str | None:
        """Return the default as a raw string, or None when there is none."""
        return self._raw_default

    @property
    def default(self) -> Any:
        """The converted default value."""
        return self._default

    def allowed_values(self) -> frozenset[str] | None:
        return self._allowed

    def choices_text(self) -> str:
        if not self._allowed:
            return "{}"
        return f"{{{', '.join(sorted(self._allowed))}}}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type={type_name(self.value_type)}, "
            f"default={self._raw_default!r}, choices={sorted(self._allowed or [])})"
        )


class StringValue(ValueParser):
    value_type = str

    def convert(self, raw: str) -> str:
        return str(raw)


class IntValue(ValueParser):
    value_type = int

    def convert(self, raw: str) -> int:
        try:
            return int(raw, 10)
        except (TypeError, ValueError):
            raise ValueError(f"'{raw}' is not a valid integer") from None


class BoolValue(ValueParser):
    value_type = bool

    def convert(self, raw: str) -> bool:
        return coerce_bool(raw)


class ChoiceValue(StringValue):
    """A string option restricted to an allowed set of values."""

    def __init__(self, choices: Iterable[Any], default: Any = None) -> None:
        super().__init__(default=default, choices=choices)
        if not self._allowed:
            raise ValueError("ChoiceValue requires at least one choice")


class TypedValue(ValueParser):
    """Converts with `coerce_value` for any other target type."""

    def __init__(
        self,
        value_type: Any,
        default: Any = None,
        choices: Iterable[Any] | None = None,
    ) -> None:
        self.value_type = value_type
        super().__init__(default=default, choices=choices)

    def convert(self, raw: str) -> Any:
        return coerce_value(raw, self.value_type)


def value_parser_for(
    value_type: Any = None,
    default: Any = None,
    choices: Iterable[Any] | None = None,
) -> ValueParser:
    """
    Build the value parser matching `value_type`.

    When no type is given it is inferred from the default, falling back to `str`.
    """
    if value_type is None:
        value_type = type(default) if default is not None else str
    if value_type is str:
        if choices is not None:
            return ChoiceValue(choices, default=default)
        return StringValue(default=default)
    if value_type is bool:
        return BoolValue(default=default, choices=choices)
    if value_type is int:
        return IntValue(default=default, choices=choices)
    return TypedValue(value_type, default=default, choices=choices)
