# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parse state models for `CommandLineParser`.

Contents:
- `ParseContext`: mutable bookkeeping for a single parse pass. It never
  escapes the parser.
- `OptionState`: the frozen result of a successful parse.
- `ParseResult`: either an `OptionState` or the `ExcmdError` that aborted the
  parse, returned by `CommandLineParser.try_parse()`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from excmd.exceptions import ExcmdError
from excmd.parser.option import Command, Option


@dataclass
class ParseContext:
    """Tracks the active command and the options set so far."""

    command: Command | None = None
    args_set: int = 0
    set_options: dict[str, Option] = field(default_factory=dict)
    values: dict[str, Any] = field(default_factory=dict)
    extra_arguments: list[str] = field(default_factory=list)

    def set(self, option: Option, value: Any) -> None:
        self.set_options[option.name] = option
        self.values[option.name] = value

    def next_argument(self) -> Option | None:
        """Return the next unfilled argument of the active command, if any."""
        if self.command is None or self.args_set >= len(self.command.arguments):
            return None
        argument = self.command.arguments[self.args_set]
        self.args_set += 1
        return argument

    def freeze(self, defaults: dict[str, Any]) -> OptionState:
        return OptionState(
            command=self.command,
            set_options=MappingProxyType(dict(self.set_options)),
            values=MappingProxyType(dict(self.values)),
            defaults=MappingProxyType(dict(defaults)),
            args_set=self.args_set,
            extra_arguments=tuple(self.extra_arguments),
        )


@dataclass(frozen=True)
class OptionState:
    """
    The result of a successful parse.

    Attributes:
        command (Command | None): The matched command, if any.
        set_options (Mapping[str, Option]): Options given on the command line,
            keyed by canonical name. Presence means "set".
        values (Mapping[str, Any]): Converted values keyed by canonical name.
            Boolean flags hold True.
        defaults (Mapping[str, Any]): Defaults of every option visible to the
            matched command.
        args_set (int): Number of the command's arguments that were filled.
        extra_arguments (tuple[str, ...]): Positionals beyond the declared arguments.
    """

    command: Command | None = None
    set_options: Mapping[str, Option] = field(
        default_factory=lambda: MappingProxyType({})
    )
    values: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    args_set: int = 0
    extra_arguments: tuple[str, ...] = ()

    @property
    def command_name(self) -> str | None:
        return self.command.name if self.command else None

    def has(self, name: str) -> bool:
        """Return True if `name` is the matched command or an option that was set."""
        if self.command is not None and self.command.name == name:
            return True
        return name in self.set_options

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def get(self, name: str, default: Any = None) -> Any:
        """
        Return the value of an option or argument.

        Falls back to the option's declared default, then to `default`.
        """
        if name in self.values:
            return self.values[name]
        if name in self.defaults:
            return self.defaults[name]
        return default

    def __getitem__(self, name: str) -> Any:
        if name in self.values:
            return self.values[name]
        if name in self.defaults:
            return self.defaults[name]
        raise KeyError(name)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the state into plain data."""
        return {
            "command": self.command_name,
            "options": {**dict(self.defaults), **dict(self.values)},
            "set": sorted(self.set_options),
            "extra_arguments": list(self.extra_arguments),
        }


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed `OptionState` or the error that stopped the parse."""

    state: OptionState | None = None
    error: ExcmdError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> OptionState:
        """Return the state or raise the stored error."""
        if self.error is not None:
            raise self.error
        assert self.state is not None, "ParseResult without state or error"
        return self.state
