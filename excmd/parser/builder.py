# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Fluent handles returned by `CommandLineParser` while the registry is built.

`OptionGroupAdder` adds options to a group; `CommandAdder` adds positional
arguments and attaches option groups to a command. Both return themselves so
calls can be chained:

    jit = parser.add_option_group("JIT Options").add_option(
        "jit", Description("Enables the JIT engine.")
    )
    parser.add_command("play").add_option_group(jit).add_argument(
        "game directory", Value(str)
    )
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from excmd.exceptions import InvalidDefinitionError, InvalidOptionNameError
from excmd.logger import logger
from excmd.parser.modifiers import keyword_modifiers, resolve_modifiers
from excmd.parser.option import Command, Option, OptionGroup, split_option_name

if TYPE_CHECKING:
    from excmd.parser.command_line_parser import CommandLineParser


class OptionGroupAdder:
    """Adds options to one `OptionGroup`."""

    def __init__(self, group: OptionGroup, owner: CommandLineParser) -> None:
        self.group = group
        self.owner = owner

    def add_option(
        self,
        name: str,
        *modifiers: Any,
        description: str | None = None,
        default: Any = None,
        choices: Iterable[Any] | None = None,
        type: Any = None,
    ) -> OptionGroupAdder:
        """
        Add an option to the group.

        Args:
            name (str): "x", "long", "x,long" or "long,x".
            *modifiers: `Description`, `DefaultValue`, `Allowed` or `Value` markers.
            description (str | None): Shortcut for `Description`.
            default (Any): Shortcut for `DefaultValue`.
            choices (Iterable | None): Shortcut for `Allowed`.
            type (Any): Shortcut for `Value`.

        Raises:
            InvalidOptionNameError: If `name` does not have a valid shape.
            InvalidDefinitionError: If the markers are inconsistent.
        """
        short_name, long_name = split_option_name(name)
        resolved = resolve_modifiers(
            name,
            [
                *modifiers,
                *keyword_modifiers(
                    description=description, default=default, choices=choices, type=type
                ),
            ],
        )
        option = Option(
            name=long_name or short_name,
            short_name=short_name,
            long_name=long_name,
            description=resolved.description,
            value_parser=resolved.value_parser,
        )
        self.group.options.append(option)
        logger.debug("Added option %r to group '%s'", option, self.group.name)
        return self

    def __repr__(self) -> str:
        return f"OptionGroupAdder(group={self.group.name!r})"


class CommandAdder:
    """Adds arguments and option groups to one `Command`."""

    def __init__(self, command: Command, owner: CommandLineParser) -> None:
        self.command = command
        self.owner = owner

    def add_option_group(self, group: OptionGroupAdder | OptionGroup) -> CommandAdder:
        """
        Attach a registered option group to the command.

        The group is shared, not copied: options added to it later are visible
        from every command it is attached to.
        """
        if isinstance(group, OptionGroupAdder):
            group = group.group
        if not any(group is registered for registered in self.owner.groups):
            raise InvalidDefinitionError(
                group.name,
                f"option group is not registered with this parser "
                f"(attaching it to '{self.command.name}')",
            )
        self.command.groups.append(group)
        return self

    def add_argument(
        self,
        name: str,
        *modifiers: Any,
        description: str | None = None,
        default: Any = None,
        choices: Iterable[Any] | None = None,
        type: Any = None,
        optional: bool = False,
    ) -> CommandAdder:
        """
        Append a positional argument to the command.

        Arguments are filled left to right in the order they are added. Without
        a `Value` marker the argument stores the raw string.
        """
        if not isinstance(name, str) or not name:
            raise InvalidOptionNameError(str(name), "argument name must be non-empty")
        if self.command.get_argument(name):
            raise InvalidDefinitionError(
                name, f"argument already defined for command '{self.command.name}'"
            )
        resolved = resolve_modifiers(
            name,
            [
                *modifiers,
                *keyword_modifiers(
                    description=description,
                    default=default,
                    choices=choices,
                    type=type,
                    optional=optional,
                ),
            ],
            positional=True,
        )
        argument = Option(
            name=name,
            description=resolved.description,
            optional=resolved.optional,
            value_parser=resolved.value_parser,
            positional=True,
        )
        self.command.arguments.append(argument)
        logger.debug("Added argument %r to command '%s'", argument, self.command.name)
        return self

    def __repr__(self) -> str:
        return f"CommandAdder(command={self.command.name!r})"
