# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLineParser`, the registry and parser engine of
excmd. Callers declare global options, named option groups and commands, then
hand over the process argument vector and get back an `OptionState`.

Key Features:
- Declarative registration via `global_options()`, `add_option_group()` and
  `add_command()`, with chained `add_option()` / `add_argument()` calls.
- Long options: `--name`, `--name value`, `--name=value`.
- POSIX-style bundling for single-letter flags (`-abc`), with the value of the
  last flag taken from the next token (`-abc value`) or inline for a single
  leading flag (`-svalue`).
- Command-scoped option groups, resolved after the global options
  (first match wins, later definitions of the same name are shadowed).
- Positional arguments filled left to right; extras are collected instead of
  rejected.
- Plain-text and rich-printed help via `HelpFormatter`.

Example Usage:
    parser = CommandLineParser(program="decaf")
    parser.global_options().add_option("v,version", Description("Show version."))
    parser.add_command("play").add_argument("game directory", Value(str))

    state = parser.parse(["decaf", "play", "/games/x"])
    state.has("play")                # True
    state.get("game directory")      # "/games/x"

Parsing never mutates the registry, so a fully built parser can be reused for
any number of parses, including concurrent ones, as long as nothing is added
to it afterwards.
"""
from __future__ import annotations

import re
import sys
from typing import Any, Sequence

from rich.console import Console

from excmd.console import console
from excmd.exceptions import (
    CommandMissingArgumentError,
    ExcmdError,
    InvalidDefinitionError,
    InvalidValueError,
    MissingValueError,
    NotExpectingValueError,
    OptionNotFoundError,
)
from excmd.logger import logger
from excmd.parser.builder import CommandAdder, OptionGroupAdder
from excmd.parser.help import HelpFormatter
from excmd.parser.option import Command, Option, OptionGroup
from excmd.parser.parser_types import OptionState, ParseContext, ParseResult

OPTION_PATTERN = re.compile(
    r"--(?P<long>[A-Za-z0-9][-_A-Za-z0-9]+)(?:=(?P<value>.*))?|-(?P<short>[A-Za-z]+)",
    re.DOTALL,
)


class CommandLineParser:
    """
    Registry of options, option groups and commands, and the parser over it.

    Attributes:
        program (str | None): Display name used in help when none is passed.
        global_group (OptionGroup): Options visible regardless of the command.
        groups (list[OptionGroup]): Named option groups, in registration order.
        commands (list[Command]): Commands, in registration order.
    """

    def __init__(
        self,
        program: str | None = None,
        global_group_name: str = "Global Options",
    ) -> None:
        self.program: str | None = program
        self.console: Console = console
        self.global_group: OptionGroup = OptionGroup(name=global_group_name)
        self.groups: list[OptionGroup] = []
        self.commands: list[Command] = []

    def global_options(self) -> OptionGroupAdder:
        """Return a handle for adding options to the global group."""
        return OptionGroupAdder(self.global_group, self)

    def add_option_group(self, name: str) -> OptionGroupAdder:
        """Create a named option group and return a handle to it."""
        group = OptionGroup(name=name)
        self.groups.append(group)
        logger.debug("Registered option group '%s'", name)
        return OptionGroupAdder(group, self)

    def add_command(self, name: str) -> CommandAdder:
        """
        Register a command and return a handle to it.

        Raises:
            InvalidDefinitionError: If the name is empty, looks like an option,
                or is already used by another command.
        """
        if not isinstance(name, str) or not name:
            raise InvalidDefinitionError(str(name), "command name must be non-empty")
        if name.startswith("-"):
            raise InvalidDefinitionError(name, "command names cannot start with '-'")
        if self.find_command(name):
            raise InvalidDefinitionError(name, "command is already registered")
        command = Command(name=name)
        self.commands.append(command)
        logger.debug("Registered command '%s'", name)
        return CommandAdder(command, self)

    def find_command(self, name: str) -> Command | None:
        return next((command for command in self.commands if command.name == name), None)

    def visible_groups(self, command: Command | None = None) -> list[OptionGroup]:
        """Return the groups searched for `command`, in resolution order."""
        if command is None:
            return [self.global_group]
        return [self.global_group, *command.groups]

    def get_option(self, name: str, command: Command | None = None) -> Option | None:
        """
        Resolve a short or long option name.

        The global group is searched first, then the groups of `command` in the
        order they were attached. The first match wins.
        """
        for group in self.visible_groups(command):
            option = group.find(name)
            if option is not None:
                return option
        return None

    def _require_option(self, name: str, command: Command | None) -> Option:
        option = self.get_option(name, command)
        if option is None:
            raise OptionNotFoundError(name)
        logger.debug("Resolved '%s' to %r", name, option)
        return option

    def _is_valid_value(self, tokens: Sequence[str], index: int) -> bool:
        """A value token has to exist and must not look like an option."""
        if index >= len(tokens):
            return False
        return not tokens[index].startswith("-")

    def _set_option(
        self, context: ParseContext, option: Option, raw: str | None = None
    ) -> None:
        if option.value_parser is None:
            context.set(option, True)
            return
        assert raw is not None, f"value-requiring option '{option.name}' got no value"
        try:
            value = option.value_parser.parse(raw)
        except ValueError as error:
            raise InvalidValueError(option.name, raw, str(error)) from error
        context.set(option, value)

    def _consume_positional(self, context: ParseContext, token: str) -> None:
        if context.command is None and self.commands:
            command = self.find_command(token)
            if command is None:
                raise OptionNotFoundError(token)
            context.command = command
            logger.debug("Selected command '%s'", command.name)
            return

        argument = context.next_argument()
        if argument is None:
            logger.debug("Extra positional argument '%s'", token)
            context.extra_arguments.append(token)
            return
        self._set_option(context, argument, token)

    def _consume_short_cluster(
        self,
        context: ParseContext,
        cluster: str,
        tokens: Sequence[str],
        position: int,
    ) -> int:
        """Handle `-abc`; returns the position of the last consumed token."""
        last = len(cluster) - 1
        for index, name in enumerate(cluster):
            option = self._require_option(name, context.command)
            if not option.requires_value:
                self._set_option(context, option)
            elif index == last:
                # -s value
                if not self._is_valid_value(tokens, position + 1):
                    raise MissingValueError(option.name)
                position += 1
                self._set_option(context, option, tokens[position])
            elif index == 0:
                # -svalue
                self._set_option(context, option, cluster[1:])
                break
            else:
                # -abcvalue is not valid syntax
                raise MissingValueError(option.name)
        return position

    def _consume_long_option(
        self,
        context: ParseContext,
        name: str,
        inline_value: str | None,
        tokens: Sequence[str],
        position: int,
    ) -> int:
        """Handle `--name` and `--name=value`; returns the last consumed position."""
        option = self._require_option(name, context.command)
        if inline_value:
            # --long=value
            if not option.requires_value:
                raise NotExpectingValueError(option.name)
            self._set_option(context, option, inline_value)
        elif not option.requires_value:
            # --long
            self._set_option(context, option)
        else:
            # --long value
            if not self._is_valid_value(tokens, position + 1):
                raise MissingValueError(option.name)
            position += 1
            self._set_option(context, option, tokens[position])
        return position

    def _check_required_arguments(self, context: ParseContext) -> None:
        command = context.command
        if command is None:
            return
        for argument in command.arguments[context.args_set :]:
            if not argument.optional:
                raise CommandMissingArgumentError(command.name, argument.name)

    def _collect_defaults(self, command: Command | None) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        options: list[Option] = [
            option for group in self.visible_groups(command) for option in group.options
        ]
        if command is not None:
            options.extend(command.arguments)
        seen: set[str] = set()
        for option in options:
            # Shadowed options contribute nothing, not even a default.
            if option.name in seen:
                continue
            seen.add(option.name)
            if option.value_parser is not None and option.value_parser.has_default():
                defaults[option.name] = option.default
        return defaults

    def parse(self, argv: Sequence[str] | None = None) -> OptionState:
        """
        Parse an argument vector.

        Args:
            argv (Sequence[str] | None): Program name followed by the arguments.
                Defaults to `sys.argv`.

        Returns:
            OptionState: The matched command, set options and extra positionals.

        Raises:
            ExcmdError: The first error encountered; nothing is returned on failure.
        """
        tokens = list(sys.argv if argv is None else argv)
        context = ParseContext()
        position = 1
        while position < len(tokens):
            token = tokens[position]
            match = OPTION_PATTERN.fullmatch(token)
            if match is None:
                self._consume_positional(context, token)
            elif match.group("short"):
                position = self._consume_short_cluster(
                    context, match.group("short"), tokens, position
                )
            else:
                position = self._consume_long_option(
                    context, match.group("long"), match.group("value"), tokens, position
                )
            position += 1

        self._check_required_arguments(context)
        state = context.freeze(self._collect_defaults(context.command))
        logger.debug(
            "Parsed command=%s set=%s extra=%s",
            state.command_name,
            sorted(state.set_options),
            list(state.extra_arguments),
        )
        return state

    def try_parse(self, argv: Sequence[str] | None = None) -> ParseResult:
        """Like `parse()`, but returns the error in a `ParseResult` instead of raising."""
        try:
            return ParseResult(state=self.parse(argv))
        except ExcmdError as error:
            logger.debug("Parse failed (%s): %s", error.kind, error)
            return ParseResult(error=error)

    def format_help(self, program: str | None = None, command_name: str | None = None) -> str:
        """Return help for every command, or just for `command_name`."""
        formatter = HelpFormatter(self)
        program = program or self.program or ""
        if command_name is None:
            return formatter.format_help(program)
        return formatter.format_command_help(program, command_name)

    def render_help(
        self, program: str | None = None, command_name: str | None = None
    ) -> None:
        """Print `format_help()` through the rich console."""
        self.console.print(
            self.format_help(program, command_name),
            markup=False,
            soft_wrap=True,
            end="",
        )

    def __str__(self) -> str:
        options = len(self.global_group.options) + sum(
            len(group.options) for group in self.groups
        )
        return (
            f"CommandLineParser(groups={len(self.groups)}, "
            f"commands={len(self.commands)}, options={options})"
        )

    def __repr__(self) -> str:
        return str(self)
