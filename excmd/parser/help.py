# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Plain-text help rendering for a `CommandLineParser`.

`HelpFormatter` only reads the registry. Output looks like:

    Usage:
      decaf play [--jit] [--log-level=<log-level>] <game directory>
    Global Options:
      -v --version
        Show version.

    Log Options:
      --log-level=<log-level> [default=trace]
        Only display logs with severity equal to or greater than this level.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from excmd.parser.option import Command, Option, OptionGroup

if TYPE_CHECKING:
    from excmd.parser.command_line_parser import CommandLineParser


class HelpFormatter:
    """Renders usage lines and option group listings for a parser."""

    indent = "  "

    def __init__(self, parser: CommandLineParser) -> None:
        self.parser = parser

    def format_option(self, option: Option) -> str:
        """
        Flag line, then the indented description.

        Options without a description get no description line at all, rather
        than an indented blank one.
        """
        flags = []
        if option.short_name:
            flags.append(f"-{option.short_name}")
        if option.long_name:
            flags.append(f"--{option.long_name}")
        text = " ".join(flags)
        if option.requires_value:
            text += f"=<{option.long_name or option.short_name}>"
        default_value = option.get_default_value()
        if default_value is not None:
            text += f" [default={default_value}]"

        lines = [f"{self.indent}{text}"]
        if option.description:
            lines.append(f"{self.indent * 2}{option.description}")
        return "\n".join(lines) + "\n"

    def format_option_group(self, group: OptionGroup) -> str:
        """Heading line followed by one block per option."""
        return f"{group.name}:\n" + "".join(
            self.format_option(option) for option in group.options
        )

    def format_usage_option(self, option: Option) -> str:
        dashes = "-" if len(option.name) == 1 else "--"
        text = f"{dashes}{option.name}"
        if option.requires_value:
            text += f"=<{option.name}>"
        return f"[{text}]"

    def format_command(self, command: Command) -> str:
        """One usage line: command name, attached options, then arguments."""
        parts = [command.name]
        for group in command.groups:
            parts.extend(self.format_usage_option(option) for option in group.options)
        parts.extend(f"<{argument.name}>" for argument in command.arguments)
        return " ".join(parts)

    def format_usage(self, program: str, commands: list[Command]) -> str:
        lines = ["Usage:"]
        for command in commands:
            usage = " ".join(part for part in (program, self.format_command(command)) if part)
            lines.append(f"{self.indent}{usage}")
        return "\n".join(lines) + "\n"

    def format_help(self, program: str) -> str:
        """Help for the whole registry."""
        parts = []
        if self.parser.commands:
            parts.append(self.format_usage(program, self.parser.commands))
        parts.append(self.format_option_group(self.parser.global_group) + "\n")
        for group in self.parser.groups:
            parts.append(self.format_option_group(group) + "\n")
        return "".join(parts)

    def format_command_help(self, program: str, command_name: str) -> str:
        """Help for one command; falls back to the full help if it is unknown."""
        command = self.parser.find_command(command_name)
        if command is None:
            return f"Command {command_name} not found.\n" + self.format_help(program)

        parts = [self.format_usage(program, [command])]
        parts.append(self.format_option_group(self.parser.global_group) + "\n")
        for group in command.groups:
            parts.append(self.format_option_group(group) + "\n")
        return "".join(parts)
