# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all exception classes raised by the excmd registry and parser.

Every error carries an `ErrorKind` tag and the name of the offending option,
command or argument, so callers can either catch a specific subclass or switch
on `error.kind` when handling a `ParseResult`.

Exception Hierarchy:
- ExcmdError
    ├── InvalidOptionNameError
    ├── InvalidDefinitionError
    ├── OptionNotFoundError
    ├── MissingValueError
    ├── NotExpectingValueError
    ├── CommandMissingArgumentError
    └── InvalidValueError

Builder-time errors (`InvalidOptionNameError`, `InvalidDefinitionError`) are
raised while the registry is being built. Everything else is raised by
`CommandLineParser.parse()` and aborts the whole parse.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds reported by excmd."""

    INVALID_OPTION_NAME = "invalid_option_name"
    INVALID_DEFINITION = "invalid_definition"
    OPTION_NOT_FOUND = "option_not_found"
    MISSING_VALUE = "missing_value"
    NOT_EXPECTING_VALUE = "not_expecting_value"
    COMMAND_MISSING_ARGUMENT = "command_missing_argument"
    INVALID_VALUE = "invalid_value"

    def __str__(self) -> str:
        return self.value


class ExcmdError(Exception):
    """Base exception for every excmd failure."""

    kind: ErrorKind

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidOptionNameError(ExcmdError):
    """Raised when an option spec like "ab,cd" violates the short/long rule."""

    kind = ErrorKind.INVALID_OPTION_NAME

    def __init__(self, name: str, reason: str = "") -> None:
        message = f"Invalid option name '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(name, message)


class InvalidDefinitionError(ExcmdError):
    """Raised when an option, argument or command is registered inconsistently."""

    kind = ErrorKind.INVALID_DEFINITION

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(name, f"Invalid definition for '{name}': {reason}")


class OptionNotFoundError(ExcmdError):
    """Raised when a token names an unknown option or command."""

    kind = ErrorKind.OPTION_NOT_FOUND

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Option or command '{name}' does not exist")


class MissingValueError(ExcmdError):
    """Raised when a value-requiring option is not given a value."""

    kind = ErrorKind.MISSING_VALUE

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Option '{name}' is missing a value")


class NotExpectingValueError(ExcmdError):
    """Raised when `--flag=value` is given for a boolean flag."""

    kind = ErrorKind.NOT_EXPECTING_VALUE

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Option '{name}' does not take a value")


class CommandMissingArgumentError(ExcmdError):
    """Raised when a required positional argument of a command was not supplied."""

    kind = ErrorKind.COMMAND_MISSING_ARGUMENT

    def __init__(self, command: str, name: str) -> None:
        super().__init__(name, f"Command '{command}' is missing argument '{name}'")
        self.command = command


class InvalidValueError(ExcmdError):
    """Raised when the value capability of an option rejects a raw value."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, name: str, value: str, reason: str = "") -> None:
        message = f"Invalid value '{value}' for '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(name, message)
        self.value = value
