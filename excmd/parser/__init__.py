"""
Excmd CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .builder import CommandAdder, OptionGroupAdder
from .command_line_parser import CommandLineParser
from .help import HelpFormatter
from .modifiers import Allowed, DefaultValue, Description, Optional, Value
from .option import Command, Option, OptionGroup
from .parser_types import OptionState, ParseResult
from .values import (
    BoolValue,
    ChoiceValue,
    IntValue,
    StringValue,
    TypedValue,
    ValueParser,
    value_parser_for,
)

__all__ = [
    "Allowed",
    "BoolValue",
    "ChoiceValue",
    "Command",
    "CommandAdder",
    "CommandLineParser",
    "DefaultValue",
    "Description",
    "HelpFormatter",
    "IntValue",
    "Option",
    "OptionGroup",
    "OptionGroupAdder",
    "OptionState",
    "Optional",
    "ParseResult",
    "StringValue",
    "TypedValue",
    "Value",
    "ValueParser",
    "value_parser_for",
]
