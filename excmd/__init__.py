"""
Excmd CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    CommandMissingArgumentError,
    ErrorKind,
    ExcmdError,
    InvalidDefinitionError,
    InvalidOptionNameError,
    InvalidValueError,
    MissingValueError,
    NotExpectingValueError,
    OptionNotFoundError,
)
from .parser import (
    Allowed,
    CommandLineParser,
    DefaultValue,
    Description,
    Optional,
    OptionState,
    ParseResult,
    Value,
)

logger = logging.getLogger("excmd")

__version__ = "0.1.0"

__all__ = [
    "Allowed",
    "CommandLineParser",
    "CommandMissingArgumentError",
    "DefaultValue",
    "Description",
    "ErrorKind",
    "ExcmdError",
    "InvalidDefinitionError",
    "InvalidOptionNameError",
    "InvalidValueError",
    "MissingValueError",
    "NotExpectingValueError",
    "Optional",
    "OptionNotFoundError",
    "OptionState",
    "ParseResult",
    "Value",
]
