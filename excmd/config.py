# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative registry loading for excmd.

A YAML or TOML file describes global options, option groups and commands:

    program: decaf
    global_options:
      - name: v,version
        description: Show version.
    groups:
      - name: Log Options
        options:
          - name: log-level
            default: trace
            choices: [trace, debug, info]
    commands:
      - name: play
        groups: [Log Options]
        arguments:
          - name: game directory
            type: str

The file only defines the registry. Option values always come from the
command line.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from excmd.logger import logger
from excmd.parser import CommandLineParser

TYPE_NAMES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


class RawOption(BaseModel):
    """Option entry of an excmd configuration file."""

    name: str
    description: str = ""
    default: Any = None
    choices: list[Any] | None = None
    type: str | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str | None) -> str | None:
        if value is not None and value not in TYPE_NAMES:
            raise ValueError(
                f"Unknown value type '{value}'. Must be one of: {', '.join(TYPE_NAMES)}"
            )
        return value

    def to_kwargs(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "default": self.default,
            "choices": self.choices,
            "type": TYPE_NAMES[self.type] if self.type else None,
        }


class RawArgument(RawOption):
    """Positional argument entry of an excmd configuration file."""

    optional: bool = False

    def to_kwargs(self) -> dict[str, Any]:
        return {**super().to_kwargs(), "optional": self.optional}


class RawGroup(BaseModel):
    name: str
    options: list[RawOption] = Field(default_factory=list)


class RawCommand(BaseModel):
    name: str
    groups: list[str] = Field(default_factory=list)
    arguments: list[RawArgument] = Field(default_factory=list)


class ExcmdConfig(BaseModel):
    """Excmd registry configuration model."""

    program: str | None = None
    global_options: list[RawOption] = Field(default_factory=list)
    groups: list[RawGroup] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_group_references(self) -> ExcmdConfig:
        names = [group.name for group in self.groups]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate option group names: {', '.join(duplicates)}")
        for command in self.commands:
            for group_name in command.groups:
                if group_name not in names:
                    raise ValueError(
                        f"Command '{command.name}' references unknown option group "
                        f"'{group_name}'"
                    )
        return self

    def to_parser(self) -> CommandLineParser:
        parser = CommandLineParser(program=self.program)
        global_options = parser.global_options()
        for option in self.global_options:
            global_options.add_option(option.name, **option.to_kwargs())

        adders = {}
        for group in self.groups:
            adder = parser.add_option_group(group.name)
            for option in group.options:
                adder.add_option(option.name, **option.to_kwargs())
            adders[group.name] = adder

        for raw_command in self.commands:
            command = parser.add_command(raw_command.name)
            for group_name in raw_command.groups:
                command.add_option_group(adders[group_name])
            for argument in raw_command.arguments:
                command.add_argument(argument.name, **argument.to_kwargs())
        return parser


def loader(file_path: Path | str) -> CommandLineParser:
    """
    Load an excmd registry from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        CommandLineParser: A parser with every option, group and command defined.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is invalid.
        ExcmdError: If an option name or definition is rejected by the builder.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        logger.error("Config file '%s' does not contain a mapping", path)
        raise ValueError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "program: 'mycli'\n"
            "commands:\n"
            "  - name: 'play'\n"
            "    arguments:\n"
            "      - name: 'directory'"
        )

    parser = ExcmdConfig.model_validate(raw_config).to_parser()
    logger.debug("Loaded %s from '%s'", parser, path)
    return parser
