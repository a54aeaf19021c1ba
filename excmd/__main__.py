"""
Excmd CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from excmd.config import loader
from excmd.console import console, error_console
from excmd.exceptions import ExcmdError
from excmd.parser import CommandLineParser, OptionState
from excmd.utils import LOG_MODE_ENV, get_program_invocation, setup_logging

CONFIG_SUFFIXES = (".yaml", ".yml", ".toml")


def find_excmd_config() -> Path | None:
    candidates = [
        Path.cwd() / "excmd.yaml",
        Path.cwd() / "excmd.toml",
        Path.cwd() / ".excmd.yaml",
        Path.cwd() / ".excmd.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def usage() -> str:
    program = get_program_invocation()
    return (
        f"usage: {program} [--log-mode=cli|json] [CONFIG] [ARGS...]\n\n"
        "Parse ARGS against the options and commands declared in CONFIG\n"
        "(a .yaml, .yml or .toml file). Without CONFIG, excmd.yaml or excmd.toml\n"
        "in the current directory is used.\n"
        f"The log mode defaults to ${LOG_MODE_ENV}, then to json inside containers.\n"
    )


def split_log_mode(args: list[str]) -> tuple[str | None, list[str]]:
    """Strip a leading `--log-mode=MODE` or `--log-mode MODE` from `args`."""
    if args and args[0].startswith("--log-mode="):
        return args[0].partition("=")[2], args[1:]
    if len(args) > 1 and args[0] == "--log-mode":
        return args[1], args[2:]
    return None, args


def help_target(state: OptionState) -> str | None:
    """Return the command to scope help to, e.g. `prog help play`."""
    command = state.command
    if command is None or command.name != "help" or not command.arguments:
        return None
    return state.get(command.arguments[0].name)


def render_state(state: OptionState) -> Table:
    table = Table(title=f"command: {state.command_name or '-'}", title_justify="left")
    table.add_column("Name", style="excmd.option")
    table.add_column("Value", style="excmd.value")
    table.add_column("Source")
    for name, value in state.values.items():
        table.add_row(escape(name), escape(str(value)), "argv")
    for name, value in state.defaults.items():
        if name not in state.values:
            table.add_row(escape(name), escape(str(value)), "default")
    for extra in state.extra_arguments:
        table.add_row("", escape(extra), "extra")
    return table


def run(parser: CommandLineParser, program: str, args: Sequence[str]) -> int:
    result = parser.try_parse([program, *args])
    if not result.ok:
        error_console.print(
            f"[excmd.error]Error parsing options:[/] {escape(str(result.error))}",
            soft_wrap=True,
        )
        return 1

    state = result.unwrap()
    if state.has("help"):
        parser.render_help(program, help_target(state))
        return 0

    console.print(render_state(state))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv if argv is None else argv)[1:]
    log_mode, args = split_log_mode(args)
    try:
        setup_logging(mode=log_mode)
    except ValueError as error:
        error_console.print(f"[excmd.error]{escape(str(error))}[/]", soft_wrap=True)
        return 1

    if args and args[0] in ("-h", "--help"):
        console.print(usage(), markup=False, soft_wrap=True, end="")
        return 0

    if args and Path(args[0]).suffix in CONFIG_SUFFIXES:
        config_path: Path | None = Path(args[0])
        args = args[1:]
    else:
        config_path = find_excmd_config()

    if config_path is None:
        error_console.print("[excmd.error]No excmd config file found.[/]")
        error_console.print(usage(), markup=False, soft_wrap=True, end="")
        return 1

    try:
        parser = loader(config_path)
    except (OSError, ValueError, ExcmdError) as error:
        error_console.print(
            f"[excmd.error]Could not load '{escape(str(config_path))}':[/] "
            f"{escape(str(error))}",
            soft_wrap=True,
        )
        return 1

    return run(parser, parser.program or config_path.stem, args)


if __name__ == "__main__":
    sys.exit(main())
