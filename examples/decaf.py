"""Command-line options for the Decaf emulator."""
import sys

from excmd import (
    Allowed,
    CommandLineParser,
    DefaultValue,
    Description,
    ExcmdError,
    Optional,
    Value,
)
from excmd.console import console, error_console

LOG_LEVELS = [
    "trace",
    "debug",
    "info",
    "notice",
    "warning",
    "error",
    "critical",
    "alert",
    "emerg",
    "off",
]


def build_parser() -> CommandLineParser:
    parser = CommandLineParser(program="decaf")
    parser.global_options().add_option(
        "v,version", Description("Show version.")
    ).add_option("h,help", Description("Show help."))

    parser.add_command("help").add_argument("help-command", Optional(), Value(str))

    jit_options = (
        parser.add_option_group("JIT Options")
        .add_option("jit", Description("Enables the JIT engine."))
        .add_option(
            "jit-debug", Description("Verify JIT implementation against interpreter.")
        )
    )

    log_options = (
        parser.add_option_group("Log Options")
        .add_option("log-file", Description("Redirect log output to file."))
        .add_option("log-async", Description("Enable asynchronous logging."))
        .add_option(
            "log-level",
            Description(
                "Only display logs with severity equal to or greater than this level."
            ),
            DefaultValue("trace"),
            Allowed(LOG_LEVELS),
        )
    )

    sys_options = parser.add_option_group("System Options").add_option(
        "sys-path", Description("Where to locate any external system files."), Value(str)
    )

    parser.add_command("play").add_option_group(jit_options).add_option_group(
        log_options
    ).add_option_group(sys_options).add_argument("game directory", Value(str))

    parser.add_command("fuzztest")

    parser.add_command("hwtest").add_option_group(jit_options).add_option_group(
        log_options
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    parser = build_parser()

    try:
        options = parser.parse(argv)
    except ExcmdError as error:
        error_console.print(
            f"Error parsing options: {error}", markup=False, soft_wrap=True
        )
        return 1

    if options.has("sys-path"):
        console.print(f"sys-path: {options.get('sys-path')}", markup=False)

    if options.has("play"):
        console.print(f"play game dir: {options.get('game directory')}", markup=False)
    elif options.has("hwtest"):
        console.print("hwtest")
    elif options.has("fuzztest"):
        console.print("fuzztest")

    if options.has("version"):
        console.print("Decaf Emulator version 0.0.1")
        return 0

    if len(argv) == 1 or options.has("help"):
        parser.render_help(argv[0], options.get("help-command"))
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
