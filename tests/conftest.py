import logging

import pytest

from excmd import (
    Allowed,
    CommandLineParser,
    DefaultValue,
    Description,
    Optional,
    Value,
)

LOG_LEVELS = ["trace", "debug", "info", "warning", "error", "off"]


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def parser() -> CommandLineParser:
    """A registry shaped like the Decaf emulator's command line."""
    parser = CommandLineParser(program="prog")
    parser.global_options().add_option(
        "v,version", Description("Show version.")
    ).add_option("h,help", Description("Show help."))

    parser.add_command("help").add_argument("help-command", Optional(), Value(str))

    jit = (
        parser.add_option_group("JIT Options")
        .add_option("jit", Description("Enables the JIT engine."))
        .add_option("jit-debug", Description("Verify JIT against interpreter."))
    )
    log = (
        parser.add_option_group("Log Options")
        .add_option("log-file", Value(str), Description("Redirect log output to file."))
        .add_option("log-async", Description("Enable asynchronous logging."))
        .add_option(
            "log-level",
            Description("Minimum severity."),
            DefaultValue("trace"),
            Allowed(LOG_LEVELS),
        )
    )
    system = parser.add_option_group("System Options").add_option(
        "s,sys-path", Value(str), Description("Where to locate system files.")
    )

    parser.add_command("play").add_option_group(jit).add_option_group(
        log
    ).add_option_group(system).add_argument("game directory", Value(str))
    parser.add_command("fuzztest")
    parser.add_command("hwtest").add_option_group(jit).add_option_group(log)
    return parser
