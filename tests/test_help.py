import pytest

from excmd import Allowed, CommandLineParser, DefaultValue, Description, Value
from excmd.parser import HelpFormatter


@pytest.fixture
def small() -> CommandLineParser:
    parser = CommandLineParser(program="prog")
    parser.global_options().add_option("v,version", Description("Show version."))
    log = (
        parser.add_option_group("Log Options")
        .add_option(
            "log-level",
            Description("Log level."),
            DefaultValue("trace"),
            Allowed(["trace", "debug"]),
        )
        .add_option("q", Description("Quiet."))
        .add_option("o", Value(str))
    )
    parser.add_command("play").add_option_group(log).add_argument(
        "game directory", Value(str)
    )
    parser.add_command("fuzztest")
    return parser


FULL_HELP = (
    "Usage:\n"
    "  prog play [--log-level=<log-level>] [-q] [-o=<o>] <game directory>\n"
    "  prog fuzztest\n"
    "Global Options:\n"
    "  -v --version\n"
    "    Show version.\n"
    "\n"
    "Log Options:\n"
    "  --log-level=<log-level> [default=trace]\n"
    "    Log level.\n"
    "  -q\n"
    "    Quiet.\n"
    "  -o=<o>\n"
    "\n"
)


def test_format_help(small):
    assert small.format_help("prog") == FULL_HELP


def test_format_help_uses_parser_program(small):
    assert small.format_help() == FULL_HELP


def test_format_command_help(small):
    assert small.format_help("prog", "play") == (
        "Usage:\n"
        "  prog play [--log-level=<log-level>] [-q] [-o=<o>] <game directory>\n"
        "Global Options:\n"
        "  -v --version\n"
        "    Show version.\n"
        "\n"
        "Log Options:\n"
        "  --log-level=<log-level> [default=trace]\n"
        "    Log level.\n"
        "  -q\n"
        "    Quiet.\n"
        "  -o=<o>\n"
        "\n"
    )


def test_format_command_help_without_groups(small):
    assert small.format_help("prog", "fuzztest") == (
        "Usage:\n"
        "  prog fuzztest\n"
        "Global Options:\n"
        "  -v --version\n"
        "    Show version.\n"
        "\n"
    )


def test_format_help_unknown_command(small):
    assert small.format_help("prog", "nope") == "Command nope not found.\n" + FULL_HELP


def test_format_help_without_commands():
    parser = CommandLineParser()
    parser.global_options().add_option("h,help", Description("Show help."))
    assert parser.format_help("prog") == (
        "Global Options:\n" "  -h --help\n" "    Show help.\n" "\n"
    )


def test_format_command_usage_line(small):
    formatter = HelpFormatter(small)
    assert formatter.format_command(small.find_command("fuzztest")) == "fuzztest"
    assert formatter.format_command(small.find_command("play")).endswith(
        "<game directory>"
    )


def test_format_help_does_not_change_registry(small):
    before = str(small)
    small.format_help("prog")
    small.format_help("prog", "play")
    assert str(small) == before
    assert [group.name for group in small.groups] == ["Log Options"]


def test_render_help(small, capsys):
    small.render_help("decaf", "play")
    captured = capsys.readouterr()
    assert "Usage:" in captured.out
    assert "decaf play [--log-level=<log-level>] [-q] [-o=<o>] <game directory>" in (
        captured.out
    )
    assert "--log-level=<log-level> [default=trace]" in captured.out


def test_format_option_without_description(small):
    formatter = HelpFormatter(small)
    option = small.get_option("o", small.find_command("play"))
    assert formatter.format_option(option) == "  -o=<o>\n"
    described = small.get_option("q", small.find_command("play"))
    assert formatter.format_option(described) == "  -q\n    Quiet.\n"
