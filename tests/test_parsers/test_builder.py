import pytest

from excmd import (
    Allowed,
    CommandLineParser,
    DefaultValue,
    Description,
    ErrorKind,
    InvalidDefinitionError,
    InvalidOptionNameError,
    Optional,
    Value,
)
from excmd.parser.option import split_option_name
from excmd.parser.values import ChoiceValue, IntValue, StringValue


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("v", ("v", "")),
        ("version", ("", "version")),
        ("v,version", ("v", "version")),
        ("version,v", ("v", "version")),
        ("log-level", ("", "log-level")),
        ("sys_path", ("", "sys_path")),
        ("2d", ("", "2d")),
    ],
)
def test_split_option_name(spec, expected):
    assert split_option_name(spec) == expected


@pytest.mark.parametrize(
    "spec",
    ["", "ab,cd", ",", "a,b", "x,", "1", "-x", "--x", "long name", "v,-version"],
)
def test_split_option_name_invalid(spec):
    with pytest.raises(InvalidOptionNameError) as exc_info:
        split_option_name(spec)
    assert exc_info.value.kind is ErrorKind.INVALID_OPTION_NAME
    assert exc_info.value.name == spec


def test_add_option_invalid_name_raises_at_registration():
    parser = CommandLineParser()
    with pytest.raises(InvalidOptionNameError):
        parser.global_options().add_option("ab,cd")
    assert parser.global_group.options == []


def test_canonical_names():
    parser = CommandLineParser()
    parser.global_options().add_option("v,version").add_option("q").add_option(
        "level,l"
    )
    names = [option.name for option in parser.global_group.options]
    assert names == ["version", "q", "level"]
    level = parser.global_group.options[2]
    assert level.short_name == "l"
    assert level.long_name == "level"


def test_value_requiring_is_inferred_from_markers():
    parser = CommandLineParser()
    group = parser.add_option_group("Options")
    group.add_option("flag")
    group.add_option("typed", Value(int))
    group.add_option("defaulted", DefaultValue("trace"))
    group.add_option("restricted", Allowed(["a", "b"]))

    flag, typed, defaulted, restricted = group.group.options
    assert not flag.requires_value
    assert isinstance(typed.value_parser, IntValue)
    assert isinstance(defaulted.value_parser, StringValue)
    assert defaulted.get_default_value() == "trace"
    assert isinstance(restricted.value_parser, ChoiceValue)
    assert restricted.value_parser.allowed_values() == frozenset({"a", "b"})


def test_keyword_shortcuts_match_markers():
    parser = CommandLineParser()
    group = parser.add_option_group("Options")
    group.add_option("level", description="Level.", default=3, type=int)
    option = group.group.options[0]
    assert option.description == "Level."
    assert option.default == 3
    assert option.get_default_value() == "3"


def test_marker_and_keyword_for_same_concern():
    parser = CommandLineParser()
    with pytest.raises(InvalidDefinitionError):
        parser.global_options().add_option("x", Description("a"), description="b")


def test_repeated_marker():
    parser = CommandLineParser()
    with pytest.raises(InvalidDefinitionError):
        parser.global_options().add_option("x", Value(str), Value(int))


def test_unknown_marker():
    parser = CommandLineParser()
    with pytest.raises(InvalidDefinitionError):
        parser.global_options().add_option("x", "not a marker")


def test_optional_is_argument_only():
    parser = CommandLineParser()
    with pytest.raises(InvalidDefinitionError) as exc_info:
        parser.global_options().add_option("x", Optional())
    assert exc_info.value.kind is ErrorKind.INVALID_DEFINITION


def test_default_outside_allowed_values():
    parser = CommandLineParser()
    with pytest.raises(InvalidDefinitionError):
        parser.global_options().add_option(
            "level", DefaultValue("loud"), Allowed(["trace", "debug"])
        )


def test_allowed_values_must_be_a_collection():
    parser = CommandLineParser()
    group = parser.global_options()
    with pytest.raises(InvalidDefinitionError) as exc_info:
        group.add_option("mode", choices="fast")
    assert exc_info.value.name == "mode"
    with pytest.raises(InvalidDefinitionError):
        group.add_option("speed", Allowed({"fast": 1}))
    assert parser.get_option("mode") is None


def test_default_not_convertible():
    parser = CommandLineParser()
    with pytest.raises(InvalidDefinitionError):
        parser.global_options().add_option("count", Value(int), DefaultValue("many"))


def test_value_parser_instance_marker():
    parser = CommandLineParser()
    value_parser = IntValue(default=5)
    parser.global_options().add_option("count", Value(value_parser))
    assert parser.global_group.options[0].value_parser is value_parser

    with pytest.raises(InvalidDefinitionError):
        parser.global_options().add_option(
            "other", Value(IntValue()), DefaultValue(1)
        )


def test_add_command_validation():
    parser = CommandLineParser()
    parser.add_command("play")
    with pytest.raises(InvalidDefinitionError):
        parser.add_command("play")
    with pytest.raises(InvalidDefinitionError):
        parser.add_command("")
    with pytest.raises(InvalidDefinitionError):
        parser.add_command("--play")
    assert [command.name for command in parser.commands] == ["play"]


def test_arguments_keep_declaration_order():
    parser = CommandLineParser()
    command = parser.add_command("copy")
    command.add_argument("src").add_argument("dst", Optional()).add_argument(
        "count", Value(int)
    )
    arguments = command.command.arguments
    assert [arg.name for arg in arguments] == ["src", "dst", "count"]
    assert all(arg.positional for arg in arguments)
    assert [arg.optional for arg in arguments] == [False, True, False]
    assert isinstance(arguments[0].value_parser, StringValue)
    assert isinstance(arguments[2].value_parser, IntValue)


def test_duplicate_argument():
    parser = CommandLineParser()
    command = parser.add_command("copy").add_argument("src")
    with pytest.raises(InvalidDefinitionError):
        command.add_argument("src")
    with pytest.raises(InvalidOptionNameError):
        command.add_argument("")


def test_groups_are_shared_between_commands():
    parser = CommandLineParser()
    log = parser.add_option_group("Log Options").add_option("log-async")
    play = parser.add_command("play").add_option_group(log)
    hwtest = parser.add_command("hwtest").add_option_group(log.group)

    assert play.command.groups[0] is hwtest.command.groups[0]
    log.add_option("log-file")
    assert [option.name for option in hwtest.command.groups[0].options] == [
        "log-async",
        "log-file",
    ]


def test_attach_group_from_other_parser():
    parser = CommandLineParser()
    other = CommandLineParser()
    foreign = other.add_option_group("Foreign")
    with pytest.raises(InvalidDefinitionError):
        parser.add_command("play").add_option_group(foreign)
    with pytest.raises(InvalidDefinitionError):
        parser.add_command("hwtest").add_option_group(parser.global_options())


def test_str():
    parser = CommandLineParser()
    assert str(parser) == "CommandLineParser(groups=0, commands=0, options=0)"
    parser.global_options().add_option("v,version")
    parser.add_option_group("Log").add_option("log-async").add_option("log-file")
    parser.add_command("play")
    assert str(parser) == "CommandLineParser(groups=1, commands=1, options=3)"
    assert repr(parser) == str(parser)
