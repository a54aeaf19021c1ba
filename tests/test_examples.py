import importlib.util
from pathlib import Path

import pytest

DECAF_PATH = Path(__file__).resolve().parent.parent / "examples" / "decaf.py"


@pytest.fixture(scope="module")
def decaf():
    spec = importlib.util.spec_from_file_location("decaf_example", DECAF_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_decaf_play(decaf, capsys):
    assert decaf.main(["decaf", "play", "--sys-path=/sys", "/games/x"]) == 0
    captured = capsys.readouterr()
    assert "sys-path: /sys" in captured.out
    assert "play game dir: /games/x" in captured.out


def test_decaf_version(decaf, capsys):
    assert decaf.main(["decaf", "-v"]) == 0
    assert "Decaf Emulator version 0.0.1" in capsys.readouterr().out


def test_decaf_without_arguments_prints_help(decaf, capsys):
    assert decaf.main(["decaf"]) == 0
    captured = capsys.readouterr()
    assert "Usage:" in captured.out
    assert "decaf fuzztest" in captured.out
    assert "System Options:" in captured.out


def test_decaf_help_for_command(decaf, capsys):
    assert decaf.main(["decaf", "help", "hwtest"]) == 0
    captured = capsys.readouterr()
    assert "decaf hwtest [--jit] [--jit-debug]" in captured.out
    assert "System Options:" not in captured.out


def test_decaf_missing_argument(decaf, capsys):
    assert decaf.main(["decaf", "play"]) == 1
    assert "game directory" in capsys.readouterr().err


def test_decaf_log_level(decaf):
    parser = decaf.build_parser()
    state = parser.parse(["decaf", "hwtest", "--log-level", "debug"])
    assert state.get("log-level") == "debug"
    assert parser.parse(["decaf", "hwtest"]).get("log-level") == "trace"
