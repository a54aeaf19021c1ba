# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODES = ("cli", "json")
LOG_MODE_ENV = "EXCMD_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_invocation() -> str:
    """Name to show in usage text: the installed script, else `python -m excmd`."""
    script = sys.argv[0]
    if shutil.which(script):
        return Path(script).name
    return "python -m excmd"


def running_in_container(cgroup_path: str = "/proc/1/cgroup") -> bool:
    try:
        content = Path(cgroup_path).read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def resolve_log_mode(mode: str | None = None) -> str:
    """
    Pick the console logging mode.

    An explicit `mode` wins, then `EXCMD_LOG_MODE`, then "json" inside a
    container and "cli" everywhere else.

    Raises:
        ValueError: If the chosen mode is not one of `LOG_MODES`.
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or (
        "json" if running_in_container() else "cli"
    )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode} (expected one of {', '.join(LOG_MODES)})")
    return mode


def _console_handler(mode: str, level: int) -> logging.Handler:
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    handler.setLevel(level)
    return handler


def _file_handler(filename: str, level: int, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(filename, "a", "UTF-8")
    handler.setLevel(level)
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> str:
    """
    Replace the root handlers with excmd's console handler and an optional file
    handler.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for structured
            logs. See `resolve_log_mode` for the fallback order.
        log_filename (str | None): Also log to this file when given.
        json_log_to_file (bool): Write JSON records to the file instead of text.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Returns:
        str: The mode that was installed.

    Raises:
        ValueError: If the mode is invalid.
    """
    mode = resolve_log_mode(mode)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(_console_handler(mode, console_log_level))
    if log_filename:
        root.addHandler(_file_handler(log_filename, file_log_level, json_log_to_file))

    logging.getLogger("excmd").debug("Logging initialized in '%s' mode.", mode)
    return mode
