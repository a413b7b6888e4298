"""Informational CLI commands: detected color support and config paths."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from ...lib.core.config import (
    get_color_mode as _get_color_mode,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
)
from ...lib.core.state import (
    force_color as _force_color,
    get_color_level as _get_color_level,
    is_stderr_tty as _is_stderr_tty,
    is_stdout_tty as _is_stdout_tty,
    use_color as _use_color,
)
from ...ui_utils.terminal import bold as _bold, gray as _gray, yes_no as _yes_no

ENV_VARS = ("FORCE_COLOR", "NO_COLOR", "TERM", "COLORTERM", "TMUX", "CI")


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (info, config)."""
    subparsers.add_parser("info", help="Show detected color level, flags and TTY state")
    subparsers.add_parser("config", help="Show config file location and search order")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle info and config commands.  Returns True if handled."""
    if args.cmd == "info":
        _print_info()
        return True
    if args.cmd == "config":
        _print_config()
        return True
    return False


def _printable(value: str) -> str:
    """Backslash-escape undecodable bytes so printing never fails."""
    return value.encode("utf-8", "backslashreplace").decode("utf-8")


def _print_info() -> None:
    print(f"{_bold('Color support:')}")
    print(f"- Use color: {_yes_no(_use_color())}")
    print(f"- FORCE_COLOR set: {_yes_no(_force_color())}")
    print(f"- Color level: {_get_color_level().name}")
    print(f"- stdout is a TTY: {_yes_no(_is_stdout_tty())}")
    print(f"- stderr is a TTY: {_yes_no(_is_stderr_tty())}")

    print()
    print(f"{_bold('Environment:')}")
    shown = False
    for var in ENV_VARS:
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(_printable(val))}")
            shown = True
    if not shown:
        print(f"- {_gray('(none of ' + ', '.join(ENV_VARS) + ' set)')}")


def _print_config() -> None:
    """Display config file location, search order and the color mode."""
    print("Configuration (read):")
    gcfg = _global_config_path()
    print(f"- Global config file: {_gray(gcfg)} (exists: {_yes_no(Path(gcfg).is_file())})")
    paths = _global_config_search_paths()
    if paths:
        print("- Global config search order:")
        for p in paths:
            print(f"  • {_gray(p)} (exists: {_yes_no(Path(p).is_file())})")
    print(f"- Color mode: {_get_color_mode()}")
