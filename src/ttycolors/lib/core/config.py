# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Global config file lookup and the ``color`` setting."""

import os
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import APP_NAME, config_root
from .state import force_color, is_stdout_tty, set_use_color, use_color

COLOR_MODES = ("auto", "always", "never")


class ConfigError(ValueError):
    """The config file is unreadable or holds an invalid value."""


# ---------- Config file location ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If TTYCOLORS_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) <config_root>/config.yml (TTYCOLORS_CONFIG_DIR or the user config dir)
        2) sys.prefix/etc/ttycolors/config.yml
        3) /etc/ttycolors/config.yml
    """
    env_file = os.environ.get("TTYCOLORS_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / APP_NAME / "config.yml"
    etc_cfg = Path("/etc") / APP_NAME / "config.yml"
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (resolved based on search paths).

    An explicit TTYCOLORS_CONFIG_FILE is returned even if missing to make
    intent visible to the user.  Otherwise the first existing candidate wins;
    if none exist, the last candidate is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read {cfg_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path}: top level must be a mapping")
    return data


# ---------- Color mode ----------


def validate_color_mode(value: Any) -> str:
    mode = str(value).strip().lower()
    if mode not in COLOR_MODES:
        raise ConfigError(f"invalid color mode {value!r}; expected one of {', '.join(COLOR_MODES)}")
    return mode


def get_color_mode() -> str:
    """Return the ``color`` setting from the global config (default ``auto``)."""
    value = load_global_config().get("color")
    if value is None:
        return "auto"
    # YAML reads bare always/never as strings but yes/no as booleans.
    if isinstance(value, bool):
        return "always" if value else "never"
    return validate_color_mode(value)


def apply_color_mode(mode: str) -> bool:
    """Set the process use-color flag according to *mode* and return it.

    - ``always``: color on, regardless of environment or TTY
    - ``never``: color off
    - ``auto``: keep the environment-derived flag, but switch color off when
      stdout is not a terminal and ``FORCE_COLOR`` is not set
    """
    mode = validate_color_mode(mode)
    if mode == "always":
        set_use_color(True)
        return True
    if mode == "never":
        set_use_color(False)
        return False

    if not is_stdout_tty() and not force_color():
        set_use_color(False)
        return False
    return use_color()
