# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config and state directories."""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "ttycolors"


def config_root() -> Path:
    """
    Base directory for configuration.

    Priority:
      1. TTYCOLORS_CONFIG_DIR
      2. platform user config dir (~/.config/ttycolors on Linux)
    """
    env = os.getenv("TTYCOLORS_CONFIG_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. TTYCOLORS_STATE_DIR
      2. platform user data dir (~/.local/share/ttycolors on Linux)
    """
    env = os.getenv("TTYCOLORS_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_data_dir(APP_NAME))
