# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-specific hooks: TTY checks and console ANSI enabling.

The color rules themselves are platform-agnostic; this module is the only
place that touches stream objects or the Windows console.
"""

from __future__ import annotations

import sys
from typing import IO, Any


def stream_isatty(stream: IO[Any] | None) -> bool:
    """Return True if *stream* is attached to an interactive terminal.

    Streams without ``isatty`` (or ``None``, as under ``pythonw``), closed
    streams and platforms that cannot answer all report False.
    """
    if stream is None or not hasattr(stream, "isatty"):
        return False
    try:
        return bool(stream.isatty())
    except (OSError, ValueError):
        return False


def enable_platform_color_support(platform: str | None = None) -> None:
    """Make the console interpret ANSI escape sequences.

    On Windows this switches the console into virtual-terminal mode via
    colorama.  Everywhere else terminals already understand escape
    sequences and this is a no-op.  Safe to call repeatedly.
    """
    if (sys.platform if platform is None else platform) != "win32":
        return

    from colorama import just_fix_windows_console

    just_fix_windows_console()
