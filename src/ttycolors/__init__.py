"""ttycolors package.

Decide whether a process should emit colored terminal output, and render
styled spans of text that fall back to plain text when it should not.

Modules:
- ttycolors.lib.core: color level, use-color state, platform hooks, config
- ttycolors.lib.style: StyleSpec / StyledValue rendering
- ttycolors.ui_utils.terminal: named styles (red_bold, gray, ...)
- ttycolors.cli: CLI entry point package (ttycolors)
- ttycolors.lib._util: Internal helpers (environment signals, SGR encoding)
"""

from .lib._util.ansi import Ansi256, Color, Rgb
from .lib.core.level import ColorLevel
from .lib.core.platform import enable_platform_color_support
from .lib.core.state import (
    ColorState,
    force_color,
    get_color_level,
    is_stderr_tty,
    is_stdout_tty,
    set_use_color,
    use_color,
)
from .lib.style import StyledValue, StyleRenderError, StyleSpec, style
from .ui_utils.terminal import (
    black_on_green,
    blue,
    bold,
    cyan,
    cyan_bold,
    cyan_with_underline,
    dimmed_gray,
    gray,
    green,
    green_bold,
    intense_blue,
    italic,
    italic_bold,
    italic_gray,
    magenta,
    red,
    red_bold,
    white_bold_on_red,
    white_on_red,
    yellow,
    yellow_bold,
    yes_no,
)

__all__ = [
    "Ansi256",
    "Color",
    "ColorLevel",
    "ColorState",
    "Rgb",
    "StyleRenderError",
    "StyleSpec",
    "StyledValue",
    "black_on_green",
    "blue",
    "bold",
    "cyan",
    "cyan_bold",
    "cyan_with_underline",
    "dimmed_gray",
    "enable_platform_color_support",
    "force_color",
    "get_color_level",
    "gray",
    "green",
    "green_bold",
    "intense_blue",
    "is_stderr_tty",
    "is_stdout_tty",
    "italic",
    "italic_bold",
    "italic_gray",
    "magenta",
    "red",
    "red_bold",
    "set_use_color",
    "style",
    "use_color",
    "white_bold_on_red",
    "white_on_red",
    "yellow",
    "yellow_bold",
    "yes_no",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("ttycolors")
except Exception:
    __version__ = "unknown"
