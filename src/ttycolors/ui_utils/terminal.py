# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Named terminal styles.

Each helper wraps its argument in a :class:`~ttycolors.lib.style.StyledValue`
with a fixed :class:`~ttycolors.lib.style.StyleSpec`.  The result renders as
plain text when color is off, so helpers can be used unconditionally::

    print(f"{red_bold('error')}: {path}")

Styles never adapt to :func:`~ttycolors.lib.core.state.get_color_level`.
``gray`` and friends use 256-color palette entries; callers targeting
16-color terminals should pick a core color instead.
"""

from collections.abc import Callable
from typing import Any

from ..lib._util.ansi import Ansi256, Color
from ..lib.style import StyledValue, StyleSpec, style

GRAY = Ansi256(245)
DARK_GRAY = Ansi256(8)

RED_BOLD = StyleSpec(fg=Color.RED, bold=True)
GREEN_BOLD = StyleSpec(fg=Color.GREEN, bold=True)
YELLOW_BOLD = StyleSpec(fg=Color.YELLOW, bold=True)
CYAN_BOLD = StyleSpec(fg=Color.CYAN, bold=True)
ITALIC = StyleSpec(italic=True)
ITALIC_GRAY = StyleSpec(fg=DARK_GRAY, italic=True)
ITALIC_BOLD = StyleSpec(bold=True, italic=True)
WHITE_ON_RED = StyleSpec(fg=Color.WHITE, bg=Color.RED)
BLACK_ON_GREEN = StyleSpec(fg=Color.BLACK, bg=Color.GREEN)
WHITE_BOLD_ON_RED = StyleSpec(fg=Color.WHITE, bg=Color.RED, bold=True)
CYAN_UNDERLINE = StyleSpec(fg=Color.CYAN, underline=True)
BOLD = StyleSpec(bold=True)
DIMMED_GRAY = StyleSpec(fg=GRAY, dimmed=True)
INTENSE_BLUE = StyleSpec(fg=Color.BLUE, intense=True)


def _fg(c: Color | Ansi256) -> StyleSpec:
    return StyleSpec(fg=c)


def bold(value: Any) -> StyledValue:
    return style(value, BOLD)


def red_bold(value: Any) -> StyledValue:
    """Bold red, for errors."""
    return style(value, RED_BOLD)


def green_bold(value: Any) -> StyledValue:
    """Bold green, for success."""
    return style(value, GREEN_BOLD)


def yellow_bold(value: Any) -> StyledValue:
    """Bold yellow, for warnings."""
    return style(value, YELLOW_BOLD)


def cyan_bold(value: Any) -> StyledValue:
    return style(value, CYAN_BOLD)


def italic(value: Any) -> StyledValue:
    return style(value, ITALIC)


def italic_gray(value: Any) -> StyledValue:
    """Italic in palette color 8, for secondary notes."""
    return style(value, ITALIC_GRAY)


def italic_bold(value: Any) -> StyledValue:
    return style(value, ITALIC_BOLD)


def white_on_red(value: Any) -> StyledValue:
    """Reverse-video error banner."""
    return style(value, WHITE_ON_RED)


def black_on_green(value: Any) -> StyledValue:
    """Reverse-video success banner."""
    return style(value, BLACK_ON_GREEN)


def white_bold_on_red(value: Any) -> StyledValue:
    return style(value, WHITE_BOLD_ON_RED)


def cyan_with_underline(value: Any) -> StyledValue:
    """Underlined cyan, for links and paths."""
    return style(value, CYAN_UNDERLINE)


def red(value: Any) -> StyledValue:
    return style(value, _fg(Color.RED))


def green(value: Any) -> StyledValue:
    return style(value, _fg(Color.GREEN))


def yellow(value: Any) -> StyledValue:
    return style(value, _fg(Color.YELLOW))


def blue(value: Any) -> StyledValue:
    return style(value, _fg(Color.BLUE))


def magenta(value: Any) -> StyledValue:
    return style(value, _fg(Color.MAGENTA))


def cyan(value: Any) -> StyledValue:
    return style(value, _fg(Color.CYAN))


def gray(value: Any) -> StyledValue:
    """Return *value* in gray (palette 245)."""
    return style(value, _fg(GRAY))


def dimmed_gray(value: Any) -> StyledValue:
    """Dimmed gray, for muted detail."""
    return style(value, DIMMED_GRAY)


def intense_blue(value: Any) -> StyledValue:
    """Bright blue accent."""
    return style(value, INTENSE_BLUE)


def yes_no(value: bool) -> StyledValue:
    """Return green ``"yes"`` or red ``"no"`` based on *value*."""
    return green("yes") if value else red("no")


STYLES: dict[str, Callable[[Any], StyledValue]] = {
    "bold": bold,
    "red_bold": red_bold,
    "green_bold": green_bold,
    "yellow_bold": yellow_bold,
    "cyan_bold": cyan_bold,
    "italic": italic,
    "italic_gray": italic_gray,
    "italic_bold": italic_bold,
    "white_on_red": white_on_red,
    "black_on_green": black_on_green,
    "white_bold_on_red": white_bold_on_red,
    "cyan_with_underline": cyan_with_underline,
    "red": red,
    "green": green,
    "yellow": yellow,
    "blue": blue,
    "magenta": magenta,
    "cyan": cyan,
    "gray": gray,
    "dimmed_gray": dimmed_gray,
    "intense_blue": intense_blue,
}
