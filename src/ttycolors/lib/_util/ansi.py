# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Pure ANSI SGR encoding.

This module only knows how to spell colors and attributes as escape
sequences.  It never decides *whether* color should be used; that lives in
``ttycolors.lib.core.state``.  The sequences match what the ``termcolor``
crate emits, so output is byte-compatible with tools built on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ESC = "\x1b"
RESET = f"{ESC}[0m"

BOLD = f"{ESC}[1m"
DIMMED = f"{ESC}[2m"
ITALIC = f"{ESC}[3m"
UNDERLINE = f"{ESC}[4m"


class Color(Enum):
    """The eight core ANSI colors, valued by their SGR offset."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True)
class Ansi256:
    """A color from the 256-color palette."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"palette index out of range: {self.index}")


@dataclass(frozen=True)
class Rgb:
    """A 24-bit color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")


AnyColor = Color | Ansi256 | Rgb


def sgr(code: str) -> str:
    """Return the SGR escape sequence for parameter string *code*."""
    return f"{ESC}[{code}m"


def color_sequence(c: AnyColor, *, foreground: bool, intense: bool = False) -> str:
    """Encode *c* as a foreground or background SGR sequence.

    Intense core colors use the bright half of the 256-color palette
    (``38;5;9`` for intense red) rather than the ``9x`` codes.
    """
    if isinstance(c, Color):
        if intense:
            return sgr(f"{38 if foreground else 48};5;{c.value + 8}")
        return sgr(f"{3 if foreground else 4}{c.value}")
    if isinstance(c, Ansi256):
        return sgr(f"{38 if foreground else 48};5;{c.index}")
    if isinstance(c, Rgb):
        return sgr(f"{38 if foreground else 48};2;{c.r};{c.g};{c.b}")
    raise TypeError(f"not a color: {c!r}")
