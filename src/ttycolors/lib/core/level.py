# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Terminal color capability tiers and the rules that pick one."""

from __future__ import annotations

from enum import IntEnum

from .._util.env import DUMB_TERM, TRUECOLOR_VALUES, EnvSignals


class ColorLevel(IntEnum):
    """Palette a terminal supports, ordered from least to most capable."""

    NONE = 0
    BASIC = 1  # 16 colors
    EXTENDED = 2  # 256 colors
    TRUE_COLOR = 3  # 24-bit RGB


def resolve_color_level(signals: EnvSignals) -> ColorLevel:
    """Pick a :class:`ColorLevel` from *signals*.

    Rules are checked in order and the first match wins:

    1. restricted (WebAssembly) targets get ``NONE``
    2. ``NO_COLOR`` gives ``NONE`` unless ``FORCE_COLOR`` is set
    3. ``TERM=dumb`` gives ``NONE`` unless ``FORCE_COLOR`` is set
    4. Windows consoles get ``TRUE_COLOR``
    5. inside tmux: ``BASIC``
    6. known CI vendor: ``EXTENDED``; undecodable ``CI``: ``BASIC``
    7. ``COLORTERM=truecolor|24bit``: ``TRUE_COLOR``
    8. ``TERM`` ending in ``256``: ``EXTENDED``
    9. otherwise ``BASIC``
    """
    if signals.is_restricted:
        return ColorLevel.NONE

    if not signals.force_color:
        if signals.no_color:
            return ColorLevel.NONE
        if signals.term == DUMB_TERM:
            return ColorLevel.NONE

    term = signals.term if signals.term is not None else DUMB_TERM

    # Windows 10 build 14931+ consoles render 24-bit color.
    if signals.is_windows:
        return ColorLevel.TRUE_COLOR

    if signals.tmux:
        return ColorLevel.BASIC

    if signals.ci_present:
        if signals.ci_vendor_known:
            return ColorLevel.EXTENDED
        if signals.ci_undecodable:
            return ColorLevel.BASIC

    if signals.colorterm in TRUECOLOR_VALUES:
        return ColorLevel.TRUE_COLOR

    if term.endswith("-256color") or term.endswith("256"):
        return ColorLevel.EXTENDED

    return ColorLevel.BASIC
