# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for color level resolution and its rule precedence."""

import unittest

from ttycolors.lib._util.env import KNOWN_CI_VENDORS, read_env_signals
from ttycolors.lib.core.level import ColorLevel, resolve_color_level

UNDECODABLE = "\udcff"


def level(env: dict[str, str], platform: str = "linux") -> ColorLevel:
    return resolve_color_level(read_env_signals(env, platform))


class ColorLevelRuleTests(unittest.TestCase):
    def test_default_is_basic(self) -> None:
        self.assertEqual(level({}), ColorLevel.BASIC)

    def test_no_color_gives_none(self) -> None:
        self.assertEqual(level({"NO_COLOR": "1", "TERM": "xterm-256color"}), ColorLevel.NONE)

    def test_empty_no_color_is_ignored(self) -> None:
        self.assertEqual(level({"NO_COLOR": ""}), ColorLevel.BASIC)

    def test_dumb_terminal_gives_none(self) -> None:
        self.assertEqual(level({"TERM": "dumb"}), ColorLevel.NONE)

    def test_force_color_overrides_no_color(self) -> None:
        self.assertEqual(level({"FORCE_COLOR": "1", "NO_COLOR": "1"}), ColorLevel.BASIC)

    def test_force_color_overrides_dumb_terminal(self) -> None:
        self.assertEqual(level({"FORCE_COLOR": "1", "TERM": "dumb"}), ColorLevel.BASIC)

    def test_windows_is_truecolor(self) -> None:
        self.assertEqual(level({"TMUX": "1", "TERM": "xterm"}, "win32"), ColorLevel.TRUE_COLOR)

    def test_no_color_beats_windows(self) -> None:
        self.assertEqual(level({"NO_COLOR": "1"}, "win32"), ColorLevel.NONE)

    def test_tmux_is_basic_even_with_truecolor(self) -> None:
        env = {"TMUX": "", "COLORTERM": "truecolor", "TERM": "screen-256color"}
        self.assertEqual(level(env), ColorLevel.BASIC)

    def test_known_ci_vendors_are_extended(self) -> None:
        self.assertEqual(len(KNOWN_CI_VENDORS), 7)
        for vendor in KNOWN_CI_VENDORS:
            with self.subTest(vendor=vendor):
                self.assertEqual(level({"CI": vendor}), ColorLevel.EXTENDED)

    def test_known_ci_beats_colorterm(self) -> None:
        self.assertEqual(level({"CI": "DRONE", "COLORTERM": "24bit"}), ColorLevel.EXTENDED)

    def test_undecodable_ci_is_basic(self) -> None:
        self.assertEqual(level({"CI": UNDECODABLE, "COLORTERM": "truecolor"}), ColorLevel.BASIC)

    def test_unknown_ci_falls_through(self) -> None:
        self.assertEqual(level({"CI": "true", "COLORTERM": "truecolor"}), ColorLevel.TRUE_COLOR)
        self.assertEqual(level({"CI": "1"}), ColorLevel.BASIC)

    def test_colorterm_truecolor(self) -> None:
        self.assertEqual(level({"COLORTERM": "truecolor"}), ColorLevel.TRUE_COLOR)
        self.assertEqual(level({"COLORTERM": "24bit"}), ColorLevel.TRUE_COLOR)
        self.assertEqual(level({"COLORTERM": "yes"}), ColorLevel.BASIC)

    def test_term_256_suffixes(self) -> None:
        self.assertEqual(level({"TERM": "xterm-256color"}), ColorLevel.EXTENDED)
        self.assertEqual(level({"TERM": "vt256"}), ColorLevel.EXTENDED)
        self.assertEqual(level({"TERM": "xterm"}), ColorLevel.BASIC)

    def test_undecodable_term_is_not_dumb(self) -> None:
        self.assertEqual(level({"TERM": "dumb" + UNDECODABLE}), ColorLevel.BASIC)

    def test_restricted_targets_are_none(self) -> None:
        for platform in ("emscripten", "wasi"):
            with self.subTest(platform=platform):
                self.assertEqual(level({"FORCE_COLOR": "1"}, platform), ColorLevel.NONE)

    def test_unrelated_variables_do_not_matter(self) -> None:
        base = {"TERM": "xterm-256color"}
        noisy = {"HOME": "/root", "LANG": "C.UTF-8", **base, "PATH": "/usr/bin"}
        self.assertEqual(level(base), level(noisy))
        self.assertEqual(level(dict(reversed(list(noisy.items())))), ColorLevel.EXTENDED)

    def test_levels_are_ordered(self) -> None:
        self.assertLess(ColorLevel.NONE, ColorLevel.BASIC)
        self.assertLess(ColorLevel.BASIC, ColorLevel.EXTENDED)
        self.assertLess(ColorLevel.EXTENDED, ColorLevel.TRUE_COLOR)
