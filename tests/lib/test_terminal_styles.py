# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the named style helpers."""

import unittest

from test_utils import colors_off, colors_on

import ttycolors
from ttycolors.ui_utils import terminal
from ttycolors.ui_utils.terminal import STYLES, yes_no

ESC = "\x1b"
R = f"{ESC}[0m"

EXPECTED_STARTS = {
    "bold": f"{R}{ESC}[1m",
    "red_bold": f"{R}{ESC}[1m{ESC}[31m",
    "green_bold": f"{R}{ESC}[1m{ESC}[32m",
    "yellow_bold": f"{R}{ESC}[1m{ESC}[33m",
    "cyan_bold": f"{R}{ESC}[1m{ESC}[36m",
    "italic": f"{R}{ESC}[3m",
    "italic_gray": f"{R}{ESC}[3m{ESC}[38;5;8m",
    "italic_bold": f"{R}{ESC}[1m{ESC}[3m",
    "white_on_red": f"{R}{ESC}[37m{ESC}[41m",
    "black_on_green": f"{R}{ESC}[30m{ESC}[42m",
    "white_bold_on_red": f"{R}{ESC}[1m{ESC}[37m{ESC}[41m",
    "cyan_with_underline": f"{R}{ESC}[4m{ESC}[36m",
    "red": f"{R}{ESC}[31m",
    "green": f"{R}{ESC}[32m",
    "yellow": f"{R}{ESC}[33m",
    "blue": f"{R}{ESC}[34m",
    "magenta": f"{R}{ESC}[35m",
    "cyan": f"{R}{ESC}[36m",
    "gray": f"{R}{ESC}[38;5;245m",
    "dimmed_gray": f"{R}{ESC}[2m{ESC}[38;5;245m",
    "intense_blue": f"{R}{ESC}[38;5;12m",
}


class NamedStyleTests(unittest.TestCase):
    def test_every_style_is_covered(self) -> None:
        self.assertEqual(set(STYLES), set(EXPECTED_STARTS))

    def test_enabled_encoding(self) -> None:
        with colors_on():
            for name, make in STYLES.items():
                with self.subTest(style=name):
                    self.assertEqual(str(make("txt")), f"{EXPECTED_STARTS[name]}txt{R}")

    def test_disabled_is_plain(self) -> None:
        with colors_off():
            for name, make in STYLES.items():
                with self.subTest(style=name):
                    self.assertEqual(str(make("txt")), "txt")
                    self.assertEqual(str(make(12)), "12")

    def test_styles_are_exported_from_package(self) -> None:
        for name in STYLES:
            with self.subTest(style=name):
                self.assertIs(getattr(ttycolors, name), getattr(terminal, name))

    def test_yes_no(self) -> None:
        with colors_off():
            self.assertEqual(str(yes_no(True)), "yes")
            self.assertEqual(str(yes_no(False)), "no")
        with colors_on():
            self.assertEqual(str(yes_no(True)), f"{R}{ESC}[32myes{R}")
            self.assertEqual(str(yes_no(False)), f"{R}{ESC}[31mno{R}")
