"""``styles`` command: print samples in every named style."""

from __future__ import annotations

import argparse

from rich.cells import cell_len

from ...ui_utils.terminal import STYLES

DEFAULT_SAMPLE = "The quick brown fox"


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p_styles = subparsers.add_parser("styles", help="Render samples with every named style")
    p_styles.add_argument(
        "--sample",
        dest="samples",
        action="append",
        default=None,
        help=f"Text to render, repeatable (default: {DEFAULT_SAMPLE!r})",
    )


def dispatch(args: argparse.Namespace) -> bool:
    if args.cmd != "styles":
        return False
    for line in style_lines(args.samples or [DEFAULT_SAMPLE]):
        print(line)
    return True


def _pad(text: str, width: int) -> str:
    """Pad *text* to *width* terminal cells (wide CJK/emoji count as 2)."""
    return text + " " * max(0, width - cell_len(text))


def style_lines(samples: list[str]) -> list[str]:
    """Return one line per style with every sample rendered in it.

    Samples are padded to a common cell width before styling, so columns
    line up whether or not escape sequences are emitted.
    """
    name_width = max(len(name) for name in STYLES)
    sample_width = max(cell_len(s) for s in samples)
    lines = []
    for name, make in STYLES.items():
        cells = "  ".join(str(make(_pad(s, sample_width))) for s in samples)
        lines.append(f"{name:<{name_width}}  {cells}")
    return lines
