#!/usr/bin/env python3

import argparse

from .. import __version__
from ..lib.core.config import (
    COLOR_MODES,
    ConfigError,
    apply_color_mode as _apply_color_mode,
    get_color_mode as _get_color_mode,
)
from ..lib.core.platform import enable_platform_color_support
from .commands import info, styles

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except Exception:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore

_COMMANDS = (info, styles)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ttycolors",
        description="ttycolors – inspect terminal color support and preview styles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Color is decided in this order:\n"
            "  --color / config 'color:' → FORCE_COLOR → NO_COLOR → stdout TTY\n"
            "\n"
            "Examples:\n"
            "  ttycolors info\n"
            "  ttycolors --color always styles --sample 'hello' --sample '日本語'\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"ttycolors {__version__}")
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="When to use color (default: config file 'color:' or auto)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for command in _COMMANDS:
        command.register(sub)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()

    # Enable bash completion if argcomplete is present and activated
    if argcomplete is not None:  # pragma: no cover - shell integration
        try:
            argcomplete.autocomplete(parser)  # type: ignore[attr-defined]
        except Exception:
            pass

    args = parser.parse_args(argv)

    try:
        mode = args.color if args.color is not None else _get_color_mode()
        _apply_color_mode(mode)
    except ConfigError as exc:
        raise SystemExit(f"ttycolors: {exc}") from exc

    enable_platform_color_support()

    for command in _COMMANDS:
        if command.dispatch(args):
            return
    parser.error(f"Unknown command: {args.cmd}")


if __name__ == "__main__":
    main()
