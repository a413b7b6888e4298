# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Lazily rendered styled text.

A :class:`StyledValue` pairs a :class:`StyleSpec` with any payload that can
be turned into text.  Nothing is rendered until the value is formatted or
written, and the use-color flag is read at that moment, so a value built
before ``set_use_color(False)`` still comes out plain.

Rendering builds the whole string (start sequence, payload, reset) before
anything reaches a sink, and short writes are continued until the reset has
been written.  A sink that fails or stalls is reported, never ignored.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import IO, Any

from ._util.ansi import (
    BOLD,
    DIMMED,
    ITALIC,
    RESET,
    UNDERLINE,
    AnyColor,
    color_sequence,
)
from .core.state import use_color


class StyleRenderError(OSError):
    """Raised when a sink rejects a styled render."""


@dataclass(frozen=True)
class StyleSpec:
    """Visual attributes for one span of text."""

    fg: AnyColor | None = None
    bg: AnyColor | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    intense: bool = False

    def start_sequence(self) -> str:
        """Return the escape sequence that switches these attributes on.

        Always begins with a reset so attributes from earlier output do not
        leak into this span.
        """
        parts = [RESET]
        if self.bold:
            parts.append(BOLD)
        if self.dimmed:
            parts.append(DIMMED)
        if self.italic:
            parts.append(ITALIC)
        if self.underline:
            parts.append(UNDERLINE)
        if self.fg is not None:
            parts.append(color_sequence(self.fg, foreground=True, intense=self.intense))
        if self.bg is not None:
            parts.append(color_sequence(self.bg, foreground=False, intense=self.intense))
        return "".join(parts)

    def wrap(self, text: str) -> str:
        return f"{self.start_sequence()}{text}{RESET}"


class StyledValue:
    """A payload plus the style to render it with."""

    __slots__ = ("spec", "payload")

    def __init__(self, payload: Any, spec: StyleSpec) -> None:
        self.payload = payload
        self.spec = spec

    def render(self, format_spec: str = "", *, enabled: bool | None = None) -> str:
        """Return the text for this value.

        *format_spec* is applied to the payload (so ``f"{red(x):>8}"`` pads
        the payload, not the escape codes).  *enabled* defaults to the
        process use-color flag, read once here.
        """
        if enabled is None:
            enabled = use_color()
        text = format(self.payload, format_spec)
        if not enabled:
            return text
        return self.spec.wrap(text)

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        return self.render(format_spec)

    def __repr__(self) -> str:
        return f"StyledValue({self.payload!r}, {self.spec!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledValue):
            return NotImplemented
        return self.payload == other.payload and self.spec == other.spec

    def __hash__(self) -> int:
        return hash((StyledValue, self.spec))

    def write_to(self, sink: IO[Any], *, enabled: bool | None = None) -> int:
        """Render this value and write all of it to *sink*.

        Text sinks receive ``str``; binary sinks (``BytesIO``, raw or
        buffered files, files opened in ``"b"`` mode) receive strict UTF-8
        bytes.  Raw sinks may accept fewer bytes than offered, so the rest
        is written until everything, reset sequence included, has gone out.
        Any failure from the sink, including payload text that cannot be
        encoded or a write that makes no progress, is raised as
        :class:`StyleRenderError`.

        Returns the number of characters (text sinks) or bytes (binary
        sinks) written.
        """
        text = self.render(enabled=enabled)
        try:
            if _is_binary_sink(sink):
                return _write_all(sink, text.encode("utf-8"))
            sink.write(text)
            return len(text)
        except StyleRenderError:
            raise
        except (OSError, UnicodeError, ValueError) as exc:
            raise StyleRenderError(f"failed to write styled text: {exc}") from exc


def _write_all(sink: IO[bytes], data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = sink.write(view)
        if not written:
            # None from a non-blocking raw sink, 0 from a full one.
            raise StyleRenderError(
                f"sink stopped accepting styled text with {len(view)} of {len(data)} bytes unwritten"
            )
        view = view[written:]
    return len(data)


def _is_binary_sink(sink: IO[Any]) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(sink, "mode", "")
    return isinstance(mode, str) and "b" in mode


def style(payload: Any, spec: StyleSpec) -> StyledValue:
    """Wrap *payload* with an arbitrary :class:`StyleSpec`."""
    return StyledValue(payload, spec)
