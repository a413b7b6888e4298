# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Process-wide color state: the use-color flag and memoized detections.

All shared mutable state lives in one :class:`ColorState` instance.  The
module-level functions (``use_color``, ``get_color_level`` ...) delegate to a
default instance so callers never need to pass one around.

Initialization contract
-----------------------
- Each lazy value (flag, color level, stdout/stderr TTY) is computed at most
  once per instance.  Concurrent first callers block on the instance lock
  until the single evaluation has finished.
- The environment is read when a value is first needed, not at import time.
- :meth:`ColorState.set_use_color` overrides the flag for good; the
  environment is never consulted for it again.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Mapping
from typing import IO, Any, TypeVar

from .._util.env import EnvSignals, read_env_signals
from ..util.logging_utils import _log_debug
from .level import ColorLevel, resolve_color_level
from .platform import stream_isatty

T = TypeVar("T")

_UNSET: Any = object()


def initial_use_color(signals: EnvSignals) -> bool:
    """Derive the default use-color flag from *signals*.

    ``FORCE_COLOR`` dominates ``NO_COLOR``, mirroring the level resolver.
    Restricted targets start disabled and need an explicit opt-in.
    """
    if signals.is_restricted:
        return False
    if signals.force_color:
        return True
    return not signals.no_color


class ColorState:
    """Holder for the use-color flag and memoized color/TTY detections.

    Args:
        environ: Mapping to read signals from.  ``None`` means
            ``os.environ`` at the time of first use.
        platform: Platform string, default ``sys.platform``.
        stdout: Stream for :meth:`is_stdout_tty`, default ``sys.stdout``
            looked up on first use.
        stderr: Stream for :meth:`is_stderr_tty`, default ``sys.stderr``.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
        stdout: IO[Any] | None = None,
        stderr: IO[Any] | None = None,
    ) -> None:
        self._environ = environ
        self._platform = platform
        self._stdout = stdout
        self._stderr = stderr
        self._lock = threading.Lock()
        self._signals: EnvSignals = _UNSET
        self._use_color: bool = _UNSET
        self._color_level: ColorLevel = _UNSET
        self._stdout_tty: bool = _UNSET
        self._stderr_tty: bool = _UNSET

    def _once(
        self,
        attr: str,
        compute: Callable[[], T],
        on_init: Callable[[T], None] | None = None,
    ) -> T:
        value = getattr(self, attr)
        if value is not _UNSET:
            return value
        with self._lock:
            value = getattr(self, attr)
            created = value is _UNSET
            if created:
                value = compute()
                setattr(self, attr, value)
        # on_init may do I/O, so it runs after the lock is released.
        if created and on_init is not None:
            on_init(value)
        return value

    def _compute_signals(self) -> EnvSignals:
        # Called with the lock held.
        if self._signals is _UNSET:
            self._signals = read_env_signals(self._environ, self._platform)
        return self._signals

    def signals(self) -> EnvSignals:
        """Return the environment snapshot this state was derived from."""
        return self._once("_signals", self._compute_signals)

    def use_color(self) -> bool:
        """Whether styled values should emit escape sequences right now."""
        return self._once(
            "_use_color",
            lambda: initial_use_color(self._compute_signals()),
            lambda value: _log_debug(f"use_color initialized from environment: {value}"),
        )

    def set_use_color(self, value: bool) -> None:
        """Override the flag; wins over any environment-derived value."""
        with self._lock:
            self._use_color = bool(value)
        _log_debug(f"use_color set explicitly: {bool(value)}")

    def force_color(self) -> bool:
        """Whether ``FORCE_COLOR`` is set to a non-empty value."""
        return self.signals().force_color

    def color_level(self) -> ColorLevel:
        """Return the terminal's color tier, computed once."""
        return self._once(
            "_color_level",
            lambda: resolve_color_level(self._compute_signals()),
            lambda level: _log_debug(f"color level resolved: {level.name}"),
        )

    def is_stdout_tty(self) -> bool:
        return self._once(
            "_stdout_tty",
            lambda: stream_isatty(self._stdout if self._stdout is not None else sys.stdout),
        )

    def is_stderr_tty(self) -> bool:
        return self._once(
            "_stderr_tty",
            lambda: stream_isatty(self._stderr if self._stderr is not None else sys.stderr),
        )


_STATE = ColorState()
_STATE_LOCK = threading.Lock()


def get_state() -> ColorState:
    """Return the process-wide :class:`ColorState`."""
    return _STATE


def reset_state(state: ColorState | None = None) -> ColorState:
    """Replace the process-wide state and return the new instance.

    Without an argument a fresh :class:`ColorState` is installed, which
    re-reads the environment on next use.  Meant for tests and for hosts
    that rewrite their environment before producing output.
    """
    global _STATE
    with _STATE_LOCK:
        _STATE = state if state is not None else ColorState()
        return _STATE


def use_color() -> bool:
    """Return the current use-color flag."""
    return _STATE.use_color()


def set_use_color(value: bool) -> None:
    """Unconditionally set the use-color flag for the whole process."""
    _STATE.set_use_color(value)


def force_color() -> bool:
    """Return True if ``FORCE_COLOR`` is set to a non-empty value."""
    return _STATE.force_color()


def get_color_level() -> ColorLevel:
    """Return the memoized :class:`ColorLevel` for this process."""
    return _STATE.color_level()


def is_stdout_tty() -> bool:
    """Return True if standard output is an interactive terminal."""
    return _STATE.is_stdout_tty()


def is_stderr_tty() -> bool:
    """Return True if standard error is an interactive terminal."""
    return _STATE.is_stderr_tty()
