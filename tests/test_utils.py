import io
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from ttycolors.lib.core import state as state_mod
from ttycolors.lib.core.state import ColorState


class FakeTTY(io.StringIO):
    """A StringIO that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


@contextmanager
def color_state(
    environ: Mapping[str, str] | None = None,
    *,
    platform: str = "linux",
    stdout=None,
    stderr=None,
) -> Iterator[ColorState]:
    """Install a fresh process-wide ColorState built from *environ*.

    The previous state is restored on exit, so tests never leak flag
    overrides into each other.
    """
    previous = state_mod.get_state()
    fresh = ColorState(
        environ=dict(environ or {}),
        platform=platform,
        stdout=stdout if stdout is not None else io.StringIO(),
        stderr=stderr if stderr is not None else io.StringIO(),
    )
    state_mod.reset_state(fresh)
    try:
        yield fresh
    finally:
        state_mod.reset_state(previous)


@contextmanager
def colors_on() -> Iterator[ColorState]:
    with color_state() as st:
        st.set_use_color(True)
        yield st


@contextmanager
def colors_off() -> Iterator[ColorState]:
    with color_state() as st:
        st.set_use_color(False)
        yield st
