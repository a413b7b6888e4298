"""Utility functions for logging."""

import os


def debug_enabled() -> bool:
    """Return True when ``TTYCOLORS_DEBUG`` is set to a non-empty value."""
    return bool(os.environ.get("TTYCOLORS_DEBUG"))


def _log_debug(message: str) -> None:
    """Append a simple debug line to the ttycolors log.

    Only active when ``TTYCOLORS_DEBUG`` is set, so library users pay
    nothing by default.  Useful to see which signal decided the color level
    when output looks wrong in some terminal or CI runner.

    Writes timestamped lines to ``state_root()/ttycolors.log``. Fully
    exception-safe: any IO error is silently ignored so this function never
    raises or affects callers.
    """
    if not debug_enabled():
        return
    try:
        import time

        from ..core.paths import state_root

        log_path = state_root() / "ttycolors.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
