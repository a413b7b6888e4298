# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Environment signals that feed color decisions.

Everything here is a pure function of an environment mapping and a platform
string.  Nothing is cached; ``ttycolors.lib.core.state`` memoizes the
aggregate result.

Variables consulted
-------------------
- ``FORCE_COLOR``: non-empty value forces color on (https://force-color.org/)
- ``NO_COLOR``: non-empty value turns color off (https://no-color.org/)
- ``TERM``: terminal type, ``dumb`` means no color
- ``COLORTERM``: ``truecolor``/``24bit`` advertise 24-bit support
- ``TMUX``: set inside tmux sessions
- ``CI``: CI vendor identity

On POSIX, bytes that are not valid in the filesystem encoding reach
``os.environ`` as lone surrogates (``surrogateescape``).  Such a value is
"present" but has no usable text; callers get ``None`` from :func:`env_text`.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

# Platforms where reading the environment is unreliable (WebAssembly hosts).
RESTRICTED_PLATFORMS = frozenset({"emscripten", "wasi"})

KNOWN_CI_VENDORS = frozenset(
    {
        "TRAVIS",
        "CIRCLECI",
        "APPVEYOR",
        "GITLAB_CI",
        "GITHUB_ACTIONS",
        "BUILDKITE",
        "DRONE",
    }
)

TRUECOLOR_VALUES = frozenset({"truecolor", "24bit"})

DUMB_TERM = "dumb"


def _is_decodable(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def env_present(name: str, environ: Mapping[str, str] | None = None) -> bool:
    """Return True if *name* is set at all, even to an empty string."""
    env = os.environ if environ is None else environ
    return name in env


def env_flag(name: str, environ: Mapping[str, str] | None = None) -> bool:
    """Return True if *name* is set to a non-empty value.

    Undecodable values still count: only presence and length matter.
    """
    env = os.environ if environ is None else environ
    return bool(env.get(name))


def env_text(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the text of *name*, or None when unset or not decodable."""
    env = os.environ if environ is None else environ
    value = env.get(name)
    if value is None or not _is_decodable(value):
        return None
    return value


@dataclass(frozen=True)
class EnvSignals:
    """Snapshot of every environment input used by the color resolver."""

    force_color: bool = False
    no_color: bool = False
    term_present: bool = False
    term: str | None = None
    colorterm: str | None = None
    tmux: bool = False
    ci_present: bool = False
    ci: str | None = None
    platform: str = "linux"

    @property
    def is_restricted(self) -> bool:
        return self.platform in RESTRICTED_PLATFORMS

    @property
    def is_windows(self) -> bool:
        return self.platform == "win32"

    @property
    def ci_vendor_known(self) -> bool:
        return self.ci is not None and self.ci in KNOWN_CI_VENDORS

    @property
    def ci_undecodable(self) -> bool:
        return self.ci_present and self.ci is None


def read_env_signals(
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> EnvSignals:
    """Read all color-related signals from *environ* (default ``os.environ``).

    *platform* defaults to ``sys.platform``.
    """
    env = os.environ if environ is None else environ
    return EnvSignals(
        force_color=env_flag("FORCE_COLOR", env),
        no_color=env_flag("NO_COLOR", env),
        term_present=env_present("TERM", env),
        term=env_text("TERM", env),
        colorterm=env_text("COLORTERM", env),
        tmux=env_present("TMUX", env),
        ci_present=env_present("CI", env),
        ci=env_text("CI", env),
        platform=sys.platform if platform is None else platform,
    )
