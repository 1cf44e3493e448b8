"""Terminal capability detection.

The detected level is computed once per process and cached; concurrent
first callers wait for the same result.
"""

from __future__ import annotations

import logging
import os
import stat
import sys
import threading
from enum import IntEnum
from typing import Optional

log = logging.getLogger(__name__)


class TerminalSupport(IntEnum):
    """How much styling the connected terminal seems to support."""

    NONE = 0
    BASIC_COLOR = 1
    TRUE_COLOR = 2

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


TRUE_COLOR_VALUES = frozenset({"truecolor", "24bit"})

_cached: Optional[TerminalSupport] = None
_lock = threading.Lock()


def detect_terminal_support(stream=None, environ=None) -> TerminalSupport:
    """Probe ``stream`` (default: stdout) and the environment, uncached."""
    stream = stream if stream is not None else sys.stdout
    environ = environ if environ is not None else os.environ

    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return TerminalSupport.NONE

    if not os.isatty(fd):
        return TerminalSupport.NONE

    # A TTY which isn't a character device can't interpret SGR codes
    try:
        mode = os.fstat(fd).st_mode
    except OSError:
        mode = None

    if mode is not None and not stat.S_ISCHR(mode):
        return TerminalSupport.NONE

    if environ.get("TERM") == "dumb":
        return TerminalSupport.NONE

    if environ.get("COLORTERM", "").lower() in TRUE_COLOR_VALUES:
        return TerminalSupport.TRUE_COLOR

    return TerminalSupport.BASIC_COLOR


def terminal_support() -> TerminalSupport:
    """Cached terminal support level of standard output."""
    global _cached

    if _cached is not None:
        return _cached

    with _lock:
        if _cached is None:
            _cached = detect_terminal_support()
            log.debug("Terminal support: %s", _cached.label)
        return _cached


def has_terminal_support() -> bool:
    """Whether standard output seems to support at least basic colors."""
    return terminal_support() > TerminalSupport.NONE


def reset_terminal_support_cache() -> None:
    """Forget the cached level (used by tests)."""
    global _cached
    with _lock:
        _cached = None
