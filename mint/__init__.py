"""mint: terminal attribute markup to SGR codes.

    >>> from mint import mint, When
    >>> mint("[!r]error[/]", When.ALWAYS)
    '\\x1b[0;1;31merror\\x1b[0m'
"""

from __future__ import annotations

__version__ = "0.4.0"

from mint.colors import TrueColor
from mint.errors import ErrorKind, MarkupError
from mint.escape import escape, escape_ansi, visible_len
from mint.parser import When, mint, resolve_mode
from mint.terminal import TerminalSupport, has_terminal_support, terminal_support

__all__ = [
    "ErrorKind",
    "MarkupError",
    "TerminalSupport",
    "TrueColor",
    "When",
    "escape",
    "escape_ansi",
    "has_terminal_support",
    "mint",
    "resolve_mode",
    "terminal_support",
    "visible_len",
]
