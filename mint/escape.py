"""Escaping helpers around the markup language.

  - ``escape()``: make arbitrary text safe to embed in markup
  - ``escape_ansi()``: strip rendered SGR sequences back to plain text
"""

from __future__ import annotations

import re

# Well-formed SGR sequences only; partial ones are kept as-is
SGR_RE = re.compile(r"\x1b\[[0-9;]*m")

_ESCAPE_TABLE = str.maketrans({"\\": "\\\\", "[": "\\["})


def escape(text: str) -> str:
    """Return ``text`` with ``\\`` doubled and ``[`` preceded by ``\\``.

    Apply exactly once: escaping twice doubles the escapes.
    """
    return text.translate(_ESCAPE_TABLE)


def escape_ansi(text: str) -> str:
    """Remove all SGR escape sequences from text."""
    return SGR_RE.sub("", text)


def visible_len(text: str) -> int:
    """Length of text excluding SGR codes."""
    return len(escape_ansi(text))
