"""Color specifier resolvers.

Two kinds of colors can appear in a tag:
  - Basic palette letter (``r``, ``:b``, ...) → SGR color offset
  - True color (``#1e90ff``, ``:#000000``) → 24-bit RGB triple
"""

from __future__ import annotations

from typing import NamedTuple

from mint.errors import ErrorKind, MarkupError


# ── Basic palette ─────────────────────────────────────────────────────────

# Letter → offset added to 30 (fg), 90 (bright fg) or 40 (bg)
BASIC_COLORS: dict[str, int] = {
    "d": 9,  # default
    "k": 0,  # black
    "r": 1,  # red
    "g": 2,  # green
    "y": 3,  # yellow
    "b": 4,  # blue
    "m": 5,  # magenta
    "c": 6,  # cyan
    "w": 7,  # white
}

COLOR_NAMES: dict[str, str] = {
    "d": "default",
    "k": "black",
    "r": "red",
    "g": "green",
    "y": "yellow",
    "b": "blue",
    "m": "magenta",
    "c": "cyan",
    "w": "white",
}

TRUE_COLOR_MARKER = "#"
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class TrueColor(NamedTuple):
    """A 24-bit RGB color."""

    r: int
    g: int
    b: int


def resolve_basic(text: str, at: int) -> int:
    """Resolve the color letter at ``text[at]`` to its palette offset.

    Raises ``MarkupError`` if there's no letter left or if the letter is
    not part of the palette.
    """
    if at >= len(text):
        raise MarkupError(
            ErrorKind.UNKNOWN_COLOR_LETTER, "Expecting color letter", at
        )

    letter = text[at]
    try:
        return BASIC_COLORS[letter]
    except KeyError:
        raise MarkupError(
            ErrorKind.UNKNOWN_COLOR_LETTER,
            f"Unknown color letter `{letter}`",
            at,
            letter,
        ) from None


def resolve_hex(text: str, at: int) -> TrueColor:
    """Resolve the six hex digits starting at ``text[at]``.

    ``at`` is the position right after the ``#`` marker. Short forms such
    as ``#fff`` are rejected.
    """
    digits = text[at : at + 6]

    if len(digits) < 6:
        raise MarkupError(
            ErrorKind.INVALID_TRUE_COLOR,
            f"Expecting six hexadecimal digits after `#` (got {len(digits)})",
            at,
        )

    for i, ch in enumerate(digits):
        if ch not in HEX_DIGITS:
            raise MarkupError(
                ErrorKind.INVALID_TRUE_COLOR,
                f"Invalid hexadecimal digit `{ch}` in true color",
                at + i,
                ch,
            )

    return TrueColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
