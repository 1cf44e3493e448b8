"""Markup scanner: attribute tags → SGR codes.

Markup syntax:

  - Opening tag: ``[`` + one or more specifiers + ``]``

        !        bold
        -        dim
        _        underline
        '        italic
        ^        reverse
        *        bright foreground
        C        foreground color letter (d k r g y b m c w)
        #RRGGBB  foreground true color
        :C       background color letter
        :#RRGGBB background true color

    Spaces between specifiers are ignored.

  - Closing tag: ``[/]``; ``[//]`` closes two levels, and so on.
  - ``\\[`` and ``\\\\`` are a literal ``[`` and ``\\``.

Tags nest up to four levels deep and must be balanced. Nesting is
additive: a nested tag can't cancel an active attribute. The SGR code of
any tag starts with a reset.

Examples:

    This is [r]red text[/]
    Error: [!*r]critical failure[/]!
    [y:b]Yellow on blue background[/]
    [#ff8800]orange[/] or, with a basic fallback, [#ff8800 y]orange[/]
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional, Union

from mint.colors import TRUE_COLOR_MARKER, resolve_basic, resolve_hex
from mint.errors import ErrorKind, MarkupError
from mint.frames import AttrStack, Frame
from mint.sgr import EMIT_ALL, EMIT_BASIC, EMIT_NOTHING, EmitMode, sgr_code
from mint.terminal import TerminalSupport, terminal_support


class When(Enum):
    """When to emit SGR codes."""

    # When the connected terminal seems to support it
    AUTO = "auto"

    # Always, even if the connected terminal doesn't seem to support it
    ALWAYS = "always"

    # Never, even if the connected terminal seems to support it
    NEVER = "never"


_FLAG_SPECIFIERS = {
    "!": "bold",
    "-": "dim",
    "_": "underline",
    "'": "italic",
    "^": "reverse",
    "*": "bright",
}

BG_INTRODUCER = ":"
CLOSING_SLASH = "/"

# `#` + six hex digits
TRUE_COLOR_SPEC_LEN = 7

# Run of characters copied verbatim
_LITERAL_RE = re.compile(r"[^\\\[]+")


def resolve_mode(
    when: Union[When, bool] = When.AUTO,
    support: Optional[TerminalSupport] = None,
) -> EmitMode:
    """Resolve ``when`` to what the emitter may produce.

    ``support`` is only consulted for ``When.AUTO``; when it's ``None``
    the cached terminal support level is used.
    """
    if isinstance(when, bool):
        when = When.ALWAYS if when else When.NEVER

    if when is When.ALWAYS:
        return EMIT_ALL

    if when is When.NEVER:
        return EMIT_NOTHING

    if support is None:
        support = terminal_support()

    if support >= TerminalSupport.TRUE_COLOR:
        return EMIT_ALL

    if support >= TerminalSupport.BASIC_COLOR:
        return EMIT_BASIC

    return EMIT_NOTHING


class Parser:
    """Single-pass markup scanner.

    Usage:
        Parser("[!r]error[/]", EMIT_ALL).render()
    """

    def __init__(self, text: str, mode: EmitMode = EMIT_ALL) -> None:
        self.text = text
        self.mode = mode

    def render(self) -> str:
        """Convert the whole text, raising ``MarkupError`` on syntax error."""
        self._at = 0
        self._out: list[str] = []
        self._stack = AttrStack()

        text = self.text
        end = len(text)

        while self._at < end:
            ch = text[self._at]

            if ch == "\\":
                self._parse_escape()
            elif ch == "[":
                if self._at + 1 < end and text[self._at + 1] == CLOSING_SLASH:
                    self._parse_closing_tag()
                else:
                    start = self._at
                    frame = self._parse_opening_tag().inherit(self._stack.top)
                    self._stack.push(frame, offset=start)
                    self._emit(frame)
            else:
                m = _LITERAL_RE.match(text, self._at)
                self._out.append(m.group(0))
                self._at = m.end()

        if len(self._stack) > 1:
            raise MarkupError(
                ErrorKind.UNBALANCED_OPENING_TAG, "Unbalanced opening tag", end
            )

        return "".join(self._out)

    def _emit(self, frame: Frame) -> None:
        code = sgr_code(frame, self.mode)
        if code:
            self._out.append(code)

    def _parse_escape(self) -> None:
        text = self.text
        at = self._at + 1

        if at >= len(text):
            raise MarkupError(
                ErrorKind.INCOMPLETE_ESCAPE,
                "Incomplete escape sequence at end of string",
                self._at,
            )

        ch = text[at]
        if ch != "\\" and ch != "[":
            raise MarkupError(
                ErrorKind.INVALID_ESCAPE, f"Invalid escape sequence `\\{ch}`", at, ch
            )

        self._out.append(ch)
        self._at = at + 1

    def _parse_closing_tag(self) -> None:
        """Parse ``[/...]`` and pop one frame per slash."""
        text = self.text
        start = self._at
        at = start + 1

        while at < len(text) and text[at] == CLOSING_SLASH:
            at += 1

        if at >= len(text) or text[at] != "]":
            raise MarkupError(
                ErrorKind.UNTERMINATED_CLOSING_TAG,
                "Expecting `]` to terminate the closing tag",
                at,
                text[at] if at < len(text) else None,
            )

        top = self._stack.pop(at - start - 1, offset=start)
        self._at = at + 1
        self._emit(top)

    def _parse_opening_tag(self) -> Frame:
        """Parse ``[...]`` and return the frame of its own specifiers."""
        text = self.text
        end = len(text)
        start = self._at
        at = start + 1
        attrs: dict[str, Any] = {}
        count = 0

        while at < end and text[at] != "]":
            ch = text[at]

            if ch == " ":
                at += 1
                continue

            count += 1

            if ch in _FLAG_SPECIFIERS:
                attrs[_FLAG_SPECIFIERS[ch]] = True
                at += 1
            elif ch == BG_INTRODUCER:
                at += 1
                if at < end and text[at] == TRUE_COLOR_MARKER:
                    attrs["bg_rgb"] = resolve_hex(text, at + 1)
                    at += TRUE_COLOR_SPEC_LEN
                else:
                    attrs["bg"] = resolve_basic(text, at)
                    at += 1
            elif ch == TRUE_COLOR_MARKER:
                attrs["fg_rgb"] = resolve_hex(text, at + 1)
                at += TRUE_COLOR_SPEC_LEN
            else:
                attrs["fg"] = resolve_basic(text, at)
                at += 1

        if at >= end:
            raise MarkupError(
                ErrorKind.UNTERMINATED_OPENING_TAG,
                "Expecting `]` to terminate the opening tag",
                at,
            )

        if count == 0:
            raise MarkupError(ErrorKind.EMPTY_OPENING_TAG, "Empty opening tag", start)

        self._at = at + 1
        return Frame(**attrs)


def mint(text: str, when: Union[When, bool] = When.AUTO) -> str:
    """Convert the attribute tags of ``text`` to SGR codes.

    With ``When.AUTO`` (default), codes are only emitted when standard
    output seems to support them: basic codes for a basic terminal, true
    color codes as well for a true color terminal. Without support, tags
    are removed. ``When.ALWAYS`` and ``When.NEVER`` (or ``True`` and
    ``False``) force either behavior. Syntax is validated in all modes.

    Raises ``MarkupError`` on a markup syntax error.
    """
    return Parser(text, resolve_mode(when)).render()
