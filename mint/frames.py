"""Attribute frames and the bounded attribute stack."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from mint.colors import TrueColor
from mint.errors import ErrorKind, MarkupError


# Default frame + four nested tags
MAX_FRAMES = 5


@dataclass(frozen=True)
class Frame:
    """Resolved style of one nesting level."""

    bold: bool = False
    dim: bool = False
    underline: bool = False
    italic: bool = False
    reverse: bool = False
    bright: bool = False

    # Basic palette offsets (see colors.BASIC_COLORS)
    fg: Optional[int] = None
    bg: Optional[int] = None

    fg_rgb: Optional[TrueColor] = None
    bg_rgb: Optional[TrueColor] = None

    @property
    def has_fg(self) -> bool:
        return self.fg is not None or self.fg_rgb is not None

    @property
    def has_bg(self) -> bool:
        return self.bg is not None or self.bg_rgb is not None

    def inherit(self, parent: Frame) -> Frame:
        """Return this frame with every unset attribute taken from ``parent``.

        Flags are additive. Colors merge per channel: if this frame sets a
        foreground color of any kind it keeps its own foreground only,
        otherwise it takes both foreground values of ``parent`` (same for
        the background).
        """
        merged = replace(
            self,
            bold=self.bold or parent.bold,
            dim=self.dim or parent.dim,
            underline=self.underline or parent.underline,
            italic=self.italic or parent.italic,
            reverse=self.reverse or parent.reverse,
            bright=self.bright or parent.bright,
        )

        if not self.has_fg:
            merged = replace(merged, fg=parent.fg, fg_rgb=parent.fg_rgb)

        if not self.has_bg:
            merged = replace(merged, bg=parent.bg, bg_rgb=parent.bg_rgb)

        return merged


DEFAULT_FRAME = Frame()


class AttrStack:
    """Fixed-capacity stack of frames.

    Slot 0 always holds the default frame. The stack never grows past
    ``MAX_FRAMES`` and never pops its default frame.
    """

    def __init__(self, capacity: int = MAX_FRAMES) -> None:
        self._slots: list[Frame] = [DEFAULT_FRAME] * capacity
        self._len = 1

    def __len__(self) -> int:
        return self._len

    @property
    def top(self) -> Frame:
        return self._slots[self._len - 1]

    def push(self, frame: Frame, offset: int = 0) -> None:
        if self._len >= len(self._slots):
            raise MarkupError(
                ErrorKind.MAX_DEPTH_EXCEEDED, "Maximum nesting depth exceeded", offset
            )
        self._slots[self._len] = frame
        self._len += 1

    def pop(self, count: int = 1, offset: int = 0) -> Frame:
        """Pop ``count`` frames and return the new top frame."""
        if count >= self._len:
            raise MarkupError(
                ErrorKind.UNBALANCED_CLOSING_TAG, "Unbalanced closing tag", offset
            )
        self._len -= count
        return self.top
