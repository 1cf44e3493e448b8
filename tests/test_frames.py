"""Tests for frame inheritance and the bounded attribute stack."""

import pytest

from mint.colors import TrueColor
from mint.errors import ErrorKind, MarkupError
from mint.frames import DEFAULT_FRAME, MAX_FRAMES, AttrStack, Frame


class TestInherit:
    def test_flags_are_additive(self):
        merged = Frame(underline=True).inherit(Frame(bold=True))
        assert merged.bold and merged.underline

    def test_cannot_cancel_flags(self):
        merged = Frame(bold=False).inherit(Frame(bold=True, dim=True))
        assert merged.bold and merged.dim

    def test_colors_inherited(self):
        parent = Frame(fg=1, bg=4, fg_rgb=TrueColor(1, 2, 3))
        merged = Frame(italic=True).inherit(parent)
        assert merged.fg == 1
        assert merged.bg == 4
        assert merged.fg_rgb == TrueColor(1, 2, 3)

    def test_own_foreground_replaces_whole_channel(self):
        parent = Frame(fg=1, fg_rgb=TrueColor(1, 2, 3))
        merged = Frame(fg=2).inherit(parent)
        assert merged.fg == 2
        assert merged.fg_rgb is None

    def test_own_background_keeps_inherited_foreground(self):
        merged = Frame(bg_rgb=TrueColor(0, 0, 0)).inherit(Frame(fg=1, bg=2))
        assert merged.fg == 1
        assert merged.bg is None
        assert merged.bg_rgb == TrueColor(0, 0, 0)

    def test_inherit_returns_new_frame(self):
        own = Frame(dim=True)
        own.inherit(Frame(bold=True))
        assert own.bold is False


class TestAttrStack:
    def test_starts_with_default_frame(self):
        stack = AttrStack()
        assert len(stack) == 1
        assert stack.top == DEFAULT_FRAME

    def test_push_pop(self):
        stack = AttrStack()
        stack.push(Frame(bold=True))
        stack.push(Frame(dim=True))
        assert stack.top == Frame(dim=True)
        assert stack.pop() == Frame(bold=True)
        assert len(stack) == 2

    def test_pop_many(self):
        stack = AttrStack()
        for _ in range(4):
            stack.push(Frame(bold=True))
        assert stack.pop(4) == DEFAULT_FRAME
        assert len(stack) == 1

    def test_push_past_capacity(self):
        stack = AttrStack()
        for _ in range(MAX_FRAMES - 1):
            stack.push(Frame(bold=True))
        with pytest.raises(MarkupError) as exc_info:
            stack.push(Frame(dim=True), offset=9)
        assert exc_info.value.kind is ErrorKind.MAX_DEPTH_EXCEEDED
        assert exc_info.value.offset == 9
        assert len(stack) == MAX_FRAMES

    def test_cannot_pop_default_frame(self):
        stack = AttrStack()
        with pytest.raises(MarkupError) as exc_info:
            stack.pop()
        assert exc_info.value.kind is ErrorKind.UNBALANCED_CLOSING_TAG
        assert len(stack) == 1

    def test_cannot_pop_more_than_open(self):
        stack = AttrStack()
        stack.push(Frame(bold=True))
        with pytest.raises(MarkupError):
            stack.pop(2)
        assert len(stack) == 2
