"""SGR (Select Graphic Rendition) code emitter.

Renders one ``Frame`` as a single control sequence:

    ESC [ 0 ; <attrs> ; <fg> ; <bg> m

The sequence always starts with a reset so that it fully describes the
frame on its own, whatever was active before.
"""

from __future__ import annotations

from dataclasses import dataclass

from mint.frames import Frame

ESC = "\033"
CSI = f"{ESC}["
SGR_END = "m"
RESET = f"{CSI}0{SGR_END}"

# Attribute codes, in emission order
_ATTRS = (
    ("bold", 1),
    ("dim", 2),
    ("italic", 3),
    ("underline", 4),
    ("reverse", 7),
)

FG_BASE = 30
FG_BRIGHT_BASE = 90
BG_BASE = 40
FG_EXTENDED = 38
BG_EXTENDED = 48


@dataclass(frozen=True)
class EmitMode:
    """What the emitter is allowed to produce for one conversion."""

    codes: bool = True
    true_color: bool = True


EMIT_NOTHING = EmitMode(codes=False, true_color=False)
EMIT_BASIC = EmitMode(codes=True, true_color=False)
EMIT_ALL = EmitMode(codes=True, true_color=True)


def sgr_params(frame: Frame, mode: EmitMode = EMIT_ALL) -> list[int]:
    """Numeric SGR parameters for ``frame``, reset included."""
    params = [0]

    for name, code in _ATTRS:
        if getattr(frame, name):
            params.append(code)

    # True color wins over basic when the terminal can show it
    if mode.true_color and frame.fg_rgb is not None:
        params.extend((FG_EXTENDED, 2, *frame.fg_rgb))
    elif frame.fg is not None:
        base = FG_BRIGHT_BASE if frame.bright else FG_BASE
        params.append(base + frame.fg)

    if mode.true_color and frame.bg_rgb is not None:
        params.extend((BG_EXTENDED, 2, *frame.bg_rgb))
    elif frame.bg is not None:
        params.append(BG_BASE + frame.bg)

    return params


def sgr_code(frame: Frame, mode: EmitMode = EMIT_ALL) -> str:
    """Render ``frame`` as an SGR sequence, or ``""`` if codes are off."""
    if not mode.codes:
        return ""
    return CSI + ";".join(str(p) for p in sgr_params(frame, mode)) + SGR_END
