"""Parse colour settings written in the ``LS_COLORS`` syntax."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional

from ansikit.style import (
    NO_EFFECTS,
    Ansi256Color,
    AnsiColor,
    Color,
    Effects,
    RgbColor,
    Style,
)

_ANSI = list(AnsiColor)

_FOREGROUND: Dict[int, AnsiColor] = {
    **{30 + offset: color for offset, color in enumerate(_ANSI[:8])},
    **{90 + offset: color for offset, color in enumerate(_ANSI[8:])},
}
_BACKGROUND: Dict[int, AnsiColor] = {
    **{40 + offset: color for offset, color in enumerate(_ANSI[:8])},
    **{100 + offset: color for offset, color in enumerate(_ANSI[8:])},
}

_SET_EFFECT: Dict[int, Effects] = {
    1: Effects.BOLD,
    2: Effects.DIMMED,
    3: Effects.ITALIC,
    4: Effects.UNDERLINE,
    5: Effects.BLINK,
    6: Effects.BLINK,
    7: Effects.INVERT,
    8: Effects.HIDDEN,
    9: Effects.STRIKETHROUGH,
}
_CLEAR_EFFECT: Dict[int, Effects] = {
    22: Effects.BOLD | Effects.DIMMED,
    23: Effects.ITALIC,
    24: Effects.UNDERLINE,
    25: Effects.BLINK,
    27: Effects.INVERT,
    28: Effects.HIDDEN,
    29: Effects.STRIKETHROUGH,
}


def _parse_byte(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= 255 else None


def _pop(parts: Deque[int]) -> Optional[int]:
    return parts.popleft() if parts else None


def _extended_color(parts: Deque[int]) -> Optional[Color]:
    """Read the rest of a ``38``/``48``/``58`` sequence; None means it was malformed."""
    kind = _pop(parts)
    first = _pop(parts)
    if kind == 5 and first is not None:
        return Ansi256Color(first)
    if kind == 2 and first is not None:
        green = _pop(parts)
        blue = _pop(parts)
        if green is not None and blue is not None:
            return RgbColor(first, green, blue)
    return None


def parse(code: str) -> Optional[Style]:
    """Parse an ``LS_COLORS`` style description into a Style.

    Returns None for an empty or reset-only description, or when any
    field is not a number in 0..=255.
    """
    if code in ("", "0", "00"):
        return None

    parts: Deque[int] = deque()
    for field in code.split(";"):
        value = _parse_byte(field)
        if value is None:
            return None
        parts.append(value)

    effects = NO_EFFECTS
    fg_color: Optional[Color] = None
    bg_color: Optional[Color] = None
    underline_color: Optional[Color] = None

    while parts:
        part = parts.popleft()
        if part == 0:
            effects = NO_EFFECTS
            fg_color = bg_color = underline_color = None
        elif part in _SET_EFFECT:
            effects |= _SET_EFFECT[part]
        elif part in _CLEAR_EFFECT:
            effects &= ~_CLEAR_EFFECT[part]
        elif part in _FOREGROUND:
            fg_color = _FOREGROUND[part]
        elif part in _BACKGROUND:
            bg_color = _BACKGROUND[part]
        elif part in (38, 48, 58):
            color = _extended_color(parts)
            if color is None:
                break
            if part == 38:
                fg_color = color
            elif part == 48:
                bg_color = color
            else:
                underline_color = color
        elif part == 39:
            fg_color = None
        elif part == 49:
            bg_color = None
        elif part == 59:
            underline_color = None

    return Style(
        fg_color=fg_color,
        bg_color=bg_color,
        underline_color=underline_color,
        effects=effects,
    )