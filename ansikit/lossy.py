"""Lossy conversion between 4-bit, 256-colour and RGB colours."""

from __future__ import annotations

import itertools
from typing import Tuple

from ansikit.palette import Palette, distance
from ansikit.style import Ansi256Color, AnsiColor, Color, RgbColor

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
_FIRST_EXTENDED = 16


def _build_xterm_colors() -> Tuple[RgbColor, ...]:
    # The first 16 entries are placeholders; the palette supplies those colours.
    placeholders = [RgbColor(0, 0, 0)] * _FIRST_EXTENDED
    cube = [
        RgbColor(r, g, b)
        for r, g, b in itertools.product(_CUBE_LEVELS, repeat=3)
    ]
    grays = [RgbColor(level, level, level) for level in range(8, 239, 10)]
    return tuple(placeholders + cube + grays)


XTERM_COLORS = _build_xterm_colors()


def _unknown(color: object) -> TypeError:
    return TypeError(f"not a colour: {color!r}")


def color_to_rgb(color: Color, palette: Palette) -> RgbColor:
    """Lossily convert any colour to RGB, using ``palette`` for 4-bit colours."""
    if isinstance(color, AnsiColor):
        return ansi_to_rgb(color, palette)
    if isinstance(color, Ansi256Color):
        return xterm_to_rgb(color, palette)
    if isinstance(color, RgbColor):
        return color
    raise _unknown(color)


def color_to_xterm(color: Color) -> Ansi256Color:
    """Lossily convert any colour to the 256-colour palette."""
    if isinstance(color, AnsiColor):
        return Ansi256Color.from_ansi(color)
    if isinstance(color, Ansi256Color):
        return color
    if isinstance(color, RgbColor):
        return rgb_to_xterm(color)
    raise _unknown(color)


def color_to_ansi(color: Color, palette: Palette) -> AnsiColor:
    """Lossily convert any colour to a 4-bit colour, matching against ``palette``."""
    if isinstance(color, AnsiColor):
        return color
    if isinstance(color, Ansi256Color):
        return xterm_to_ansi(color, palette)
    if isinstance(color, RgbColor):
        return rgb_to_ansi(color, palette)
    raise _unknown(color)


def ansi_to_rgb(color: AnsiColor, palette: Palette) -> RgbColor:
    """Look up a 4-bit colour in ``palette``."""
    return palette.get(color)


def xterm_to_rgb(color: Ansi256Color, palette: Palette) -> RgbColor:
    """Convert a 256-colour index to RGB, taking the first 16 from ``palette``."""
    rgb = palette.rgb_from_index(color.index)
    if rgb is not None:
        return rgb
    return XTERM_COLORS[color.index]


def xterm_to_ansi(color: Ansi256Color, palette: Palette) -> AnsiColor:
    """Convert a 256-colour index to the nearest 4-bit colour in ``palette``."""
    ansi = color.into_ansi()
    if ansi is not None:
        return ansi
    return palette.find_match(XTERM_COLORS[color.index])


def rgb_to_ansi(color: RgbColor, palette: Palette) -> AnsiColor:
    """Convert an RGB colour to the nearest 4-bit colour in ``palette``."""
    return palette.find_match(color)


def rgb_to_xterm(color: RgbColor) -> Ansi256Color:
    """Convert an RGB colour to the nearest entry of the fixed 256-colour palette."""
    best = min(
        range(_FIRST_EXTENDED, len(XTERM_COLORS)),
        key=lambda i: distance(color, XTERM_COLORS[i]),
    )
    return Ansi256Color(best)