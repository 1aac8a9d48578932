"""Colour palettes for the 16 terminal-defined colours."""

from __future__ import annotations

import dataclasses
import sys
from typing import Optional, Tuple

from ansikit.style import Ansi256Color, AnsiColor, RgbColor

PALETTE_SIZE = 16


def distance(c1: RgbColor, c2: RgbColor) -> int:
    """Return a cheap perceptual distance between two colours (squared, no sqrt)."""
    r_sum = c1.r + c2.r
    r_delta = c1.r - c2.r
    g_delta = c1.g - c2.g
    b_delta = c1.b - c2.b

    r = (2 * 512 + r_sum) * r_delta * r_delta
    g = 4 * g_delta * g_delta * (1 << 8)
    b = (2 * 767 - r_sum) * b_delta * b_delta
    return r + g + b


@dataclasses.dataclass(frozen=True)
class Palette:
    """The RGB values a terminal uses for each of the 16 ANSI colours."""

    colors: Tuple[RgbColor, ...]

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        if len(colors) != PALETTE_SIZE:
            raise ValueError(
                f"a palette holds exactly {PALETTE_SIZE} colours, got {len(colors)}"
            )
        if not all(isinstance(color, RgbColor) for color in colors):
            raise TypeError("palette entries must be RgbColor values")
        object.__setattr__(self, "colors", colors)

    def get(self, color: AnsiColor) -> RgbColor:
        """Look up the RGB value of a 4-bit colour."""
        return self.colors[Ansi256Color.from_ansi(color).index]

    def __getitem__(self, color: AnsiColor) -> RgbColor:
        return self.get(color)

    def rgb_from_index(self, index: int) -> Optional[RgbColor]:
        """Return the colour at a 256-colour index, or None if it is past the palette."""
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return None

    def find_match(self, color: RgbColor) -> AnsiColor:
        """Return the 4-bit colour whose palette entry is closest to ``color``."""
        best_index = min(
            range(len(self.colors)), key=lambda i: distance(color, self.colors[i])
        )
        match = Ansi256Color(best_index).into_ansi()
        if match is None:
            raise IndexError(f"palette index {best_index} is out of bounds")
        return match


VGA = Palette(
    (
        RgbColor(0, 0, 0),
        RgbColor(170, 0, 0),
        RgbColor(0, 170, 0),
        RgbColor(170, 85, 0),
        RgbColor(0, 0, 170),
        RgbColor(170, 0, 170),
        RgbColor(0, 170, 170),
        RgbColor(170, 170, 170),
        RgbColor(85, 85, 85),
        RgbColor(255, 85, 85),
        RgbColor(85, 255, 85),
        RgbColor(255, 255, 85),
        RgbColor(85, 85, 255),
        RgbColor(255, 85, 255),
        RgbColor(85, 255, 255),
        RgbColor(255, 255, 255),
    )
)
"""Typical colours used when PCs boot and stay in text mode."""

WIN10_CONSOLE = Palette(
    (
        RgbColor(12, 12, 12),
        RgbColor(197, 15, 31),
        RgbColor(19, 161, 14),
        RgbColor(193, 156, 0),
        RgbColor(0, 55, 218),
        RgbColor(136, 23, 152),
        RgbColor(58, 150, 221),
        RgbColor(204, 204, 204),
        RgbColor(118, 118, 118),
        RgbColor(231, 72, 86),
        RgbColor(22, 198, 12),
        RgbColor(249, 241, 165),
        RgbColor(59, 120, 255),
        RgbColor(180, 0, 158),
        RgbColor(97, 214, 214),
        RgbColor(242, 242, 242),
    )
)
"""Campbell theme, used by the Windows 10 console since version 1709."""

DEFAULT = WIN10_CONSOLE if sys.platform == "win32" else VGA
"""The platform-specific default palette."""