"""Colours, text effects and the styles that combine them."""

from __future__ import annotations

import dataclasses
import enum
from typing import Optional, Union


class AnsiColor(enum.Enum):
    """The 16 terminal-defined colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15

    def on_default(self) -> "Style":
        """Return a style with this colour as foreground and the default background."""
        return Style(fg_color=self)

    def on(self, background: "Color") -> "Style":
        """Return a style with this colour as foreground over ``background``."""
        return Style(fg_color=self, bg_color=background)


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..=255, got {value!r}")


@dataclasses.dataclass(frozen=True)
class Ansi256Color:
    """An index into the 256-colour xterm palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("index", self.index)

    @classmethod
    def from_ansi(cls, color: AnsiColor) -> "Ansi256Color":
        """Return the palette entry that holds a 4-bit colour."""
        return cls(color.value)

    def into_ansi(self) -> Optional[AnsiColor]:
        """Return the 4-bit colour at this index, or None past the first 16."""
        if self.index < len(AnsiColor):
            return AnsiColor(self.index)
        return None

    def on_default(self) -> "Style":
        """Return a style with this colour as foreground and the default background."""
        return Style(fg_color=self)

    def on(self, background: "Color") -> "Style":
        """Return a style with this colour as foreground over ``background``."""
        return Style(fg_color=self, bg_color=background)


@dataclasses.dataclass(frozen=True)
class RgbColor:
    """A 24-bit colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))

    def on_default(self) -> "Style":
        """Return a style with this colour as foreground and the default background."""
        return Style(fg_color=self)

    def on(self, background: "Color") -> "Style":
        """Return a style with this colour as foreground over ``background``."""
        return Style(fg_color=self, bg_color=background)


Color = Union[AnsiColor, Ansi256Color, RgbColor]


class Effects(enum.Flag):
    """Text effects that can be combined."""

    BOLD = enum.auto()
    DIMMED = enum.auto()
    ITALIC = enum.auto()
    UNDERLINE = enum.auto()
    BLINK = enum.auto()
    INVERT = enum.auto()
    HIDDEN = enum.auto()
    STRIKETHROUGH = enum.auto()


NO_EFFECTS = Effects(0)


@dataclasses.dataclass(frozen=True)
class Style:
    """Foreground, background and underline colours plus effects."""

    fg_color: Optional[Color] = None
    bg_color: Optional[Color] = None
    underline_color: Optional[Color] = None
    effects: Effects = NO_EFFECTS

    def with_fg_color(self, color: Optional[Color]) -> "Style":
        """Return a copy with the foreground colour replaced."""
        return dataclasses.replace(self, fg_color=color)

    def with_bg_color(self, color: Optional[Color]) -> "Style":
        """Return a copy with the background colour replaced."""
        return dataclasses.replace(self, bg_color=color)

    def with_underline_color(self, color: Optional[Color]) -> "Style":
        """Return a copy with the underline colour replaced."""
        return dataclasses.replace(self, underline_color=color)

    def with_effects(self, effects: Effects) -> "Style":
        """Return a copy with the effects replaced."""
        return dataclasses.replace(self, effects=effects)

    def __or__(self, effects: Effects) -> "Style":
        if not isinstance(effects, Effects):
            return NotImplemented
        return dataclasses.replace(self, effects=self.effects | effects)