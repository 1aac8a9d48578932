import pytest

from ansikit.lossy import (
    XTERM_COLORS,
    ansi_to_rgb,
    color_to_ansi,
    color_to_rgb,
    color_to_xterm,
    rgb_to_ansi,
    rgb_to_xterm,
    xterm_to_ansi,
    xterm_to_rgb,
)
from ansikit.palette import VGA, WIN10_CONSOLE
from ansikit.style import Ansi256Color, AnsiColor, RgbColor


def test_xterm_table_size():
    assert len(XTERM_COLORS) == 256
    converted = [xterm_to_rgb(Ansi256Color(index), VGA) for index in range(16, 256)]
    assert converted == list(XTERM_COLORS[16:])


def test_xterm_pinned_entries():
    assert xterm_to_rgb(Ansi256Color(231), VGA) == RgbColor(255, 255, 255)
    assert xterm_to_rgb(Ansi256Color(232), VGA) == RgbColor(8, 8, 8)
    assert xterm_to_rgb(Ansi256Color(255), VGA) == RgbColor(238, 238, 238)


@pytest.mark.parametrize("palette", [VGA, WIN10_CONSOLE])
def test_xterm_to_rgb_uses_palette_for_first_sixteen(palette):
    for index in range(16):
        assert xterm_to_rgb(Ansi256Color(index), palette) == palette.colors[index]


def test_rgb_to_xterm_round_trips_extended_entries():
    for index in range(16, 256):
        rgb = xterm_to_rgb(Ansi256Color(index), VGA)
        assert rgb_to_xterm(rgb) == Ansi256Color(index)


def test_rgb_to_xterm_never_returns_placeholder():
    for color in VGA.colors:
        assert rgb_to_xterm(color).index >= 16


def test_xterm_to_ansi_first_sixteen_are_identity():
    for color in AnsiColor:
        assert xterm_to_ansi(Ansi256Color(color.value), WIN10_CONSOLE) == color


def test_xterm_to_ansi_matches_palette_for_extended():
    for index in range(16, 256):
        rgb = XTERM_COLORS[index]
        assert xterm_to_ansi(Ansi256Color(index), VGA) == VGA.find_match(rgb)


@pytest.mark.parametrize("palette", [VGA, WIN10_CONSOLE])
def test_ansi_rgb_round_trip(palette):
    for color in AnsiColor:
        assert rgb_to_ansi(ansi_to_rgb(color, palette), palette) == color


def test_color_to_rgb_dispatch():
    rgb = RgbColor(1, 2, 3)
    assert color_to_rgb(rgb, VGA) == rgb
    assert color_to_rgb(AnsiColor.BLUE, VGA) == VGA[AnsiColor.BLUE]
    assert color_to_rgb(Ansi256Color(200), VGA) == XTERM_COLORS[200]


def test_color_to_xterm_dispatch():
    assert color_to_xterm(AnsiColor.CYAN) == Ansi256Color(AnsiColor.CYAN.value)
    assert color_to_xterm(Ansi256Color(99)) == Ansi256Color(99)
    assert color_to_xterm(XTERM_COLORS[150]) == Ansi256Color(150)


def test_color_to_ansi_dispatch():
    assert color_to_ansi(AnsiColor.MAGENTA, VGA) == AnsiColor.MAGENTA
    assert color_to_ansi(Ansi256Color(9), VGA) == AnsiColor.BRIGHT_RED
    assert color_to_ansi(VGA[AnsiColor.GREEN], VGA) == AnsiColor.GREEN


@pytest.mark.parametrize(
    "func", [lambda c: color_to_rgb(c, VGA), color_to_xterm, lambda c: color_to_ansi(c, VGA)]
)
def test_unknown_colour_rejected(func):
    with pytest.raises(TypeError):
        func("red")