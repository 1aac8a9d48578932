# ansikit

Small, dependency-free building blocks for working with ANSI terminal styling.

- **Styles and colors** (`ansikit.style`): the enum `AnsiColor` (16 colors),
  `Ansi256Color` (an xterm palette index), `RgbColor`, the `Effects` flag and an
  immutable `Style` with `with_fg_color`, `with_bg_color`, `with_underline_color`,
  `with_effects` and `style | Effects.BOLD`.
- **LS_COLORS parsing** (`ansikit.ls`): `parse` turns an `LS_COLORS` entry such as
  `"01;34"` into a `Style`, or returns `None` for an empty or reset-only entry or
  one with a field that is not a number in 0..=255.
- **Lossy color conversion** (`ansikit.lossy`, `ansikit.palette`): convert between
  4-bit, 256-color and 24-bit RGB colors. 4-bit colors are matched against a
  `Palette`; `VGA`, `WIN10_CONSOLE` and the platform's `DEFAULT` are provided.
- **Escape-sequence state machine** (`ansikit.states`, `ansikit.transitions`):
  the `State` and `Action` enums, `pack`/`unpack` for their one-byte encoding,
  the `STATE_CHANGES` table and `state_change(state, byte)`.
- **Parameter list** (`ansikit.params`): `Params`, a list of at most 32 CSI/DCS
  parameter values grouped into parameters with subparameters.
- **Capability queries** (`ansikit.query`): `clicolor`, `clicolor_force`,
  `no_color`, `term_supports_color`, `term_supports_ansi_color`, `truecolor` and
  `is_ci`, read from the `CLICOLOR`, `CLICOLOR_FORCE`, `NO_COLOR`, `TERM`,
  `COLORTERM` and `CI` environment variables.

## Installation

```
pip install ansikit
```

## Usage

Parse an `LS_COLORS` style:

```python
from ansikit.ls import parse
from ansikit.style import AnsiColor, Effects

style = parse("34;03")
assert style == AnsiColor.BLUE.on_default() | Effects.ITALIC
assert parse("00") is None
```

Convert colors lossily:

```python
from ansikit.lossy import rgb_to_xterm, color_to_ansi
from ansikit.palette import VGA
from ansikit.style import RgbColor

xterm = rgb_to_xterm(RgbColor(255, 0, 0))
ansi = color_to_ansi(RgbColor(250, 80, 80), VGA)
```

Step the escape-sequence state machine:

```python
from ansikit.states import State
from ansikit.transitions import state_change

state = State.GROUND
for byte in b"\x1b[0m":
    next_state, action = state_change(state, byte)
    if next_state is not State.ANYWHERE:
        state = next_state
```

`State.ANYWHERE` as the next state means "stay in the current state".

Collect parameters:

```python
from ansikit.params import Params

params = Params()
params.extend(38)
params.push(5)
params.push(1)
assert list(params) == [(38, 5), (1,)]
assert repr(params) == "[38:5;1]"
```

Check what the terminal environment asks for:

```python
from ansikit import query

if query.no_color():
    ...
```

## Command line

Report the current terminal's color capabilities:

```
ansikit-query
```

It prints one `name: value` line for each of the capability checks above.

## What it does not do

- There is no parser that drives the state machine over a byte stream and
  dispatches print, execute, CSI, OSC or DCS events; `state_change` only yields
  the next state and action, and UTF-8 sequences are left for the caller to
  decode after `Action.BEGIN_UTF8`.
- It does not switch a Windows console into virtual-terminal mode.
- It does not write escape sequences: a `Style` describes colors and effects but
  is not rendered to text.

## Running the tests

```
pip install -e ".[test]"
pytest
```