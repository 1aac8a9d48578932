"""States and actions of the escape-sequence state machine, packed into bytes."""

from __future__ import annotations

import enum
from typing import Tuple


class State(enum.IntEnum):
    """A state of the escape-sequence parser."""

    ANYWHERE = 0
    CSI_ENTRY = 1
    CSI_IGNORE = 2
    CSI_INTERMEDIATE = 3
    CSI_PARAM = 4
    DCS_ENTRY = 5
    DCS_IGNORE = 6
    DCS_INTERMEDIATE = 7
    DCS_PARAM = 8
    DCS_PASSTHROUGH = 9
    ESCAPE = 10
    ESCAPE_INTERMEDIATE = 11
    GROUND = 12
    OSC_STRING = 13
    SOS_PM_APC_STRING = 14
    UTF8 = 15


class Action(enum.IntEnum):
    """An action to take on a state transition."""

    NOP = 0
    CLEAR = 1
    COLLECT = 2
    CSI_DISPATCH = 3
    ESC_DISPATCH = 4
    EXECUTE = 5
    HOOK = 6
    IGNORE = 7
    OSC_END = 8
    OSC_PUT = 9
    OSC_START = 10
    PARAM = 11
    PRINT = 12
    PUT = 13
    UNHOOK = 14
    BEGIN_UTF8 = 15


def pack(state: State, action: Action) -> int:
    """Pack a state (low four bits) and an action (high four bits) into a byte."""
    return (Action(action) << 4) | State(state)


def unpack(delta: int) -> Tuple[State, Action]:
    """Split a packed byte into its state and action."""
    if not 0 <= delta <= 0xFF:
        raise ValueError(f"packed transition must be in 0..=255, got {delta!r}")
    return State(delta & 0x0F), Action(delta >> 4)