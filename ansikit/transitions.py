"""Transition table of the escape-sequence state machine."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ansikit.states import Action, State, pack, unpack

_Rule = Tuple[int, int, State, Action]

_A = State.ANYWHERE


def _c0(action: Action) -> List[_Rule]:
    """C0 controls other than CAN, SUB and ESC, which the Anywhere state handles."""
    return [
        (0x00, 0x17, _A, action),
        (0x19, 0x19, _A, action),
        (0x1C, 0x1F, _A, action),
    ]


_RULES: Dict[State, List[_Rule]] = {
    State.ANYWHERE: [
        (0x18, 0x18, State.GROUND, Action.EXECUTE),
        (0x1A, 0x1A, State.GROUND, Action.EXECUTE),
        (0x1B, 0x1B, State.ESCAPE, Action.NOP),
    ],
    State.GROUND: _c0(Action.EXECUTE)
    + [
        (0x20, 0x7F, _A, Action.PRINT),
        (0x80, 0x8F, _A, Action.EXECUTE),
        (0x91, 0x9A, _A, Action.EXECUTE),
        (0x9C, 0x9C, _A, Action.EXECUTE),
        (0xC2, 0xDF, State.UTF8, Action.BEGIN_UTF8),
        (0xE0, 0xEF, State.UTF8, Action.BEGIN_UTF8),
        (0xF0, 0xF4, State.UTF8, Action.BEGIN_UTF8),
    ],
    State.ESCAPE: _c0(Action.EXECUTE)
    + [
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x20, 0x2F, State.ESCAPE_INTERMEDIATE, Action.COLLECT),
        (0x30, 0x4F, State.GROUND, Action.ESC_DISPATCH),
        (0x51, 0x57, State.GROUND, Action.ESC_DISPATCH),
        (0x59, 0x59, State.GROUND, Action.ESC_DISPATCH),
        (0x5A, 0x5A, State.GROUND, Action.ESC_DISPATCH),
        (0x5C, 0x5C, State.GROUND, Action.ESC_DISPATCH),
        (0x60, 0x7E, State.GROUND, Action.ESC_DISPATCH),
        (0x5B, 0x5B, State.CSI_ENTRY, Action.NOP),
        (0x5D, 0x5D, State.OSC_STRING, Action.NOP),
        (0x50, 0x50, State.DCS_ENTRY, Action.NOP),
        (0x58, 0x58, State.SOS_PM_APC_STRING, Action.NOP),
        (0x5E, 0x5E, State.SOS_PM_APC_STRING, Action.NOP),
        (0x5F, 0x5F, State.SOS_PM_APC_STRING, Action.NOP),
    ],
    State.ESCAPE_INTERMEDIATE: _c0(Action.EXECUTE)
    + [
        (0x20, 0x2F, _A, Action.COLLECT),
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x30, 0x7E, State.GROUND, Action.ESC_DISPATCH),
    ],
    State.CSI_ENTRY: _c0(Action.EXECUTE)
    + [
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x20, 0x2F, State.CSI_INTERMEDIATE, Action.COLLECT),
        (0x30, 0x39, State.CSI_PARAM, Action.PARAM),
        (0x3A, 0x3B, State.CSI_PARAM, Action.PARAM),
        (0x3C, 0x3F, State.CSI_PARAM, Action.COLLECT),
        (0x40, 0x7E, State.GROUND, Action.CSI_DISPATCH),
    ],
    State.CSI_IGNORE: _c0(Action.EXECUTE)
    + [
        (0x20, 0x3F, _A, Action.IGNORE),
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x40, 0x7E, State.GROUND, Action.NOP),
    ],
    State.CSI_PARAM: _c0(Action.EXECUTE)
    + [
        (0x30, 0x39, _A, Action.PARAM),
        (0x3A, 0x3B, _A, Action.PARAM),
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x3C, 0x3F, State.CSI_IGNORE, Action.NOP),
        (0x20, 0x2F, State.CSI_INTERMEDIATE, Action.COLLECT),
        (0x40, 0x7E, State.GROUND, Action.CSI_DISPATCH),
    ],
    State.CSI_INTERMEDIATE: _c0(Action.EXECUTE)
    + [
        (0x20, 0x2F, _A, Action.COLLECT),
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x30, 0x3F, State.CSI_IGNORE, Action.NOP),
        (0x40, 0x7E, State.GROUND, Action.CSI_DISPATCH),
    ],
    State.DCS_ENTRY: _c0(Action.IGNORE)
    + [
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x20, 0x2F, State.DCS_INTERMEDIATE, Action.COLLECT),
        (0x30, 0x39, State.DCS_PARAM, Action.PARAM),
        (0x3A, 0x3B, State.DCS_PARAM, Action.PARAM),
        (0x3C, 0x3F, State.DCS_PARAM, Action.COLLECT),
        (0x40, 0x7E, State.DCS_PASSTHROUGH, Action.NOP),
    ],
    State.DCS_INTERMEDIATE: _c0(Action.IGNORE)
    + [
        (0x20, 0x2F, _A, Action.COLLECT),
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x30, 0x3F, State.DCS_IGNORE, Action.NOP),
        (0x40, 0x7E, State.DCS_PASSTHROUGH, Action.NOP),
    ],
    State.DCS_IGNORE: _c0(Action.IGNORE)
    + [
        (0x20, 0x7F, _A, Action.IGNORE),
        (0x9C, 0x9C, State.GROUND, Action.NOP),
    ],
    State.DCS_PARAM: _c0(Action.IGNORE)
    + [
        (0x30, 0x39, _A, Action.PARAM),
        (0x3A, 0x3B, _A, Action.PARAM),
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x3C, 0x3F, State.DCS_IGNORE, Action.NOP),
        (0x20, 0x2F, State.DCS_INTERMEDIATE, Action.COLLECT),
        (0x40, 0x7E, State.DCS_PASSTHROUGH, Action.NOP),
    ],
    State.DCS_PASSTHROUGH: _c0(Action.PUT)
    + [
        (0x20, 0x7E, _A, Action.PUT),
        (0x7F, 0x7F, _A, Action.IGNORE),
        (0x9C, 0x9C, State.GROUND, Action.NOP),
    ],
    State.SOS_PM_APC_STRING: _c0(Action.IGNORE)
    + [
        (0x20, 0x7F, _A, Action.IGNORE),
        (0x9C, 0x9C, State.GROUND, Action.NOP),
    ],
    State.OSC_STRING: [
        (0x00, 0x06, _A, Action.IGNORE),
        (0x07, 0x07, State.GROUND, Action.NOP),
        (0x08, 0x17, _A, Action.IGNORE),
        (0x19, 0x19, _A, Action.IGNORE),
        (0x1C, 0x1F, _A, Action.IGNORE),
        (0x20, 0xFF, _A, Action.OSC_PUT),
    ],
    State.UTF8: [],
}


def _build_table() -> Tuple[bytes, ...]:
    rows: List[bytes] = []
    for state in State:
        row = bytearray(256)
        for low, high, next_state, action in _RULES[state]:
            row[low : high + 1] = bytes([pack(next_state, action)]) * (high - low + 1)
        rows.append(bytes(row))
    return tuple(rows)


STATE_CHANGES: Sequence[bytes] = _build_table()
"""Packed transitions, indexed first by current state and then by input byte."""


def state_change(state: State, byte: int) -> Tuple[State, Action]:
    """Return the next state and the action to take for ``byte`` in ``state``.

    The Anywhere transitions take priority over those of the current state.
    When the returned state is ``State.ANYWHERE``, stay in the prior state.
    UTF-8 is not decoded here: ``Action.BEGIN_UTF8`` marks the start of a
    multi-byte sequence that a caller must finish itself.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte must be in 0..=255, got {byte!r}")
    change = STATE_CHANGES[State.ANYWHERE][byte]
    if change == 0:
        change = STATE_CHANGES[State(state)][byte]
    return unpack(change)