import pytest

from ansikit.states import Action, State, pack, unpack


def test_unpack_state_action():
    assert unpack(0xEE) == (State.SOS_PM_APC_STRING, Action.UNHOOK)
    assert unpack(0x0F) == (State.UTF8, Action.NOP)
    assert unpack(0xFF) == (State.UTF8, Action.BEGIN_UTF8)


def test_pack_state_action():
    assert pack(State.SOS_PM_APC_STRING, Action.UNHOOK) == 0xEE
    assert pack(State.UTF8, Action.NOP) == 0x0F
    assert pack(State.UTF8, Action.BEGIN_UTF8) == 0xFF


def test_pack_unpack_round_trip_over_all_pairs():
    for state in State:
        for action in Action:
            assert unpack(pack(state, action)) == (state, action)


def test_unpack_pack_round_trip_over_all_bytes():
    for delta in range(256):
        assert pack(*unpack(delta)) == delta


def test_exactly_sixteen_variants():
    assert sorted(pack(state, Action.NOP) for state in State) == list(range(16))
    assert sorted(pack(State.ANYWHERE, action) for action in Action) == list(
        range(0, 256, 16)
    )


@pytest.mark.parametrize("delta", [-1, 256])
def test_unpack_rejects_out_of_range(delta):
    with pytest.raises(ValueError):
        unpack(delta)


def test_state_from_invalid_raw_value():
    with pytest.raises(ValueError):
        State(16)
    with pytest.raises(ValueError):
        Action(16)