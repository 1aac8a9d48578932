import pytest

from ansikit.params import MAX_PARAMS, Params


def build(*groups):
    params = Params()
    for group in groups:
        *subs, last = group
        for value in subs:
            params.extend(value)
        params.push(last)
    return params


def test_new_params_are_empty():
    params = Params()
    assert params.is_empty()
    assert len(params) == 0
    assert list(params) == []


def test_push_makes_separate_params():
    params = build([4], [0])
    assert list(params) == [(4,), (0,)]
    assert len(params) == 2


def test_extend_groups_subparams():
    params = build([38, 2, 255, 0, 255], [1])
    assert list(params) == [(38, 2, 255, 0, 255), (1,)]
    assert len(params) == 6


def test_open_group_is_still_iterated():
    params = Params()
    params.extend(0)
    params.extend(0)
    assert list(params) == [(0, 0)]


def test_repr_joins_params_and_subparams():
    assert repr(build([1], [2, 3])) == "[1;2:3]"
    assert repr(Params()) == "[]"


def test_full_after_max_params():
    params = Params()
    for _ in range(MAX_PARAMS):
        assert not params.is_full()
        params.push(1)
    assert params.is_full()
    with pytest.raises(IndexError):
        params.push(1)
    with pytest.raises(IndexError):
        params.extend(1)


def test_clear_resets():
    params = build([1], [2, 3])
    params.clear()
    assert params.is_empty()
    assert list(params) == []
    assert params == Params()


def test_equality_follows_groups():
    assert build([1], [2]) == build([1], [2])
    assert not build([1, 2]) == build([1], [2])


@pytest.mark.parametrize("value", [-1, 0x10000])
def test_rejects_values_outside_u16(value):
    with pytest.raises(ValueError):
        Params().push(value)