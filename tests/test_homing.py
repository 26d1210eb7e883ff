import pytest

from grblkit.axis import Axis, get_all_grbl_axes
from grblkit.homing import HomingState, is_homing_state, parse_homing_state


def test_documented_example():
    state = parse_homing_state("H:1,3")
    assert state.homed is True
    assert state.homed_axes == (Axis.X, Axis.Y)


def test_not_homed_with_mask():
    state = parse_homing_state("H:0,5")
    assert state.homed is False
    assert state.homed_axes == (Axis.X, Axis.Z)


def test_without_mask_all_axes_homed():
    state = parse_homing_state("H:1")
    assert state == HomingState(True, tuple(get_all_grbl_axes()))


def test_zero_mask_gives_no_axes():
    assert parse_homing_state("H:1,0").homed_axes == ()


@pytest.mark.parametrize("message", ["H:2", "H:x", "H:", "H:-1,3"])
def test_bad_completion_state(message):
    with pytest.raises(ValueError, match="homing completion state"):
        parse_homing_state(message)


def test_bad_mask():
    with pytest.raises(ValueError, match='Cannot read homed axis "z"'):
        parse_homing_state("H:1,z")


def test_wrong_prefix():
    with pytest.raises(ValueError, match="Cannot read homing state"):
        parse_homing_state("Bf:1,3")


def test_is_homing_state():
    assert is_homing_state("H:1")
    assert not is_homing_state("h:1")