"""Machine axes, axis bit masks and input signal masks."""

from __future__ import annotations

import enum
import functools
import operator
from collections.abc import Iterable

MAX_AXES = 6
"""Maximum number of axes supported by the firmware."""

MIN_AXES = 1
"""Minimum number of axes supported by the firmware."""


class Axis(enum.Enum):
    """A machine axis, in firmware order."""

    X = "X"
    Y = "Y"
    Z = "Z"
    A = "A"
    B = "B"
    C = "C"


_AXES: tuple[Axis, ...] = tuple(Axis)
_AXES_BY_NAME: dict[str, Axis] = {axis.value: axis for axis in _AXES}


class SignalMask(enum.IntFlag):
    """Bit masks of the controller's input signals."""

    OFF = 1 << 0
    LIMIT_X = 1 << 1
    LIMIT_Y = 1 << 2
    LIMIT_Z = 1 << 3
    LIMIT_A = 1 << 4
    LIMIT_B = 1 << 5
    LIMIT_C = 1 << 6
    E_STOP = 1 << 7
    PROBE = 1 << 8
    RESET = 1 << 9
    SAFETY_DOOR = 1 << 10
    HOLD = 1 << 11
    CYCLE_START = 1 << 12
    BLOCK_DELETE = 1 << 13
    OPTIONAL_STOP = 1 << 14
    PROBE_DISCONNECTED = 1 << 15
    MOTOR_WARNING = 1 << 16


def get_axis(axis: str) -> Axis:
    """Return the axis called ``axis`` (one of X, Y, Z, A, B, C)."""
    try:
        return _AXES_BY_NAME[axis]
    except (KeyError, TypeError):
        raise ValueError(f'Unknown axis "{axis}"') from None


def get_all_grbl_axes() -> list[Axis]:
    """Return every axis the firmware knows, in order."""
    return list(_AXES)


def get_axis_by_index(axis_index: int) -> Axis:
    """Return the axis at position ``axis_index`` (0 to 5)."""
    if not 0 <= axis_index < len(_AXES):
        raise ValueError(f'Unknown axis index "{axis_index}"')
    return _AXES[axis_index]


def get_axis_name(axis: Axis) -> str:
    """Return the single-letter name of ``axis``."""
    return axis.value


def get_axis_name_by_index(axis_index: int) -> str:
    """Return the name of the axis at position ``axis_index``."""
    return get_axis_by_index(axis_index).value


def get_axis_mask(axis: Axis) -> int:
    """Return the mask bit belonging to ``axis``."""
    return 1 << _AXES.index(axis)


def get_combined_axes_mask(axes: Iterable[Axis]) -> int:
    """Return the mask with the bits of all ``axes`` set."""
    return functools.reduce(operator.or_, map(get_axis_mask, axes), 0)


def is_axis_enabled(mask: int, axis: Axis) -> bool:
    """Tell whether the bit for ``axis`` is set in ``mask``."""
    return (mask & get_axis_mask(axis)) > 0


def get_axes_from_mask(mask: int) -> list[Axis]:
    """Return the axes whose bits are set in ``mask``, in axis order."""
    return [axis for axis in _AXES if is_axis_enabled(mask, axis)]