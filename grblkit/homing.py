"""Homing state field of a status report ("H:<homed>[,<axes mask>]")."""

from __future__ import annotations

import re
from dataclasses import dataclass

from grblkit.axis import Axis, get_all_grbl_axes, get_axes_from_mask

_PREFIX = "H:"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_signed(text: str, bits: int) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(text)
    return value


@dataclass(frozen=True)
class HomingState:
    """Whether homing completed, and for which axes."""

    homed: bool
    homed_axes: tuple[Axis, ...]


def parse_homing_state(message: str) -> HomingState:
    """Parse a message such as "H:1,3".

    Without an axes mask every axis counts as homed.
    """
    if not is_homing_state(message):
        raise ValueError(f'Cannot read homing state "{message}"')
    parts = message[len(_PREFIX):].split(",")

    completion = parts[0]
    try:
        value = _parse_signed(completion, 8)
    except ValueError:
        value = None
    if value not in (0, 1):
        raise ValueError(f'Cannot read homing completion state "{completion}"')

    if len(parts) == 2:
        try:
            mask = _parse_signed(parts[1], 32)
        except ValueError:
            raise ValueError(f'Cannot read homed axis "{parts[1]}"') from None
        axes = get_axes_from_mask(mask)
    else:
        axes = get_all_grbl_axes()

    return HomingState(homed=value == 1, homed_axes=tuple(axes))


def is_homing_state(message: str) -> bool:
    """Tell whether ``message`` starts with "H:"."""
    return message.startswith(_PREFIX)