"""Feed and spindle speed field of a status report ("FS:<feed>,<rpm>[,<actual>]")."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PREFIX = "FS:"
_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _parse_i32(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(text)
    return value


@dataclass(frozen=True)
class MachineSpeed:
    """Feed rate and spindle speeds; the actual spindle speed is optional."""

    feed_rate: int
    spindle_programmed_rpm: int
    spindle_actual_rpm: int | None = None


def parse_machine_speed(message: str) -> MachineSpeed:
    """Parse a message such as "FS:100,3000,1677"."""
    if not is_machine_speed(message):
        raise ValueError(f'Cannot read machine speed "{message}"')
    values = message[len(_PREFIX):].split(",")
    if not 2 <= len(values) <= 3:
        raise ValueError(f'Invalid count of machine speed values "{message}"')
    labels = ("feed rate", "spindle programmed rpm", "spindle actual rpm")
    parsed = []
    for text, label in zip(values, labels):
        try:
            parsed.append(_parse_i32(text))
        except ValueError:
            raise ValueError(f'Cannot read {label} "{text}"') from None
    return MachineSpeed(*parsed)


def is_machine_speed(message: str) -> bool:
    """Tell whether ``message`` starts with "FS:"."""
    return message.startswith(_PREFIX)