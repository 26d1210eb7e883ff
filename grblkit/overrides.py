"""Override values field of a status report ("Ov:<feed>,<rapids>,<spindle>")."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PREFIX = "Ov:"
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
class Overrides:
    """Feed rate, rapids and spindle speed overrides, in percent."""

    feed_rate_percentage: int
    rapids_percentage: int
    spindle_speed_percentage: int


def parse_overrides(message: str) -> Overrides:
    """Parse a message such as "Ov:100,100,20"."""
    if not is_overrides(message):
        raise ValueError(f'Cannot read overrides "{message}"')
    values = message[len(_PREFIX):].split(",")
    if len(values) != 3:
        raise ValueError(f'Invalid count of override values "{message}"')
    parsed = []
    for text, label in zip(values, ("feed rate", "rapids", "spindle speed")):
        try:
            parsed.append(_parse_i32(text))
        except ValueError:
            raise ValueError(f'Cannot read {label} override "{text}"') from None
    return Overrides(*parsed)


def is_overrides(message: str) -> bool:
    """Tell whether ``message`` starts with "Ov:"."""
    return message.startswith(_PREFIX)