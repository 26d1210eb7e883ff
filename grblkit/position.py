"""Position, coordinate system and scaled-axes fields of a status report."""

from __future__ import annotations

import re

from grblkit.axis import MAX_AXES, MIN_AXES, Axis, get_axis

_LOCAL_PREFIX = "WPos:"
_LOCAL_OFFSET_PREFIX = "WCO:"
_GLOBAL_PREFIX = "MPos:"
_COORDINATE_SYSTEM_PREFIX = "WCS:"
_SCALED_AXES_PREFIX = "Sc:"

_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    if not _FLOAT.fullmatch(text):
        raise ValueError(text)
    return float(text)


def parse_position(position: str) -> list[float]:
    """Parse comma separated axis values such as "3.21,2.0,-1"."""
    parts = position.split(",")
    if not MIN_AXES <= len(parts) <= MAX_AXES:
        raise ValueError(
            f'Invalid count of axis in "{position}" ({MIN_AXES} <= x <= {MAX_AXES})'
        )
    values = []
    for index, text in enumerate(parts):
        try:
            values.append(_parse_float(text))
        except ValueError:
            raise ValueError(f'Cannot read axis:{index} "{text}"') from None
    return values


def parse_local_position(position: str) -> list[float]:
    """Parse a work position such as "WPos:3.21,2.0,-1"."""
    if not is_local_position(position):
        raise ValueError(f'Position is not a local position message "{position}"')
    return parse_position(position[len(_LOCAL_PREFIX):])


def is_local_position(position: str) -> bool:
    """Tell whether ``position`` starts with "WPos:"."""
    return position.startswith(_LOCAL_PREFIX)


def parse_global_position(position: str) -> list[float]:
    """Parse a machine position such as "MPos:3.21,2.0,-1"."""
    if not is_global_position(position):
        raise ValueError(f'Position is not a global position message "{position}"')
    return parse_position(position[len(_GLOBAL_PREFIX):])


def is_global_position(position: str) -> bool:
    """Tell whether ``position`` starts with "MPos:"."""
    return position.startswith(_GLOBAL_PREFIX)


def parse_local_position_offset(position: str) -> list[float]:
    """Parse a work coordinate offset such as "WCO:3.21,2.0,-1"."""
    if not is_local_position_offset(position):
        raise ValueError(
            f'Position is not a local position offset message "{position}"'
        )
    return parse_position(position[len(_LOCAL_OFFSET_PREFIX):])


def is_local_position_offset(position: str) -> bool:
    """Tell whether ``position`` starts with "WCO:"."""
    return position.startswith(_LOCAL_OFFSET_PREFIX)


def parse_coordinate_system(message: str) -> str:
    """Return the coordinate system from a message such as "WCS:G54"."""
    if not is_coordinate_system(message):
        raise ValueError(f'Cannot read coordinate system message "{message}"')
    system = message[len(_COORDINATE_SYSTEM_PREFIX):]
    if not system.startswith("G"):
        raise ValueError(f'Cannot read coordinate system "{system}"')
    return system


def is_coordinate_system(message: str) -> bool:
    """Tell whether ``message`` starts with "WCS:"."""
    return message.startswith(_COORDINATE_SYSTEM_PREFIX)


def _symbols(text: str):
    for byte in text.encode("utf-8"):
        yield chr(byte) if byte < 0x80 else "Invalid Symbol"


def parse_scaled_axes(message: str) -> list[Axis]:
    """Return the scaled axes from a message such as "Sc:XZ"."""
    if not is_scaled_axes(message):
        raise ValueError(f'Cannot read scaled axes message "{message}"')
    axes = []
    for symbol in _symbols(message[len(_SCALED_AXES_PREFIX):]):
        try:
            axes.append(get_axis(symbol))
        except ValueError:
            raise ValueError(f'Unknown scaled axis "{symbol}"') from None
    return axes


def is_scaled_axes(message: str) -> bool:
    """Tell whether ``message`` starts with "Sc:"."""
    return message.startswith(_SCALED_AXES_PREFIX)