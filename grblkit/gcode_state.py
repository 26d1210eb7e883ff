"""Parser state report ("[GC:G0 G54 G17 G21]")."""

from __future__ import annotations

from dataclasses import dataclass

_PREFIX = "[GC:"
_SUFFIX = "]"


@dataclass(frozen=True)
class GCodeState:
    """The active modal G-code words reported by the parser."""

    values: tuple[str, ...]


def parse_gcode_state(message: str) -> GCodeState:
    """Parse a message such as "[GC:G0 G54 G17 G21]"."""
    if not is_gcode_state(message):
        raise ValueError(f'Cannot read gcode state message "{message}"')
    payload = message.removeprefix(_PREFIX).removesuffix(_SUFFIX)
    return GCodeState(tuple(word for word in payload.split(" ") if word))


def is_gcode_state(message: str) -> bool:
    """Tell whether ``message`` is wrapped in "[GC:" and "]"."""
    return message.startswith(_PREFIX) and message.endswith(_SUFFIX)