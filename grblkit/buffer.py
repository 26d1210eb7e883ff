"""Buffer state field of a status report ("Bf:<blocks>,<chars>")."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PREFIX = "Bf:"
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
class BufferState:
    """Free planner blocks and free receive-buffer characters on the device."""

    block_buffers_free: int
    rx_characters_free: int


def parse_buffer_state(message: str) -> BufferState:
    """Parse a message such as "Bf:20,13"."""
    if not is_buffer_state(message):
        raise ValueError(f'Cannot read buffer state "{message}"')
    values = message[len(_PREFIX):].split(",")
    if len(values) != 2:
        raise ValueError(f"Invalid buffer states count {len(values)}")
    blocks, characters = values
    try:
        block_buffers = _parse_i32(blocks)
    except ValueError:
        raise ValueError(f'Cannot read block buffers free "{blocks}"') from None
    try:
        rx_characters = _parse_i32(characters)
    except ValueError:
        raise ValueError(f'Cannot read rx characters free "{characters}"') from None
    return BufferState(block_buffers, rx_characters)


def is_buffer_state(message: str) -> bool:
    """Tell whether ``message`` starts with "Bf:"."""
    return message.startswith(_PREFIX)