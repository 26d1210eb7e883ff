"""Accessory state field of a status report ("A:SCFMT")."""

from __future__ import annotations

import enum

_PREFIX = "A:"


class AccessoryState(enum.Enum):
    """An active accessory, keyed by its report letter."""

    SPINDLE_CLOCKWISE = "S"
    SPINDLE_COUNTER_CLOCKWISE = "C"
    FLOOD_COOLANT_ENABLED = "F"
    MIST_COOLANT_ENABLED = "M"
    TOOL_CHANGE_PENDING = "T"


_BY_LETTER: dict[str, AccessoryState] = {state.value: state for state in AccessoryState}


def get_accessory_state(state: str) -> AccessoryState:
    """Return the accessory state for a single letter such as "S"."""
    try:
        return _BY_LETTER[state]
    except (KeyError, TypeError):
        raise ValueError(f'Unknown accessory state "{state}"') from None


def _symbols(text: str):
    for byte in text.encode("utf-8"):
        yield chr(byte) if byte < 0x80 else "Invalid Symbol"


def parse_accessory_state(message: str) -> list[AccessoryState]:
    """Return every accessory state listed in a message such as "A:SF"."""
    if not is_accessory_state(message):
        raise ValueError(f'Cannot read accessory state "{message}"')
    states = []
    for symbol in _symbols(message[len(_PREFIX):]):
        try:
            states.append(get_accessory_state(symbol))
        except ValueError:
            raise ValueError(f'Unknown accessory state "{symbol}"') from None
    return states


def is_accessory_state(message: str) -> bool:
    """Tell whether ``message`` starts with "A:"."""
    return message.startswith(_PREFIX)