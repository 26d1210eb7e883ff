"""Input signal field of a status report ("PN:XYZ...")."""

from __future__ import annotations

import enum

_PREFIX = "PN:"


class MachineSignal(enum.Enum):
    """An asserted input signal, keyed by its report letter."""

    PROBE_TRIGGERED = "P"
    PROBE_DISCONNECTED = "O"
    X_LIMIT_SWITCH_ASSERTED = "X"
    Y_LIMIT_SWITCH_ASSERTED = "Y"
    Z_LIMIT_SWITCH_ASSERTED = "Z"
    A_LIMIT_SWITCH_ASSERTED = "A"
    B_LIMIT_SWITCH_ASSERTED = "B"
    C_LIMIT_SWITCH_ASSERTED = "C"
    DOOR_SWITCH_ASSERTED = "D"
    RESET_SWITCH_ASSERTED = "R"
    FEED_HOLD_SWITCH_ASSERTED = "H"
    CYCLE_START_SWITCH_ASSERTED = "S"
    E_STOP_SWITCH_ASSERTED = "E"
    BLOCK_DELETE_SWITCH_ASSERTED = "L"
    OPTIONAL_PROGRAM_STOP_SWITCH_ASSERTED = "T"
    MOTOR_WARNING = "W"
    MOTOR_FAULT = "M"


_BY_LETTER: dict[str, MachineSignal] = {signal.value: signal for signal in MachineSignal}


def get_machine_signal(signal: str) -> MachineSignal:
    """Return the signal for a single letter such as "P"."""
    try:
        return _BY_LETTER[signal]
    except (KeyError, TypeError):
        raise ValueError(f'Unknown signal "{signal}"') from None


def _symbols(text: str):
    for byte in text.encode("utf-8"):
        yield chr(byte) if byte < 0x80 else "Invalid Symbol"


def parse_machine_signal(message: str) -> list[MachineSignal]:
    """Return every signal listed in a message such as "PN:POX"."""
    if not is_machine_signal(message):
        raise ValueError(f'Cannot read machine signal "{message}"')
    signals = []
    for symbol in _symbols(message[len(_PREFIX):]):
        try:
            signals.append(get_machine_signal(symbol))
        except ValueError:
            raise ValueError(f'Unknown machine signal "{symbol}"') from None
    return signals


def is_machine_signal(message: str) -> bool:
    """Tell whether ``message`` starts with "PN:"."""
    return message.startswith(_PREFIX)