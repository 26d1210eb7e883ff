"""Machine state section of a status report ("Hold:0")."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_i8(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not -128 <= value <= 127:
        raise ValueError(text)
    return value


class MachineStateName(enum.Enum):
    """The main state of the machine, keyed by its report name."""

    IDLE = "Idle"
    RUN = "Run"
    HOLD = "Hold"
    JOG = "Jog"
    ALARM = "Alarm"
    DOOR = "Door"
    CHECK = "Check"
    HOME = "Home"
    SLEEP = "Sleep"
    TOOL = "Tool"


_BY_NAME: dict[str, MachineStateName] = {state.value: state for state in MachineStateName}


@dataclass(frozen=True)
class MachineState:
    """The machine state with its optional sub state code."""

    status: MachineStateName
    sub_status: int | None = None


def get_machine_status_name(name: str) -> MachineStateName:
    """Return the state for a report name such as "Idle"."""
    try:
        return _BY_NAME[name]
    except (KeyError, TypeError):
        raise ValueError(f'Unknown status name "{name}"') from None


def parse_machine_state(message: str) -> MachineState:
    """Parse a state section such as "Hold:0" or "Idle"."""
    segments = message.split(":")
    status = get_machine_status_name(segments[0])
    sub_status = None
    if len(segments) > 1:
        try:
            sub_status = _parse_i8(segments[1])
        except ValueError:
            raise ValueError(
                f'Cannot read machine sub status "{segments[1]}"'
            ) from None
    return MachineState(status, sub_status)