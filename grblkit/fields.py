"""Small single-value fields of status reports and build information."""

from __future__ import annotations

import enum
import re

_FIRMWARE_PREFIX = "FW:"
_LINE_NUMBER_PREFIX = "Ln:"
_INPUT_WAIT_PREFIX = "In:"
_ARC_MODE_PREFIX = "D:"
_PENDANT_PREFIX = "MPG:"
_TOOL_LENGTH_REFERENCE_PREFIX = "TLR:"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_signed(text: str, bits: int) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(text)
    return value


class ArcMode(enum.Enum):
    """How arcs are measured: by radius or by diameter."""

    RADIUS = "0"
    DIAMETER = "1"


class PendantControl(enum.Enum):
    """Whether a pendant holds control of the machine."""

    RELEASED = 0
    TAKEN = 1


def parse_firmware(message: str) -> str:
    """Return the firmware name from a message such as "FW:grblHAL"."""
    if not is_firmware(message):
        raise ValueError(f'Cannot read firmware message "{message}"')
    return message[len(_FIRMWARE_PREFIX):]


def is_firmware(message: str) -> bool:
    """Tell whether ``message`` starts with "FW:"."""
    return message.startswith(_FIRMWARE_PREFIX)


def parse_line_number(message: str) -> int:
    """Return the line number from a message such as "Ln:32"."""
    if not is_line_number(message):
        raise ValueError(f'Cannot read line number "{message}"')
    text = message[len(_LINE_NUMBER_PREFIX):]
    try:
        return _parse_signed(text, 32)
    except ValueError:
        raise ValueError(f'Cannot read line number "{text}"') from None


def is_line_number(message: str) -> bool:
    """Tell whether ``message`` starts with "Ln:"."""
    return message.startswith(_LINE_NUMBER_PREFIX)


def parse_input_wait_result(message: str) -> bool:
    """Tell whether an input wait succeeded: "In:0" and "In:1" do, "In:-1" does not."""
    if not is_input_wait_result(message):
        raise ValueError(f'Cannot read input wait result "{message}"')
    text = message[len(_INPUT_WAIT_PREFIX):]
    try:
        value = _parse_signed(text, 8)
    except ValueError:
        raise ValueError(f'Cannot read input wait result "{text}"') from None
    if not -1 <= value <= 1:
        raise ValueError(f'Cannot interpret input wait result "{value}"')
    return value in (0, 1)


def is_input_wait_result(message: str) -> bool:
    """Tell whether ``message`` starts with "In:"."""
    return message.startswith(_INPUT_WAIT_PREFIX)


def get_arc_mode(mode: str) -> ArcMode:
    """Return the arc mode for "0" or "1"."""
    for arc_mode in ArcMode:
        if arc_mode.value == mode:
            return arc_mode
    raise ValueError(f'Unknown arc mode "{mode}"')


def parse_arc_mode(message: str) -> ArcMode:
    """Return the arc mode from a message such as "D:0"."""
    if not is_arc_mode(message):
        raise ValueError(f'Cannot read arc mode message "{message}"')
    return get_arc_mode(message[len(_ARC_MODE_PREFIX):])


def is_arc_mode(message: str) -> bool:
    """Tell whether ``message`` starts with "D:"."""
    return message.startswith(_ARC_MODE_PREFIX)


def get_pendant_control(state: int) -> PendantControl:
    """Return the pendant control state for 0 or 1."""
    for control in PendantControl:
        if control.value == state:
            return control
    raise ValueError(f"Unknown pendant control state {state}")


def parse_pendant_control(message: str) -> PendantControl:
    """Return the pendant control state from a message such as "MPG:1"."""
    if not is_pendant_control(message):
        raise ValueError(f'Cannot read pendant control message "{message}"')
    text = message[len(_PENDANT_PREFIX):]
    try:
        state = _parse_signed(text, 8)
    except ValueError:
        raise ValueError(f'Cannot interpret pendant control state "{text}"') from None
    return get_pendant_control(state)


def is_pendant_control(message: str) -> bool:
    """Tell whether ``message`` starts with "MPG:"."""
    return message.startswith(_PENDANT_PREFIX)


def parse_tool_length_reference(message: str) -> bool:
    """Tell whether the tool length reference offset is set ("TLR:1")."""
    if not is_tool_length_reference(message):
        raise ValueError(f'Cannot read tool reference length "{message}"')
    text = message[len(_TOOL_LENGTH_REFERENCE_PREFIX):]
    try:
        return _parse_signed(text, 8) == 1
    except ValueError:
        raise ValueError(
            f'Cannot interpret tool reference length offset set value "{text}"'
        ) from None


def is_tool_length_reference(message: str) -> bool:
    """Tell whether ``message`` starts with "TLR:"."""
    return message.startswith(_TOOL_LENGTH_REFERENCE_PREFIX)