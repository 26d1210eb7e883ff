"""Compile options reported in the firmware build information."""

from __future__ import annotations

import enum


class CompileOption(enum.Enum):
    """A standard compile option, keyed by its report symbol."""

    VARIABLE_SPINDLE_ENABLED = "V"
    LINE_NUMBERS_ENABLED = "N"
    MIST_COOLANT_ENABLED = "M"
    CORE_XY_ENABLED = "C"
    PARKING_MOTION_ENABLED = "P"
    HOMING_FORCE_ORIGIN_ENABLED = "Z"
    HOMING_SINGLE_AXIS_ENABLED = "H"
    TWO_LIMIT_SWITCH_ON_AXIS_ENABLED = "T"
    ALLOW_FEED_RATE_OVERRIDES_IN_PROBE_CYCLES = "A"
    RESTORE_ALL_EEPROM_DISABLED = "*"
    RESTORE_EEPROM_DOLLAR_SETTINGS_DISABLED = "$"
    RESTORE_EEPROM_PARAMETER_DATA_DISABLED = "#"
    BUILD_INFO_WRITE_USER_STRING_DISABLED = "I"
    FORCE_SYNC_EEPROM_WRITE_DISABLED = "E"
    FORCE_SYNC_WORK_COORDINATE_OFFSET_CHANGE_DISABLED = "W"
    ALARM_STATE_ON_POWER_UP_WHEN_HOMING_INIT_LOCK = "L"
    DUAL_AXIS_MOTORS_WITH_SELF_SQUARING_ENABLED = "2"
    SOFTWARE_DEBOUNCE = "S"


class ExtendedCompileOption(enum.Enum):
    """An extended compile option, keyed by its report name."""

    AUTOMATIC_TOOL_CHANGE = "ATC"
    BLOCK_DELETE_SIGNAL = "BD"
    BLUETOOTH_STREAMING = "BT"
    CODE_ENUMERATIONS = "ENUMS"
    E_STOP_SIGNAL = "ES"
    ETHERNET_STREAMING = "ETH"
    HOMING = "HOME"
    LATHE_MODE = "LATHE"
    MPG_MODE = "MPG"
    NO_PROBE_INPUT = "NOPROBE"
    ODOMETER = "ODO"
    OPTIONAL_STOP_SIGNAL = "OS"
    PROBE_CONNECTED_SIGNAL = "PC"
    PID_LOG = "PID"
    LEGACY_REALTIME_COMMANDS = "RT+"
    REALTIME_COMMANDS = "RT-"
    SETTINGS_DESCRIPTIONS = "SED"
    SD_CARD_STREAMING = "SD"
    SPINDLE_SYNC = "SS"
    MANUAL_TOOL_CHANGE = "TC"
    WIFI_STREAMING = "WIFI"


_OPTIONS = {option.value: option for option in CompileOption}
_EXTENDED_OPTIONS = {option.value: option for option in ExtendedCompileOption}


def get_compile_option(option: str) -> CompileOption:
    """Return the compile option for a symbol such as "V"."""
    try:
        return _OPTIONS[option]
    except (KeyError, TypeError):
        raise ValueError(f"Invalid option {option}") from None


def get_extended_compile_option(option: str) -> ExtendedCompileOption:
    """Return the extended compile option for a name such as "ATC"."""
    try:
        return _EXTENDED_OPTIONS[option]
    except (KeyError, TypeError):
        raise ValueError(f'Invalid option "{option}"') from None