"""Setting description report ("[SETTING:<index>|<group>|...]")."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PREFIX = "[SETTING:"
_SUFFIX = "]"
_UNSIGNED = re.compile(r"\+?[0-9]+")
_FIELD_COUNT = 8


def _parse_unsigned(text: str, bits: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if value >= 1 << bits:
        raise ValueError(text)
    return value


def _optional(text: str) -> str | None:
    return text or None


@dataclass(frozen=True)
class DeviceSettingDescription:
    """Description of a single setting; empty text fields are ``None``."""

    index: int
    group_index: int
    description: str | None
    unit: str | None
    value_type: int
    value_format: str | None
    value_min: str | None
    value_max: str | None

    def __str__(self) -> str:
        fields = [
            str(self.index),
            str(self.group_index),
            self.description or "-",
            self.unit or "-",
            str(self.value_type),
            self.value_format or "-",
            self.value_min or "-",
            self.value_max or "-",
        ]
        return f"DeviceSettingDescription [{','.join(fields)}]"


def parse_setting_description(message: str) -> DeviceSettingDescription:
    """Parse a line such as "[SETTING:0|27|Step pulse time|microseconds|6|#0.0|2.0|]"."""
    if not is_setting_description(message):
        raise ValueError(f'Cannot read setting description: "{message}"')
    fields = message.removeprefix(_PREFIX).removesuffix(_SUFFIX).split("|")
    if len(fields) != _FIELD_COUNT:
        raise ValueError(
            f'Expected 8 arguments for setting description: "{message}"'
        )
    index, group, description, unit, value_type, value_format, value_min, value_max = fields

    try:
        setting_index = _parse_unsigned(index, 32)
    except ValueError:
        raise ValueError(f'Cannot read setting index: "{index}"') from None
    try:
        group_index = _parse_unsigned(group, 32)
    except ValueError:
        raise ValueError(f'Cannot read group index: "{group}"') from None
    try:
        type_index = _parse_unsigned(value_type, 8)
    except ValueError:
        raise ValueError(f'Cannot read type index: "{value_type}"') from None

    return DeviceSettingDescription(
        index=setting_index,
        group_index=group_index,
        description=_optional(description),
        unit=_optional(unit),
        value_type=type_index,
        value_format=_optional(value_format),
        value_min=_optional(value_min),
        value_max=_optional(value_max),
    )


def is_setting_description(message: str) -> bool:
    """Tell whether ``message`` is wrapped in "[SETTING:" and "]"."""
    return message.startswith(_PREFIX) and message.endswith(_SUFFIX)