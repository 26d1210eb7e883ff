"""Setting group report ("[SETTINGGROUP:<index>|<parent>|<name>]")."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PREFIX = "[SETTINGGROUP:"
_SUFFIX = "]"
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if value >= 1 << 32:
        raise ValueError(text)
    return value


@dataclass(frozen=True)
class DeviceSettingGroup:
    """A named group of settings with its parent group."""

    index: int
    parent_group_index: int
    name: str

    def __str__(self) -> str:
        return f"DeviceSettingGroup [{self.index},{self.parent_group_index},{self.name}]"


def parse_setting_group(message: str) -> DeviceSettingGroup:
    """Parse a line such as "[SETTINGGROUP:30|29|X-axis]"."""
    if is_setting_group(message):
        parts = message.removeprefix(_PREFIX).removesuffix(_SUFFIX).split("|")
        if len(parts) == 3:
            index_text, parent_text, name = parts
            try:
                index = _parse_u32(index_text)
            except ValueError:
                raise ValueError(
                    f'Cannot read setting group index: "{index_text}"'
                ) from None
            try:
                parent = _parse_u32(parent_text)
            except ValueError:
                raise ValueError(
                    f'Cannot read setting group parent index: "{parent_text}"'
                ) from None
            return DeviceSettingGroup(index, parent, name)
    raise ValueError(f'Cannot read setting group: "{message}"')


def is_setting_group(message: str) -> bool:
    """Tell whether ``message`` is wrapped in "[SETTINGGROUP:" and "]"."""
    return message.startswith(_PREFIX) and message.endswith(_SUFFIX)