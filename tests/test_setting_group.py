import pytest

from grblkit.setting_group import (
    DeviceSettingGroup,
    is_setting_group,
    parse_setting_group,
)


def test_parse_documented_example():
    group = parse_setting_group("[SETTINGGROUP:30|29|X-axis]")
    assert group.index == 30
    assert group.parent_group_index == 29
    assert group.name == "X-axis"


def test_str():
    group = parse_setting_group("[SETTINGGROUP:30|29|X-axis]")
    assert str(group) == "DeviceSettingGroup [30,29,X-axis]"


@pytest.mark.parametrize(
    "group",
    [DeviceSettingGroup(0, 0, "Root"), DeviceSettingGroup(7, 3, "Spindle speed")],
)
def test_round_trip(group):
    line = f"[SETTINGGROUP:{group.index}|{group.parent_group_index}|{group.name}]"
    assert parse_setting_group(line) == group


def test_empty_name_allowed():
    assert parse_setting_group("[SETTINGGROUP:1|0|]").name == ""


def test_is_setting_group():
    assert is_setting_group("[SETTINGGROUP:30|29|X-axis]")
    assert not is_setting_group("[SETTING:0|27|a|b|6|c|d|e]")
    assert not is_setting_group("[SETTINGGROUP:30|29|X-axis")


def test_bad_index():
    with pytest.raises(ValueError, match="Cannot read setting group index"):
        parse_setting_group("[SETTINGGROUP:x|29|X-axis]")


def test_bad_parent_index():
    with pytest.raises(ValueError, match="parent index"):
        parse_setting_group("[SETTINGGROUP:30|-29|X-axis]")


def test_wrong_field_count():
    with pytest.raises(ValueError, match="Cannot read setting group:"):
        parse_setting_group("[SETTINGGROUP:30|29]")


def test_not_a_group():
    with pytest.raises(ValueError, match="Cannot read setting group:"):
        parse_setting_group("[MSG:X-axis]")