import pytest

from grblkit.fields import (
    ArcMode,
    PendantControl,
    get_arc_mode,
    get_pendant_control,
    is_arc_mode,
    is_firmware,
    is_input_wait_result,
    is_line_number,
    is_pendant_control,
    is_tool_length_reference,
    parse_arc_mode,
    parse_firmware,
    parse_input_wait_result,
    parse_line_number,
    parse_pendant_control,
    parse_tool_length_reference,
)


def test_parse_firmware_example():
    assert parse_firmware("FW:grblHAL") == "grblHAL"


def test_parse_firmware_wrong_prefix():
    with pytest.raises(ValueError, match="Cannot read firmware message"):
        parse_firmware("fw:grblHAL")
    assert is_firmware("FW:")
    assert not is_firmware("Ln:1")


@pytest.mark.parametrize("text", ["32", "-7", "0", "2147483647"])
def test_parse_line_number_round_trip(text):
    assert parse_line_number("Ln:" + text) == int(text)


@pytest.mark.parametrize("text", ["", "abc", "2147483648", " 3", "3.0"])
def test_parse_line_number_bad_value(text):
    with pytest.raises(ValueError, match="Cannot read line number"):
        parse_line_number("Ln:" + text)


def test_parse_line_number_wrong_prefix():
    with pytest.raises(ValueError, match="Cannot read line number"):
        parse_line_number("N:32")
    assert is_line_number("Ln:32")


@pytest.mark.parametrize("message, expected", [("In:-1", False), ("In:0", True), ("In:1", True)])
def test_parse_input_wait_result(message, expected):
    assert parse_input_wait_result(message) is expected


@pytest.mark.parametrize("message", ["In:2", "In:-2", "In:127"])
def test_input_wait_result_out_of_range(message):
    with pytest.raises(ValueError, match="Cannot interpret input wait result"):
        parse_input_wait_result(message)


@pytest.mark.parametrize("message", ["In:x", "In:", "In:128"])
def test_input_wait_result_unreadable(message):
    with pytest.raises(ValueError, match="Cannot read input wait result"):
        parse_input_wait_result(message)


def test_input_wait_result_prefix():
    assert is_input_wait_result("In:0")
    with pytest.raises(ValueError, match="Cannot read input wait result"):
        parse_input_wait_result("Out:0")


def test_arc_modes():
    assert parse_arc_mode("D:0") is ArcMode.RADIUS
    assert parse_arc_mode("D:1") is ArcMode.DIAMETER
    assert get_arc_mode("1") is ArcMode.DIAMETER


def test_arc_mode_errors():
    with pytest.raises(ValueError, match="Unknown arc mode"):
        parse_arc_mode("D:2")
    with pytest.raises(ValueError, match="Cannot read arc mode message"):
        parse_arc_mode("A:0")
    assert is_arc_mode("D:0")


def test_pendant_control():
    assert parse_pendant_control("MPG:1") is PendantControl.TAKEN
    assert parse_pendant_control("MPG:0") is PendantControl.RELEASED
    assert get_pendant_control(1) is PendantControl.TAKEN


def test_pendant_control_errors():
    with pytest.raises(ValueError, match="Unknown pendant control state 2"):
        parse_pendant_control("MPG:2")
    with pytest.raises(ValueError, match="Cannot interpret pendant control state"):
        parse_pendant_control("MPG:on")
    with pytest.raises(ValueError, match="Cannot read pendant control message"):
        parse_pendant_control("PG:1")
    assert is_pendant_control("MPG:1")


@pytest.mark.parametrize("message, expected", [("TLR:1", True), ("TLR:0", False), ("TLR:5", False)])
def test_tool_length_reference(message, expected):
    assert parse_tool_length_reference(message) is expected


def test_tool_length_reference_errors():
    with pytest.raises(ValueError, match="Cannot interpret tool reference length"):
        parse_tool_length_reference("TLR:yes")
    with pytest.raises(ValueError, match="Cannot read tool reference length"):
        parse_tool_length_reference("TL:1")
    assert is_tool_length_reference("TLR:1")