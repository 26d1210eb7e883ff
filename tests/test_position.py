import math

import pytest

from grblkit.axis import Axis
from grblkit.position import (
    is_coordinate_system,
    is_global_position,
    is_local_position,
    is_local_position_offset,
    is_scaled_axes,
    parse_coordinate_system,
    parse_global_position,
    parse_local_position,
    parse_local_position_offset,
    parse_position,
    parse_scaled_axes,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3.21,2.0,-1", [3.21, 2.0, -1.0]),
        ("3.21,2.0,-1,0.0", [3.21, 2.0, -1.0, 0.0]),
        ("3.21,2.0,-1,0.0,15", [3.21, 2.0, -1.0, 0.0, 15.0]),
        ("7", [7.0]),
    ],
)
def test_parse_position(text, expected):
    assert parse_position(text) == pytest.approx(expected)


def test_six_axes_is_the_limit():
    assert len(parse_position("1,2,3,4,5,6")) == 6
    with pytest.raises(ValueError, match="Invalid count of axis"):
        parse_position("1,2,3,4,5,6,7")


def test_special_float_values():
    values = parse_position("inf,-inf,NaN")
    assert len(values) == 3
    assert values[0] == math.inf
    assert values[1] == -math.inf
    assert math.isnan(values[2])


@pytest.mark.parametrize("text", ["1,x,3", "1, 2", "1,,3", "1_0,2"])
def test_bad_axis_value(text):
    with pytest.raises(ValueError, match="Cannot read axis:"):
        parse_position(text)


def test_bad_axis_reports_index():
    with pytest.raises(ValueError, match='Cannot read axis:1 "x"'):
        parse_position("1,x,3")


def test_empty_position():
    with pytest.raises(ValueError, match='Cannot read axis:0 ""'):
        parse_position("")


def test_prefixed_positions():
    assert parse_local_position("WPos:3.21,2.0,-1") == pytest.approx([3.21, 2.0, -1.0])
    assert parse_global_position("MPos:3.21,2.0,-1") == pytest.approx([3.21, 2.0, -1.0])
    assert parse_local_position_offset("WCO:3.21,2.0,-1") == pytest.approx(
        [3.21, 2.0, -1.0]
    )


def test_prefixed_positions_reject_other_prefixes():
    with pytest.raises(ValueError, match="not a local position message"):
        parse_local_position("MPos:1,2,3")
    with pytest.raises(ValueError, match="not a global position message"):
        parse_global_position("WPos:1,2,3")
    with pytest.raises(ValueError, match="not a local position offset message"):
        parse_local_position_offset("WPos:1,2,3")


def test_prefix_checks():
    assert is_local_position("WPos:1")
    assert is_global_position("MPos:1")
    assert is_local_position_offset("WCO:1")
    assert not is_local_position("MPos:1")


def test_coordinate_system():
    assert parse_coordinate_system("WCS:G54") == "G54"
    assert is_coordinate_system("WCS:G55")


def test_coordinate_system_must_start_with_g():
    with pytest.raises(ValueError, match='Cannot read coordinate system "54"'):
        parse_coordinate_system("WCS:54")
    with pytest.raises(ValueError, match="coordinate system message"):
        parse_coordinate_system("G54")


def test_scaled_axes():
    assert parse_scaled_axes("Sc:XZ") == [Axis.X, Axis.Z]
    assert parse_scaled_axes("Sc:") == []
    assert is_scaled_axes("Sc:X")


def test_scaled_axes_errors():
    with pytest.raises(ValueError, match='Unknown scaled axis "Q"'):
        parse_scaled_axes("Sc:XQ")
    with pytest.raises(ValueError, match="Cannot read scaled axes message"):
        parse_scaled_axes("XZ")