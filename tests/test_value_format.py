"""Tests for service/value_format.py: parsing and formatting typed values."""

import pytest

from numpad.model.value_format import ValueFormat
from numpad.service.value_format import (
    format_duration,
    format_value,
    parse_number,
    parse_value,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42.0),
        ("  7.5 ", 7.5),
        ("1,234", 1234.0),
        ("1,234.56", 1234.56),
        ("-3", -3.0),
        (".5", 0.5),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "12abc", "1.2.3", "nan", "inf", "1_000"])
def test_parse_number_rejects_non_numeric(text):
    assert parse_number(text) is None


def test_integer_and_decimal_share_number_parsing():
    assert parse_value(ValueFormat.INTEGER, "2,500") == 2500.0
    assert parse_value(ValueFormat.DECIMAL, "8.25") == 8.25
    assert parse_value(ValueFormat.DECIMAL, "eight") is None


def test_format_integer_rounds():
    assert format_value(ValueFormat.INTEGER, 1234.0) == "1234"
    assert format_value(ValueFormat.INTEGER, 199.6) == "200"


def test_format_decimal_has_two_places():
    assert format_value(ValueFormat.DECIMAL, 8) == "8.00"
    assert format_value(ValueFormat.DECIMAL, 3.14159) == "3.14"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2:05", 125.0),
        ("0:45", 45.0),
        ("10:00", 600.0),
        ("45", 45.0),
        ("45 min", 45.0),
        ("-0:30", -30.0),
    ],
)
def test_parse_duration(text, expected):
    assert parse_value(ValueFormat.DURATION, text) == expected


@pytest.mark.parametrize("text", ["1:2:3", "a:30", "soon", ""])
def test_parse_duration_rejects_garbage(text):
    assert parse_value(ValueFormat.DURATION, text) is None


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (125.0, "2:05"),
        (60.0, "1:00"),
        (45.0, "45 min"),
        (0.0, "0 min"),
        (59.9, "59 min"),
        (-90.0, "-1:30"),
        (-15.0, "-15 min"),
    ],
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


@pytest.mark.parametrize("minutes", [0.0, 5.0, 59.0, 60.0, 125.0, 1439.0])
def test_duration_format_parses_back(minutes):
    text = format_value(ValueFormat.DURATION, minutes)
    assert parse_value(ValueFormat.DURATION, text) == minutes


def test_value_format_display_names():
    assert ValueFormat.DURATION.display_name == "Duration (HH:MM)"
    assert ValueFormat.INTEGER.display_name == "Integer"
