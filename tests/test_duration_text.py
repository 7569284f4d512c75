"""Tests for service/duration_text.py: free-form duration text."""

import pytest

from numpad.service.duration_text import parse_duration_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5 hours", 90.0),
        ("90 minutes", 90.0),
        ("2:30", 150.0),
        ("45", 45.0),
        ("1 hour 30 minutes", 90.0),
        ("1 hour and 30 minutes", 90.0),
        ("2 hrs 15 min", 135.0),
        ("1h30m", 90.0),
        ("3 h", 180.0),
        ("20 m", 20.0),
        ("90 seconds", 1.5),
        ("30 sec", 0.5),
        ("  1 HOUR  ", 60.0),
        ("1 hour, 30 minutes", 90.0),
        ("1,200 seconds", 20.0),
        ("1,440", 1440.0),
    ],
)
def test_parse_duration_text(text, expected):
    assert parse_duration_text(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text",
    ["", "   ", "a while", "hours", "an hour", "1 day", "5 steps", "20 mints"],
)
def test_unrecognised_text_is_none(text):
    assert parse_duration_text(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("I read for 20 minutes", 20.0),
        ("about 45 min", 45.0),
        ("20 minutes ago", 20.0),
        ("log 1 hour 30 minutes", 90.0),
        ("1 hr 30", 60.0),
        ("1 hour 30 fortnights", 60.0),
        ("rested 90 seconds", 1.5),
    ],
)
def test_units_are_found_inside_longer_text(text, expected):
    assert parse_duration_text(text) == pytest.approx(expected)


def test_clock_and_bare_number_must_be_whole_text():
    assert parse_duration_text("at 1:30 today") is None
    assert parse_duration_text("about 45") is None
