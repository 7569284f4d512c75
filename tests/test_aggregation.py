"""Tests for service/aggregation.py."""

import pytest

from numpad.model.aggregation_type import AggregationType
from numpad.service.aggregation import aggregate


@pytest.mark.parametrize("aggregation_type", list(AggregationType))
def test_empty_values_aggregate_to_zero(aggregation_type):
    assert aggregate(aggregation_type, []) == 0.0


@pytest.mark.parametrize(
    "aggregation_type, expected",
    [
        (AggregationType.SUM, 10.0),
        (AggregationType.AVERAGE, 2.5),
        (AggregationType.MEDIAN, 2.5),
        (AggregationType.MIN, 1.0),
        (AggregationType.MAX, 4.0),
        (AggregationType.COUNT, 4.0),
    ],
)
def test_aggregate(aggregation_type, expected):
    assert aggregate(aggregation_type, [3.0, 1.0, 4.0, 2.0]) == expected


def test_median_of_odd_count_is_middle_value():
    assert aggregate(AggregationType.MEDIAN, [3.0, 1.0, 2.0]) == 2.0


def test_count_ignores_values():
    assert aggregate(AggregationType.COUNT, [100.0, 0.0, -5.0]) == 3.0


def test_negative_values_are_kept():
    assert aggregate(AggregationType.MIN, [-30.0, 15.0]) == -30.0
    assert aggregate(AggregationType.SUM, [-30.0, 15.0]) == -15.0


def test_display_names():
    assert AggregationType.MIN.display_name == "Minimum"
    assert AggregationType.AVERAGE.short_display_name == "Avg"
