# SPDX-License-Identifier: MIT

from enum import StrEnum


class AggregationType(StrEnum):
    SUM = "sum"
    AVERAGE = "average"
    MEDIAN = "median"
    MIN = "min"
    MAX = "max"
    COUNT = "count"

    @property
    def display_name(self) -> str:
        return {
            AggregationType.SUM: "Sum",
            AggregationType.AVERAGE: "Average",
            AggregationType.MEDIAN: "Median",
            AggregationType.MIN: "Minimum",
            AggregationType.MAX: "Maximum",
            AggregationType.COUNT: "Count",
        }[self]

    @property
    def short_display_name(self) -> str:
        return {
            AggregationType.SUM: "Sum",
            AggregationType.AVERAGE: "Avg",
            AggregationType.MEDIAN: "Median",
            AggregationType.MIN: "Min",
            AggregationType.MAX: "Max",
            AggregationType.COUNT: "Count",
        }[self]
