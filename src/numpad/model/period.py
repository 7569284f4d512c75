# SPDX-License-Identifier: MIT

from enum import StrEnum


class AggregationPeriod(StrEnum):
    """Rolling window that decides which entries count toward the current total."""

    ALL_TIME = "allTime"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def display_name(self) -> str:
        return {
            AggregationPeriod.ALL_TIME: "All Time",
            AggregationPeriod.DAILY: "Daily",
            AggregationPeriod.WEEKLY: "Weekly",
            AggregationPeriod.MONTHLY: "Monthly",
        }[self]

    @property
    def short_display_name(self) -> str:
        return {
            AggregationPeriod.ALL_TIME: "All",
            AggregationPeriod.DAILY: "Day",
            AggregationPeriod.WEEKLY: "Week",
            AggregationPeriod.MONTHLY: "Month",
        }[self]


class GroupingPeriod(StrEnum):
    """Display-time bucketing for historical breakdowns."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"

    @property
    def display_name(self) -> str:
        if self is GroupingPeriod.ALL:
            return "All Time"
        return self.value.capitalize()
