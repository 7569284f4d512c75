# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from loguru import logger

from numpad.configuration import WeekStart
from numpad.model.entry import Entry
from numpad.model.period import AggregationPeriod, GroupingPeriod

# Bucket start used for the single "all" group
DISTANT_PAST = pendulum.datetime(1, 1, 1, tz="UTC")

WEEK_START_WEEKDAY: dict[str, int] = {
    "monday": 0,
    "sunday": 6,
}


def get_window_start(
    period: AggregationPeriod,
    reference: pendulum.DateTime,
    week_start: WeekStart = "monday",
) -> Optional[pendulum.DateTime]:
    """
    Get the inclusive lower bound of the aggregation window containing reference.

    Boundaries follow the local calendar and are returned in UTC. None means
    the window has no lower bound, which is the case for all-time windows and
    the fallback whenever the calendar computation fails.
    """
    if period == AggregationPeriod.ALL_TIME:
        return None

    try:
        local_time = reference.in_tz("local")
        match period:
            case AggregationPeriod.DAILY:
                start = local_time.start_of("day")
            case AggregationPeriod.WEEKLY:
                start = start_of_week(local_time, week_start)
            case AggregationPeriod.MONTHLY:
                start = local_time.start_of("month")
            case _:
                raise ValueError(f"Unknown aggregation period: {period}")
    except (ValueError, OverflowError) as e:
        logger.warning(
            "Could not compute {} window for {}, using all entries: {}",
            period,
            reference,
            e,
        )
        return None

    return start.in_tz("UTC")


def start_of_week(
    local_time: pendulum.DateTime, week_start: WeekStart = "monday"
) -> pendulum.DateTime:
    start_of_day = local_time.start_of("day")
    offset = (start_of_day.weekday() - WEEK_START_WEEKDAY[week_start]) % 7
    return start_of_day.subtract(days=offset)


def is_within_window(
    timestamp: pendulum.DateTime, window_start: Optional[pendulum.DateTime]
) -> bool:
    return window_start is None or timestamp >= window_start


def filter_entries(
    period: AggregationPeriod,
    entries: list[Entry],
    reference: pendulum.DateTime,
    week_start: WeekStart = "monday",
) -> list[Entry]:
    """Keep entries at or after the start of the window containing reference."""
    window_start = get_window_start(period, reference, week_start)
    if window_start is None:
        return list(entries)
    return [
        entry for entry in entries if is_within_window(entry["timestamp"], window_start)
    ]


def get_bucket_start(
    grouping_period: GroupingPeriod,
    timestamp: pendulum.DateTime,
    week_start: WeekStart = "monday",
) -> pendulum.DateTime:
    """
    Start of the group a timestamp falls into, in UTC.

    When the local calendar cannot place the timestamp it goes into its UTC
    day, so entries from the same day still share a group.
    """
    if grouping_period == GroupingPeriod.ALL:
        return DISTANT_PAST

    try:
        local_time = timestamp.in_tz("local")
        match grouping_period:
            case GroupingPeriod.DAY:
                start = local_time.start_of("day")
            case GroupingPeriod.WEEK:
                start = start_of_week(local_time, week_start)
            case GroupingPeriod.MONTH:
                start = local_time.start_of("month")
            case GroupingPeriod.YEAR:
                start = local_time.start_of("year")
            case _:
                raise ValueError(f"Unknown grouping period: {grouping_period}")
    except (ValueError, OverflowError) as e:
        logger.warning(
            "Could not compute {} bucket for {}, grouping by UTC day: {}",
            grouping_period,
            timestamp,
            e,
        )
        return timestamp.in_tz("UTC").start_of("day")

    return start.in_tz("UTC")


def format_period_label(
    grouping_period: GroupingPeriod, bucket_start: pendulum.DateTime
) -> str:
    """
    Human readable label for a group.

    Weeks are labelled by their first and seventh day. When those fall in
    different years both dates carry their year.
    """
    if grouping_period == GroupingPeriod.ALL:
        return "All Time"

    local_start = bucket_start.in_tz("local")

    match grouping_period:
        case GroupingPeriod.DAY:
            return local_start.format("MMM D, YYYY")
        case GroupingPeriod.WEEK:
            local_end = local_start.add(days=6)
            if local_start.year != local_end.year:
                return (
                    f"{local_start.format('MMM D, YYYY')} - "
                    f"{local_end.format('MMM D, YYYY')}"
                )
            return f"{local_start.format('MMM D')} - {local_end.format('MMM D')}"
        case GroupingPeriod.MONTH:
            return local_start.format("MMMM YYYY")
        case GroupingPeriod.YEAR:
            return local_start.format("YYYY")
    raise ValueError(f"Unknown grouping period: {grouping_period}")
