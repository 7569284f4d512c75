# SPDX-License-Identifier: MIT

from collections import defaultdict
from typing import Optional

import pendulum

from numpad.configuration import WeekStart
from numpad.model.entry import Entry
from numpad.model.grouped_total import GroupedTotal
from numpad.model.period import GroupingPeriod
from numpad.model.quantity_type import QuantityType
from numpad.repository.source import QuantitySource
from numpad.service.aggregation import aggregate
from numpad.service.period import (
    DISTANT_PAST,
    filter_entries,
    format_period_label,
    get_bucket_start,
    get_window_start,
)
from numpad.time import now_utc


def select_entries(quantity_type: QuantityType, entries: list[Entry]) -> list[Entry]:
    return [
        entry for entry in entries if entry["quantity_type_id"] == quantity_type["id"]
    ]


def calculate_total(
    quantity_type: QuantityType,
    entries: list[Entry],
    now: Optional[pendulum.DateTime] = None,
    week_start: WeekStart = "monday",
) -> float:
    """
    Current total of a quantity type.

    Keeps the entries owned by the quantity type, drops those before the start
    of its aggregation window around `now`, and aggregates what is left.
    """
    reference = now if now is not None else now_utc()
    owned_entries = select_entries(quantity_type, entries)
    window_entries = filter_entries(
        quantity_type["aggregation_period"], owned_entries, reference, week_start
    )
    return aggregate(
        quantity_type["aggregation_type"], [entry["value"] for entry in window_entries]
    )


def calculate_total_from_source(
    quantity_type: QuantityType,
    source: QuantitySource,
    now: Optional[pendulum.DateTime] = None,
    week_start: WeekStart = "monday",
) -> float:
    """Same result as calculate_total, with the window bound pushed to the source."""
    if quantity_type["id"] is None:
        return 0.0
    reference = now if now is not None else now_utc()
    since = get_window_start(quantity_type["aggregation_period"], reference, week_start)
    entries = source.entries(quantity_type["id"], since)
    return aggregate(
        quantity_type["aggregation_type"], [entry["value"] for entry in entries]
    )


def calculate_grouped_totals(
    quantity_type: QuantityType,
    entries: list[Entry],
    grouping_period: GroupingPeriod,
    week_start: WeekStart = "monday",
) -> list[GroupedTotal]:
    """
    Break the history of a quantity type down by grouping period.

    The grouping period is independent of the quantity type's own aggregation
    period. Each group is aggregated with the quantity type's aggregation type
    and groups are returned most recent first. Grouping by "all" always yields
    exactly one group, even without entries.
    """
    owned_entries = select_entries(quantity_type, entries)
    aggregation_type = quantity_type["aggregation_type"]

    if grouping_period == GroupingPeriod.ALL:
        return [
            {
                "period_label": format_period_label(grouping_period, DISTANT_PAST),
                "total": aggregate(
                    aggregation_type, [entry["value"] for entry in owned_entries]
                ),
                "count": len(owned_entries),
                "bucket_start": DISTANT_PAST,
            }
        ]

    buckets: dict[pendulum.DateTime, list[float]] = defaultdict(list)
    for entry in owned_entries:
        bucket_start = get_bucket_start(grouping_period, entry["timestamp"], week_start)
        buckets[bucket_start].append(entry["value"])

    grouped_totals: list[GroupedTotal] = [
        {
            "period_label": format_period_label(grouping_period, bucket_start),
            "total": aggregate(aggregation_type, values),
            "count": len(values),
            "bucket_start": bucket_start,
        }
        for bucket_start, values in buckets.items()
    ]
    grouped_totals.sort(key=lambda grouped: grouped["bucket_start"], reverse=True)
    return grouped_totals
