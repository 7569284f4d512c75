"""Builders for quantity types and entries used across tests."""

from typing import Optional

import pendulum

from numpad.model.aggregation_type import AggregationType
from numpad.model.entity_id import generate_entity_id
from numpad.model.entry import Entry
from numpad.model.period import AggregationPeriod
from numpad.model.quantity_type import QuantityType
from numpad.model.value_format import ValueFormat
from numpad.service.quantity_type import build_quantity_type
from numpad.template.entry import get_entry_template


def local(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0
) -> pendulum.DateTime:
    """Wall-clock time in the pinned local timezone, as UTC."""
    return pendulum.datetime(year, month, day, hour, minute, tz="local").in_tz("UTC")


def make_quantity_type(
    name: str = "Steps",
    value_format: ValueFormat = ValueFormat.INTEGER,
    aggregation_type: AggregationType = AggregationType.SUM,
    aggregation_period: AggregationPeriod = AggregationPeriod.ALL_TIME,
) -> QuantityType:
    quantity_type = build_quantity_type(
        name,
        value_format=value_format,
        aggregation_type=aggregation_type,
        aggregation_period=aggregation_period,
    )
    quantity_type["id"] = generate_entity_id()
    return quantity_type


def make_entry(
    quantity_type: QuantityType,
    value: float,
    timestamp: pendulum.DateTime,
    notes: str = "",
    id: Optional[str] = None,
) -> Entry:
    entry = get_entry_template()
    entry["id"] = id if id is not None else generate_entity_id()
    entry["quantity_type_id"] = quantity_type["id"]  # type: ignore[typeddict-item]
    entry["value"] = value
    entry["timestamp"] = timestamp
    entry["notes"] = notes
    return entry
