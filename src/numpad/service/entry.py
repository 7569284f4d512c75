# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from numpad.configuration import DEFAULT_DURATION_MAX_MINUTES
from numpad.model.entry import Entry
from numpad.model.quantity_type import QuantityType
from numpad.model.value_format import ValueFormat
from numpad.service.compound import get_compound_config
from numpad.service.duration_text import parse_duration_text
from numpad.service.value_format import format_value, parse_value
from numpad.template.entry import get_entry_template
from numpad.time import now_utc


class EntryValidationError(Exception):
    """Raised when entry validation fails."""

    pass


def parse_entry_text(quantity_type: QuantityType, text: str) -> Optional[float]:
    """
    Parse free text for a quantity type.

    Duration quantity types accept the free-form grammar ("1 hour 30 minutes",
    "90 min", "1:30"), everything else goes through the value format.
    """
    if quantity_type["value_format"] == ValueFormat.DURATION:
        return parse_duration_text(text)
    return parse_value(quantity_type["value_format"], text)


def has_entered_value(value: Optional[float], zero_is_empty: bool = False) -> bool:
    """
    Whether the user has entered a value.

    With zero_is_empty, 0 counts as nothing entered. Leave it off for
    quantities where zero is a legitimate reading.
    """
    if value is None:
        return False
    if zero_is_empty and value == 0:
        return False
    return True


def validate_entry_value(
    quantity_type: QuantityType,
    value: Optional[float],
    zero_is_empty: bool = False,
    duration_max_minutes: Optional[int] = DEFAULT_DURATION_MAX_MINUTES,
) -> float:
    """
    Validate a value for a standalone entry and return it.

    Raises EntryValidationError when no value was entered or a duration
    falls outside 0..duration_max_minutes. Compound results are not bounded,
    a type whose compound config cannot be decoded counts as standalone.
    """
    if not has_entered_value(value, zero_is_empty):
        raise EntryValidationError(f"Enter a value for '{quantity_type['name']}'.")
    assert value is not None

    if (
        quantity_type["value_format"] == ValueFormat.DURATION
        and get_compound_config(quantity_type) is None
        and duration_max_minutes is not None
    ):
        if value < 0 or value > duration_max_minutes:
            raise EntryValidationError(
                f"Duration must be between 0 min and "
                f"{format_value(ValueFormat.DURATION, duration_max_minutes)}. "
                f"Got: {format_value(ValueFormat.DURATION, value)}"
            )

    return value


def create_entry_for_quantity_type(
    quantity_type: QuantityType,
    value: float,
    timestamp: Optional[pendulum.DateTime] = None,
    notes: str = "",
) -> Entry:
    if quantity_type["id"] is None:
        raise ValueError("Quantity type must have an ID")

    entry = get_entry_template()
    entry["quantity_type_id"] = quantity_type["id"]
    entry["value"] = float(value)
    entry["timestamp"] = timestamp if timestamp is not None else now_utc()
    entry["notes"] = notes
    return entry


def format_entry_value(quantity_type: QuantityType, entry: Entry) -> str:
    return format_value(quantity_type["value_format"], entry["value"])
