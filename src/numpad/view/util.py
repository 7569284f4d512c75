# SPDX-License-Identifier: MIT

from numpad.model.quantity_type import QuantityType


def colorize(value: str, color: str) -> str:
    """Wrap a cell in rich markup for a hex color, if one is set."""
    if color == "":
        return value
    return f"[{color}]{value}[/{color}]"


def format_flag(value: bool) -> str:
    return "✓" if value else ""


def describe_rule(quantity_type: QuantityType) -> str:
    """e.g. "Sum / Day", "Avg / All"."""
    return (
        f"{quantity_type['aggregation_type'].short_display_name} / "
        f"{quantity_type['aggregation_period'].short_display_name}"
    )
