# SPDX-License-Identifier: MIT

from typing import Optional

from numpad.model.aggregation_type import AggregationType
from numpad.model.compound import CompoundConfig
from numpad.model.entity_id import EntityId
from numpad.model.period import AggregationPeriod
from numpad.model.quantity_type import QuantityType
from numpad.model.value_format import ValueFormat
from numpad.service.compound import default_result_format, encode_compound_config
from numpad.template.quantity_type import get_quantity_type_template


class QuantityTypeValidationError(Exception):
    """Raised when a quantity type definition is invalid."""

    pass


# name, value format, icon
DEFAULT_QUANTITY_TYPES: list[tuple[str, ValueFormat, str]] = [
    ("Minutes Read", ValueFormat.DURATION, "book.fill"),
    ("Steps", ValueFormat.INTEGER, "figure.walk"),
    ("Calories", ValueFormat.INTEGER, "flame.fill"),
    ("Water (oz)", ValueFormat.DECIMAL, "drop.fill"),
]


def build_quantity_type(
    name: str,
    value_format: Optional[ValueFormat] = None,
    aggregation_type: AggregationType = AggregationType.SUM,
    aggregation_period: AggregationPeriod = AggregationPeriod.ALL_TIME,
    icon: Optional[str] = None,
    color: Optional[str] = None,
    sort_order: int = 0,
    compound_config: Optional[CompoundConfig] = None,
) -> QuantityType:
    """
    Build a new, unsaved quantity type.

    Compound quantity types without an explicit value format get a duration
    format for time differences and a decimal format otherwise.
    """
    if not name.strip():
        raise QuantityTypeValidationError("Quantity type name cannot be empty.")

    quantity_type = get_quantity_type_template()
    quantity_type["name"] = name.strip()
    quantity_type["aggregation_type"] = aggregation_type
    quantity_type["aggregation_period"] = aggregation_period
    quantity_type["sort_order"] = sort_order
    if icon is not None:
        quantity_type["icon"] = icon
    if color is not None:
        quantity_type["color"] = color

    if compound_config is not None:
        validate_compound_config(compound_config)
        quantity_type["is_compound"] = True
        quantity_type["compound_config"] = encode_compound_config(compound_config)
        if value_format is None:
            value_format = default_result_format(compound_config["operation"])

    quantity_type["value_format"] = (
        value_format if value_format is not None else ValueFormat.INTEGER
    )
    return quantity_type


def validate_compound_config(compound_config: CompoundConfig) -> None:
    if (
        not compound_config["input1_label"].strip()
        or not compound_config["input2_label"].strip()
    ):
        raise QuantityTypeValidationError("Compound inputs need a label each.")


def get_default_quantity_types() -> list[QuantityType]:
    return [
        build_quantity_type(name, value_format, icon=icon, sort_order=index)
        for index, (name, value_format, icon) in enumerate(DEFAULT_QUANTITY_TYPES)
    ]


def sort_quantity_types(
    quantity_types: list[QuantityType], include_hidden: bool = False
) -> list[QuantityType]:
    """Order by manual sort order, oldest first on ties."""
    visible = [
        quantity_type
        for quantity_type in quantity_types
        if include_hidden or not quantity_type["hidden"]
    ]
    return sorted(
        visible,
        key=lambda quantity_type: (quantity_type["sort_order"], quantity_type["created"]),
    )


def get_most_recently_used(
    quantity_types: list[QuantityType],
) -> Optional[QuantityType]:
    if len(quantity_types) == 0:
        return None
    return max(quantity_types, key=lambda quantity_type: quantity_type["last_used"])


def find_quantity_type_by_name(
    quantity_types: list[QuantityType], name: str
) -> Optional[QuantityType]:
    """Case-insensitive lookup, the way spoken names are matched."""
    wanted = name.strip().lower()
    for quantity_type in quantity_types:
        if quantity_type["name"].lower() == wanted:
            return quantity_type
    return None


def get_next_sort_order(quantity_types: list[QuantityType]) -> int:
    if len(quantity_types) == 0:
        return 0
    return max(quantity_type["sort_order"] for quantity_type in quantity_types) + 1


def move_quantity_type(
    quantity_types: list[QuantityType], id: EntityId, new_index: int
) -> dict[EntityId, int]:
    """
    Move one quantity type to a new position in the manual order.

    Returns the new sort order of every quantity type whose position changed.
    """
    ordered = sort_quantity_types(quantity_types, include_hidden=True)
    moving = [quantity_type for quantity_type in ordered if quantity_type["id"] == id]
    if len(moving) == 0:
        raise QuantityTypeValidationError(f"Unknown quantity type: {id}")

    ordered.remove(moving[0])
    new_index = max(0, min(new_index, len(ordered)))
    ordered.insert(new_index, moving[0])

    changes: dict[EntityId, int] = {}
    for index, quantity_type in enumerate(ordered):
        if quantity_type["id"] is not None and quantity_type["sort_order"] != index:
            changes[quantity_type["id"]] = index
    return changes
