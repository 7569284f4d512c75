# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.table import Table

from numpad.model.entity_id import EntityId
from numpad.model.quantity_type import QuantityType
from numpad.repository.id_map import ID_MAP_REPO
from numpad.service.compound import get_compound_config
from numpad.service.value_format import format_value
from numpad.time import datetime_to_display_local_datetime_str
from numpad.view.util import colorize, describe_rule, format_flag
from numpad.view.views.header import header


def quantity_types_view(
    report_name: str,
    quantity_types: list[QuantityType],
    totals: dict[EntityId, float],
    use_color: bool = True,
) -> None:
    """Display quantity types with their current totals."""
    header(report_name)

    table = Table(box=box.SIMPLE)
    for column in ("id", "name", "total", "rule", "format", "compound", "hidden"):
        table.add_column(column, justify="right" if column == "total" else "left")

    for quantity_type in quantity_types:
        quantity_type_id = cast(EntityId, quantity_type["id"])
        row = [
            str(ID_MAP_REPO.associate_id("quantity_types", quantity_type_id)),
            quantity_type["name"],
            format_value(quantity_type["value_format"], totals.get(quantity_type_id, 0.0)),
            describe_rule(quantity_type),
            quantity_type["value_format"].display_name,
            format_flag(quantity_type["is_compound"]),
            format_flag(quantity_type["hidden"]),
        ]
        if use_color:
            row = [colorize(value, quantity_type["color"]) for value in row]
        table.add_row(*row)

    console = Console()
    console.print(table)


def single_quantity_type_view(
    quantity_type: QuantityType, total: Optional[float] = None
) -> None:
    """Display detailed view of a single quantity type."""
    header("quantity type")

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")

    table.add_row(
        "id",
        str(
            ID_MAP_REPO.associate_id(
                "quantity_types", cast(EntityId, quantity_type["id"])
            )
        ),
    )
    table.add_row("name", quantity_type["name"])
    table.add_row("format", quantity_type["value_format"].display_name)
    table.add_row("aggregation", quantity_type["aggregation_type"].display_name)
    table.add_row("period", quantity_type["aggregation_period"].display_name)
    if total is not None:
        table.add_row("total", format_value(quantity_type["value_format"], total))
    table.add_row("icon", quantity_type["icon"])
    table.add_row("color", colorize(quantity_type["color"], quantity_type["color"]))
    table.add_row("sort order", str(quantity_type["sort_order"]))
    table.add_row("hidden", format_flag(quantity_type["hidden"]))

    compound_config = get_compound_config(quantity_type)
    if compound_config is not None:
        table.add_row(
            "compound",
            f"{compound_config['input1_label']} "
            f"{compound_config['operation'].symbol} "
            f"{compound_config['input2_label']}",
        )
    elif quantity_type["is_compound"]:
        table.add_row("compound", "[red]invalid configuration[/red]")

    table.add_row(
        "last used", datetime_to_display_local_datetime_str(quantity_type["last_used"])
    )
    table.add_row(
        "created", datetime_to_display_local_datetime_str(quantity_type["created"])
    )

    console = Console()
    console.print(table)
