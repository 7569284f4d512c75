# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from numpad.model.grouped_total import GroupedTotal
from numpad.model.period import GroupingPeriod
from numpad.model.quantity_type import QuantityType
from numpad.service.value_format import format_value
from numpad.view.views.header import header


def grouped_totals_view(
    quantity_type: QuantityType,
    grouping_period: GroupingPeriod,
    grouped_totals: list[GroupedTotal],
) -> None:
    """
    Display a quantity type's history broken down by grouping period.

    Steps - by Week (Sum)

    period           total    entries
    ──────────────────────────────────
    Oct 13 - Oct 19  42,000   6
    Oct 6 - Oct 12   38,500   7
    """
    header("history")

    console = Console()
    console.print(
        f"\n[bold]{quantity_type['name']}[/bold] - by {grouping_period.display_name} "
        f"({quantity_type['aggregation_type'].display_name})"
    )

    table = Table(box=box.SIMPLE)
    table.add_column("period")
    table.add_column("total", justify="right")
    table.add_column("entries", justify="right")

    for grouped_total in grouped_totals:
        table.add_row(
            grouped_total["period_label"],
            format_value(quantity_type["value_format"], grouped_total["total"]),
            str(grouped_total["count"]),
        )

    console.print(table)
