# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table

from numpad.model.entity_id import EntityId
from numpad.model.entry import Entry
from numpad.model.quantity_type import QuantityType
from numpad.repository.id_map import ID_MAP_REPO
from numpad.service.entry import format_entry_value
from numpad.time import datetime_to_display_local_datetime_str
from numpad.view.views.header import header


def entries_view(
    quantity_type: QuantityType,
    entries: list[Entry],
    no_wrap: bool = False,
) -> None:
    """Display list of entries for a quantity type."""
    header(f"entries for {quantity_type['name']}")

    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("timestamp")
    table.add_column("value", justify="right")
    if no_wrap:
        table.add_column("notes", no_wrap=True, overflow="ellipsis")
    else:
        table.add_column("notes")

    for entry in entries:
        table.add_row(
            str(ID_MAP_REPO.associate_id("entries", cast(EntityId, entry["id"]))),
            datetime_to_display_local_datetime_str(entry["timestamp"]),
            format_entry_value(quantity_type, entry),
            entry["notes"],
        )

    console = Console()
    console.print(table)


def single_entry_view(entry: Entry, quantity_type: QuantityType) -> None:
    """Display detailed view of a single entry."""
    header("entry")

    table = Table(box=box.SIMPLE)
    table.add_column("property")
    table.add_column("value")

    table.add_row(
        "id",
        str(ID_MAP_REPO.associate_id("entries", cast(EntityId, entry["id"]))),
    )
    table.add_row("quantity", quantity_type["name"])
    table.add_row("timestamp", datetime_to_display_local_datetime_str(entry["timestamp"]))
    table.add_row("value", format_entry_value(quantity_type, entry))
    table.add_row("raw value", repr(entry["value"]))
    table.add_row("notes", entry["notes"])
    table.add_row("updated", datetime_to_display_local_datetime_str(entry["updated"]))

    console = Console()
    console.print(table)
