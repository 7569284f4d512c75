# SPDX-License-Identifier: MIT

import csv
import io
from pathlib import Path
from typing import Optional

import pendulum
from loguru import logger

from numpad.model.aggregation_type import AggregationType
from numpad.model.entity_id import EntityId
from numpad.model.entry import Entry
from numpad.model.quantity_type import QuantityType
from numpad.service.value_format import format_value
from numpad.time import datetime_to_export_str, now_utc

CSV_HEADER = [
    "Timestamp",
    "Quantity Name",
    "Value",
    "Formatted Value",
    "Notes",
    "Aggregation Type",
    "Icon",
    "Color",
]


def export_entries_csv(
    entries: list[Entry], quantity_types: list[QuantityType]
) -> Optional[str]:
    """
    Render all entries as CSV, newest first.

    Returns None when there is nothing to export. Entries whose quantity type
    no longer exists are skipped.
    """
    if len(entries) == 0:
        return None

    quantity_types_by_id: dict[EntityId, QuantityType] = {
        quantity_type["id"]: quantity_type
        for quantity_type in quantity_types
        if quantity_type["id"] is not None
    }

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for entry in sorted(entries, key=lambda entry: entry["timestamp"], reverse=True):
        quantity_type = quantity_types_by_id.get(entry["quantity_type_id"])
        if quantity_type is None:
            logger.debug("Skipping orphaned entry {}", entry["id"])
            continue
        writer.writerow(
            [
                datetime_to_export_str(entry["timestamp"]),
                quantity_type["name"],
                repr(float(entry["value"])),
                format_value(quantity_type["value_format"], entry["value"]),
                entry["notes"],
                AggregationType(quantity_type["aggregation_type"]).display_name,
                quantity_type["icon"],
                quantity_type["color"],
            ]
        )

    return output.getvalue()


def generate_export_filename(now: Optional[pendulum.DateTime] = None) -> str:
    moment = now if now is not None else now_utc()
    return f"Numpad_Export_{moment.in_tz('local').format('YYYY-MM-DD')}.csv"


def write_export(directory: Path, csv_content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    file_path = directory / generate_export_filename()
    file_path.write_text(csv_content, encoding="utf-8")
    logger.info("Exported entries to {}", file_path)
    return file_path
