# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from numpad.model.entity_id import EntityId
from numpad.model.quantity_type import QuantityType
from numpad.repository.id_map import ID_MAP_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO
from numpad.service.quantity_type import (
    find_quantity_type_by_name,
    get_most_recently_used,
)
from numpad.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        return datetime_from_str_utc(datetime)

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Relative days (e.g., "-1" for this time yesterday)
    if re.match(r"^-?\d+$", datetime):
        return pendulum.now("local").add(days=int(datetime)).in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.now("local").subtract(days=1).in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def resolve_quantity_type(reference: str) -> QuantityType:
    """
    Find a quantity type by its short id or, failing that, by name.

    "." refers to the most recently used quantity type.
    """
    if reference == ".":
        quantity_type = get_most_recently_used(
            QUANTITY_TYPE_REPO.get_all_quantity_types()
        )
        if quantity_type is None:
            raise typer.BadParameter("No quantity types yet")
        return quantity_type

    if reference.isdigit():
        real_id = ID_MAP_REPO.get_real_id("quantity_types", int(reference))
        if real_id is not None:
            return QUANTITY_TYPE_REPO.get_quantity_type(real_id)

    quantity_type = find_quantity_type_by_name(
        QUANTITY_TYPE_REPO.get_all_quantity_types(), reference
    )
    if quantity_type is None:
        raise typer.BadParameter(f"Could not find quantity type '{reference}'")
    return quantity_type


def resolve_entry_id(reference: int) -> EntityId:
    real_id = ID_MAP_REPO.get_real_id("entries", reference)
    if real_id is None:
        raise typer.BadParameter(f"Unknown entry id: {reference}")
    return real_id
