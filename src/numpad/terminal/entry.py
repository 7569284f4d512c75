# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer
from loguru import logger

from numpad.model.entity_id import EntityId
from numpad.model.quantity_type import QuantityType
from numpad.repository.configuration import CONFIGURATION_REPO
from numpad.repository.entry import ENTRY_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO
from numpad.service.compound import evaluate_compound_inputs, get_compound_config
from numpad.service.entry import (
    EntryValidationError,
    create_entry_for_quantity_type,
    parse_entry_text,
    validate_entry_value,
)
from numpad.terminal.custom_typer import AliasedTyperGroup
from numpad.terminal.parse import parse_datetime, resolve_entry_id, resolve_quantity_type
from numpad.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

TIMESTAMP_HELP = "valid inputs: YYYY-MM-DD HH:mm, (H)H:mm, now, yesterday, or day offset like -1"

COMPOUND_ERRORS = {
    "first_input": "Could not read the first input",
    "second_input": "Could not read the second input",
    "divide_by_zero": "Cannot divide by zero",
}


def _validated_value(quantity_type: QuantityType, value: Optional[float]) -> float:
    config = CONFIGURATION_REPO.get_config()
    try:
        return validate_entry_value(
            quantity_type,
            value,
            zero_is_empty=config["zero_is_empty"],
            duration_max_minutes=config["duration_max_minutes"],
        )
    except EntryValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)


def _save(
    quantity_type: QuantityType,
    value: float,
    timestamp: Optional[pendulum.DateTime],
    notes: str,
) -> None:
    entry = create_entry_for_quantity_type(quantity_type, value, timestamp, notes)
    id = ENTRY_REPO.save_new_entry(entry)
    QUANTITY_TYPE_REPO.touch_last_used(cast(EntityId, quantity_type["id"]))
    logger.info("Logged {} for {}", value, quantity_type["name"])

    entry_report.single_entry_view(ENTRY_REPO.get_entry(id), quantity_type)


@app.command("log, l", no_args_is_help=True)
def log(
    reference: str,
    value: str,
    notes: Annotated[str, typer.Option("--notes", "-n")] = "",
    timestamp: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--timestamp", "-ts", parser=parse_datetime, help=TIMESTAMP_HELP),
    ] = None,
) -> None:
    """
    Log a value for a quantity type.

    Duration quantities accept text like "1 hour 30 minutes", "90 min" or "1:30".
    """
    quantity_type = resolve_quantity_type(reference)
    if get_compound_config(quantity_type) is not None:
        typer.echo(
            f"Error: '{quantity_type['name']}' is a compound quantity, use 'entry compound'"
        )
        raise typer.Exit(1)

    parsed = parse_entry_text(quantity_type, value)
    _save(quantity_type, _validated_value(quantity_type, parsed), timestamp, notes)


@app.command("compound, c", no_args_is_help=True)
def compound(
    reference: str,
    first: str,
    second: str,
    notes: Annotated[str, typer.Option("--notes", "-n")] = "",
    timestamp: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--timestamp", "-ts", parser=parse_datetime, help=TIMESTAMP_HELP),
    ] = None,
) -> None:
    """
    Log a compound quantity from its two inputs.

    Time differences take two clock times ("9:00" "17:30") or full datetimes.
    """
    quantity_type = resolve_quantity_type(reference)
    config = get_compound_config(quantity_type)
    if config is None:
        typer.echo(f"Error: '{quantity_type['name']}' is not a compound quantity")
        raise typer.Exit(1)

    evaluation = evaluate_compound_inputs(config, first, second)
    if evaluation["error"] is not None:
        message = COMPOUND_ERRORS[evaluation["error"]]
        if evaluation["error"] == "first_input":
            message = f"{message} ({config['input1_label']})"
        elif evaluation["error"] == "second_input":
            message = f"{message} ({config['input2_label']})"
        typer.echo(f"Error: {message}")
        raise typer.Exit(1)

    _save(
        quantity_type,
        _validated_value(quantity_type, evaluation["value"]),
        timestamp,
        notes,
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    value: Annotated[Optional[str], typer.Option("--value", "-v")] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    timestamp: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--timestamp", "-ts", parser=parse_datetime, help=TIMESTAMP_HELP),
    ] = None,
) -> None:
    """Modify the value, notes or timestamp of an entry."""
    real_id = resolve_entry_id(id)
    entry = ENTRY_REPO.get_entry(real_id)
    quantity_type = QUANTITY_TYPE_REPO.get_quantity_type(entry["quantity_type_id"])

    new_value: Optional[float] = None
    if value is not None:
        new_value = _validated_value(
            quantity_type, parse_entry_text(quantity_type, value)
        )

    ENTRY_REPO.modify_entry(real_id, value=new_value, notes=notes, timestamp=timestamp)
    entry_report.single_entry_view(ENTRY_REPO.get_entry(real_id), quantity_type)


@app.command("delete, d", no_args_is_help=True)
def delete(id: int) -> None:
    """Delete an entry."""
    real_id = resolve_entry_id(id)
    ENTRY_REPO.delete_entry(real_id)
    typer.echo(f"Deleted entry {id}")


@app.command("list, ls", no_args_is_help=True)
def list_entries(
    reference: str,
    limit: Annotated[Optional[int], typer.Option("--limit", "-l")] = None,
    no_wrap: Annotated[bool, typer.Option("--no-wrap", "-nw")] = False,
) -> None:
    """List entries of a quantity type, newest first."""
    quantity_type = resolve_quantity_type(reference)
    entries = ENTRY_REPO.get_entries_for_quantity_type(
        cast(EntityId, quantity_type["id"])
    )
    if limit is not None:
        entries = entries[:limit]
    entry_report.entries_view(quantity_type, entries, no_wrap)
