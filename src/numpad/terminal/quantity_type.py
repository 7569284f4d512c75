# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from loguru import logger

from numpad.model.aggregation_type import AggregationType
from numpad.model.compound import CompoundConfig, CompoundOperation
from numpad.model.entity_id import EntityId
from numpad.model.period import AggregationPeriod, GroupingPeriod
from numpad.model.quantity_type import QuantityType
from numpad.model.value_format import ValueFormat
from numpad.repository.configuration import CONFIGURATION_REPO
from numpad.repository.entry import ENTRY_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO
from numpad.repository.source import RepositorySource
from numpad.service.compound import encode_compound_config
from numpad.service.invalidation import TotalsCache
from numpad.service.quantity_aggregator import calculate_grouped_totals
from numpad.service.quantity_type import (
    QuantityTypeValidationError,
    build_quantity_type,
    get_next_sort_order,
    move_quantity_type,
    sort_quantity_types,
    validate_compound_config,
)
from numpad.service.value_format import format_value
from numpad.terminal.custom_typer import AliasedTyperGroup
from numpad.terminal.parse import resolve_quantity_type
from numpad.view.views import analytics as analytics_report
from numpad.view.views import quantity_type as quantity_type_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


_TOTALS_CACHE: Optional[TotalsCache] = None


def _totals_cache() -> TotalsCache:
    """One cache for the process, rebuilt when the week start setting changes."""
    global _TOTALS_CACHE
    week_start = CONFIGURATION_REPO.get_config()["week_start"]
    if _TOTALS_CACHE is None or _TOTALS_CACHE.week_start != week_start:
        if _TOTALS_CACHE is not None:
            _TOTALS_CACHE.close()
        _TOTALS_CACHE = TotalsCache(RepositorySource(), week_start=week_start)
    return _TOTALS_CACHE


def _current_total(quantity_type: QuantityType) -> float:
    return _totals_cache().get_total(quantity_type)


def _build_compound_config(
    operation: Optional[CompoundOperation],
    input1_label: Optional[str],
    input1_format: ValueFormat,
    input2_label: Optional[str],
    input2_format: ValueFormat,
) -> Optional[CompoundConfig]:
    if operation is None:
        return None
    if input1_label is None or input2_label is None:
        typer.echo("Error: compound quantity types need --input1 and --input2 labels")
        raise typer.Exit(1)
    return {
        "input1_label": input1_label,
        "input1_format": input1_format,
        "input2_label": input2_label,
        "input2_format": input2_format,
        "operation": operation,
    }


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    value_format: Annotated[
        Optional[ValueFormat],
        typer.Option("--format", "-f", help="integer, decimal, duration"),
    ] = None,
    aggregation_type: Annotated[
        AggregationType,
        typer.Option("--aggregation", "-a", help="sum, average, median, min, max, count"),
    ] = AggregationType.SUM,
    aggregation_period: Annotated[
        AggregationPeriod,
        typer.Option("--period", "-p", help="allTime, daily, weekly, monthly"),
    ] = AggregationPeriod.ALL_TIME,
    icon: Annotated[Optional[str], typer.Option("--icon", "-i")] = None,
    color: Annotated[Optional[str], typer.Option("--color", "-col")] = None,
    operation: Annotated[
        Optional[CompoundOperation],
        typer.Option(
            "--compound",
            "-c",
            help="divide, multiply, add, subtract, timeDifference",
        ),
    ] = None,
    input1_label: Annotated[Optional[str], typer.Option("--input1")] = None,
    input1_format: Annotated[
        ValueFormat, typer.Option("--input1-format")
    ] = ValueFormat.DECIMAL,
    input2_label: Annotated[Optional[str], typer.Option("--input2")] = None,
    input2_format: Annotated[
        ValueFormat, typer.Option("--input2-format")
    ] = ValueFormat.DECIMAL,
) -> None:
    """Create a new quantity type."""
    compound_config = _build_compound_config(
        operation, input1_label, input1_format, input2_label, input2_format
    )

    try:
        quantity_type = build_quantity_type(
            name,
            value_format=value_format,
            aggregation_type=aggregation_type,
            aggregation_period=aggregation_period,
            icon=icon,
            color=color,
            sort_order=get_next_sort_order(QUANTITY_TYPE_REPO.get_all_quantity_types()),
            compound_config=compound_config,
        )
    except QuantityTypeValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    id = QUANTITY_TYPE_REPO.save_new_quantity_type(quantity_type)
    quantity_type_report.single_quantity_type_view(
        QUANTITY_TYPE_REPO.get_quantity_type(id), 0.0
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    reference: str,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    value_format: Annotated[Optional[ValueFormat], typer.Option("--format", "-f")] = None,
    aggregation_type: Annotated[
        Optional[AggregationType], typer.Option("--aggregation", "-a")
    ] = None,
    aggregation_period: Annotated[
        Optional[AggregationPeriod], typer.Option("--period", "-p")
    ] = None,
    icon: Annotated[Optional[str], typer.Option("--icon", "-i")] = None,
    color: Annotated[Optional[str], typer.Option("--color", "-col")] = None,
    operation: Annotated[
        Optional[CompoundOperation], typer.Option("--compound", "-c")
    ] = None,
    input1_label: Annotated[Optional[str], typer.Option("--input1")] = None,
    input1_format: Annotated[
        ValueFormat, typer.Option("--input1-format")
    ] = ValueFormat.DECIMAL,
    input2_label: Annotated[Optional[str], typer.Option("--input2")] = None,
    input2_format: Annotated[
        ValueFormat, typer.Option("--input2-format")
    ] = ValueFormat.DECIMAL,
    remove_compound: Annotated[
        bool, typer.Option("--remove-compound", "-rc")
    ] = False,
) -> None:
    """Modify a quantity type (by id or name)."""
    quantity_type = resolve_quantity_type(reference)
    quantity_type_id = cast(EntityId, quantity_type["id"])

    compound_config = _build_compound_config(
        operation, input1_label, input1_format, input2_label, input2_format
    )
    encoded_compound_config = None
    if compound_config is not None:
        try:
            validate_compound_config(compound_config)
        except QuantityTypeValidationError as e:
            typer.echo(f"Error: {e}")
            raise typer.Exit(1)
        encoded_compound_config = encode_compound_config(compound_config)

    if name is not None and not name.strip():
        typer.echo("Error: Quantity type name cannot be empty.")
        raise typer.Exit(1)

    QUANTITY_TYPE_REPO.modify_quantity_type(
        quantity_type_id,
        name=name.strip() if name is not None else None,
        value_format=value_format,
        aggregation_type=aggregation_type,
        aggregation_period=aggregation_period,
        icon=icon,
        color=color,
        compound_config=encoded_compound_config,
        remove_compound=remove_compound,
    )

    modified = QUANTITY_TYPE_REPO.get_quantity_type(quantity_type_id)
    quantity_type_report.single_quantity_type_view(
        modified, _current_total(modified)
    )


@app.command("delete, d", no_args_is_help=True)
def delete(
    reference: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Delete a quantity type and all of its entries."""
    quantity_type = resolve_quantity_type(reference)
    quantity_type_id = cast(EntityId, quantity_type["id"])

    entry_count = len(ENTRY_REPO.get_entries_for_quantity_type(quantity_type_id))
    if not yes:
        typer.confirm(
            f"Delete '{quantity_type['name']}' and its {entry_count} entries?",
            abort=True,
        )

    removed = QUANTITY_TYPE_REPO.delete_quantity_type(quantity_type_id)
    logger.info("Deleted quantity type {} with {} entries", quantity_type["name"], removed)
    typer.echo(f"Deleted '{quantity_type['name']}' and {removed} entries")


@app.command("hide, h", no_args_is_help=True)
def hide(reference: str) -> None:
    """Hide a quantity type from the default list."""
    quantity_type = resolve_quantity_type(reference)
    QUANTITY_TYPE_REPO.modify_quantity_type(
        cast(EntityId, quantity_type["id"]), hidden=True
    )
    typer.echo(f"Hid '{quantity_type['name']}'")


@app.command("unhide, uh", no_args_is_help=True)
def unhide(reference: str) -> None:
    """Show a hidden quantity type again."""
    quantity_type = resolve_quantity_type(reference)
    QUANTITY_TYPE_REPO.modify_quantity_type(
        cast(EntityId, quantity_type["id"]), hidden=False
    )
    typer.echo(f"Unhid '{quantity_type['name']}'")


@app.command("move, mv", no_args_is_help=True)
def move(reference: str, position: int) -> None:
    """Move a quantity type to a position in the list (1 = first)."""
    quantity_type = resolve_quantity_type(reference)
    changes = move_quantity_type(
        QUANTITY_TYPE_REPO.get_all_quantity_types(),
        cast(EntityId, quantity_type["id"]),
        position - 1,
    )
    for quantity_type_id, sort_order in changes.items():
        QUANTITY_TYPE_REPO.modify_quantity_type(quantity_type_id, sort_order=sort_order)
    list_quantity_types(include_hidden=False)


@app.command("list, ls")
def list_quantity_types(
    include_hidden: Annotated[
        bool, typer.Option("--all", "-a", help="Include hidden quantity types")
    ] = False,
) -> None:
    """List quantity types with their current totals."""
    quantity_types = sort_quantity_types(
        QUANTITY_TYPE_REPO.get_all_quantity_types(), include_hidden=include_hidden
    )
    totals = {
        cast(EntityId, quantity_type["id"]): _current_total(quantity_type)
        for quantity_type in quantity_types
    }
    quantity_type_report.quantity_types_view("quantities", quantity_types, totals)


@app.command("show, s", no_args_is_help=True)
def show(reference: str) -> None:
    """Show a quantity type."""
    quantity_type = resolve_quantity_type(reference)
    quantity_type_report.single_quantity_type_view(
        quantity_type, _current_total(quantity_type)
    )


@app.command("total, t", no_args_is_help=True)
def total(reference: str) -> None:
    """Print the current total of a quantity type."""
    quantity_type = resolve_quantity_type(reference)
    current_total = _current_total(quantity_type)
    typer.echo(format_value(quantity_type["value_format"], current_total))


@app.command("history, hi", no_args_is_help=True)
def history(
    reference: str,
    grouping_period: Annotated[
        Optional[GroupingPeriod],
        typer.Option("--by", "-b", help="day, week, month, year, all"),
    ] = None,
) -> None:
    """Show totals grouped by day, week, month, year or all time."""
    config = CONFIGURATION_REPO.get_config()
    if grouping_period is None:
        grouping_period = GroupingPeriod(config.get("default_grouping", "day"))

    quantity_type = resolve_quantity_type(reference)
    entries = ENTRY_REPO.get_entries_for_quantity_type(
        cast(EntityId, quantity_type["id"])
    )
    grouped_totals = calculate_grouped_totals(
        quantity_type, entries, grouping_period, config["week_start"]
    )
    analytics_report.grouped_totals_view(quantity_type, grouping_period, grouped_totals)
