# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from numpad import configuration
from numpad.model.period import GroupingPeriod
from numpad.repository.configuration import CONFIGURATION_REPO
from numpad.service.value_format import format_duration
from numpad.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("week_start", config["week_start"])
    table.add_row("zero_is_empty", _enabled(config["zero_is_empty"]))
    table.add_row(
        "duration_max_minutes",
        format_duration(config["duration_max_minutes"])
        if config["duration_max_minutes"] is not None
        else "None (unbounded)",
    )
    table.add_row("default_grouping", config.get("default_grouping", "day"))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_to_file", _enabled(config["log_to_file"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    return table


@app.command("show, s")
def show() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table())

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable report headers",
        ),
    ] = None,
    week_start: Annotated[
        Optional[str],
        typer.Option("--week-start", help="monday or sunday"),
    ] = None,
    zero_is_empty: Annotated[
        Optional[bool],
        typer.Option(
            "--zero-is-empty/--no-zero-is-empty",
            help="Treat an entered 0 as no value",
        ),
    ] = None,
    duration_max_minutes: Annotated[
        Optional[int],
        typer.Option(
            "--duration-max-minutes",
            help="Upper bound for duration entries, in minutes",
        ),
    ] = None,
    remove_duration_max_minutes: Annotated[
        bool,
        typer.Option(
            "--remove-duration-max-minutes",
            help="Allow duration entries of any length",
        ),
    ] = False,
    default_grouping: Annotated[
        Optional[GroupingPeriod],
        typer.Option("--default-grouping", help="day, week, month, year, all"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    ] = None,
    log_to_file: Annotated[
        Optional[bool],
        typer.Option(
            "--log-to-file/--no-log-to-file",
            help="Also write logs to the data directory",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    if week_start is not None and week_start not in ("monday", "sunday"):
        raise typer.BadParameter("week start must be 'monday' or 'sunday'")
    if duration_max_minutes is not None and duration_max_minutes <= 0:
        raise typer.BadParameter("duration max must be a positive number of minutes")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        week_start=week_start,  # type: ignore[arg-type]
        zero_is_empty=zero_is_empty,
        duration_max_minutes=duration_max_minutes,
        remove_duration_max_minutes=remove_duration_max_minutes,
        log_level=log_level,
        log_to_file=log_to_file,
        default_grouping=default_grouping.value if default_grouping is not None else None,  # type: ignore[arg-type]
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table("Updated Configuration"))
