# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from numpad.repository.entry import ENTRY_REPO
from numpad.repository.id_map import ID_MAP_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO
from numpad.service.export import export_entries_csv, write_export
from numpad.service.quantity_type import get_default_quantity_types
from numpad.terminal import configuration, entry, quantity_type
from numpad.terminal.custom_typer import OrderedAliasedTyperGroup
from numpad.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Numpad - Track quantities from the CLI",
    no_args_is_help=True,
)
app.add_typer(quantity_type.app, name="quantity, q", help="Manage quantity types")
app.add_typer(entry.app, name="entry, e", help="Log and manage entries")
app.add_typer(configuration.app, name="config, c", help="Show or change settings")


@app.command("export, x")
def export(
    directory: Annotated[
        Optional[Path],
        typer.Option("--dir", "-d", help="Target directory (default: current directory)"),
    ] = None,
    to_stdout: Annotated[
        bool, typer.Option("--stdout", help="Print the CSV instead of writing a file")
    ] = False,
) -> None:
    """Export every entry as CSV."""
    csv_content = export_entries_csv(
        ENTRY_REPO.get_all_entries(), QUANTITY_TYPE_REPO.get_all_quantity_types()
    )
    if csv_content is None:
        typer.echo("Nothing to export")
        raise typer.Exit(1)

    if to_stdout:
        typer.echo(csv_content, nl=False)
        return

    file_path = write_export(directory if directory is not None else Path.cwd(), csv_content)
    typer.echo(f"Exported to {file_path}")


@app.command("seed")
def seed() -> None:
    """Create the starter quantity types when none exist yet."""
    if len(QUANTITY_TYPE_REPO.get_all_quantity_types()) > 0:
        typer.echo("Quantity types already exist, nothing to seed")
        return

    default_quantity_types = get_default_quantity_types()
    for default_quantity_type in default_quantity_types:
        QUANTITY_TYPE_REPO.save_new_quantity_type(default_quantity_type)
    typer.echo(f"Created {len(default_quantity_types)} quantity types")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    clear_ids: Annotated[
        bool,
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Clear ID map",
        ),
    ] = False,
) -> None:
    """
    Numpad - Track quantities from the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if clear_ids:
        ID_MAP_REPO.clear_ids()


def run() -> None:
    app()
