# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from daylog import configuration
from daylog.repository.configuration import CONFIGURATION_REPO
from daylog.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("storage_key", config["storage_key"])
    table.add_row("default_intake_category", config["default_intake_category"])
    table.add_row("lookback_months", str(config["lookback_months"]))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )

    console.print(table)

@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the data slot"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="use the platform data directory"),
    ] = False,
    storage_key: Annotated[Optional[str], typer.Option("--storage-key")] = None,
    default_intake_category: Annotated[
        Optional[str],
        typer.Option("--default-drink-type", help="label for drinks logged without one"),
    ] = None,
    lookback_months: Annotated[
        Optional[int],
        typer.Option("--lookback-months", help="how far back the calendar goes"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(configuration.LOG_LEVELS)),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in configuration.LOG_LEVELS:
        valid_options = ", ".join(configuration.LOG_LEVELS)
        typer.echo(f"Invalid log level: {log_level}. Valid options: {valid_options}")
        raise typer.Exit(1)
    if lookback_months is not None and lookback_months < 0:
        typer.echo("lookback_months must not be negative")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        storage_key=storage_key,
        default_intake_category=default_intake_category,
        lookback_months=lookback_months,
        log_level=log_level.upper() if log_level is not None else None,
        show_header=show_header,
    )
    CONFIGURATION_REPO.flush()

    view()
