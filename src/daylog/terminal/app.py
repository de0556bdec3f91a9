# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from daylog.terminal import configuration, entry
from daylog.terminal.calendar import calendar, day
from daylog.terminal.custom_typer import AliasedTyperGroup
from daylog.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="daylog - Daily drinks and pees in the CLI",
    no_args_is_help=True,
)
app.command(name="today, t")(entry.today)
app.command(name="drink, d")(entry.drink)
app.command(name="pee, p")(entry.pee)
app.command(name="edit, e", no_args_is_help=True)(entry.edit)
app.command(name="delete, rm", no_args_is_help=True)(entry.delete)
app.command(name="calendar, c")(calendar)
app.command(name="day, dy", no_args_is_help=True)(day)
app.add_typer(configuration.app, name="config, cf")


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
) -> None:
    """
    daylog - Daily drinks and pees in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
