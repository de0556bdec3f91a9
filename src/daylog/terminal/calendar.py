# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from daylog.repository.configuration import CONFIGURATION_REPO
from daylog.repository.day import DAY_REPO
from daylog.service.calendar import CalendarNavigator
from daylog.service.navigation import NAVIGATION
from daylog.terminal.parse import parse_day
from daylog.time import now_local
from daylog.view.views.calendar import calendar_month_view
from daylog.view.views.day import day_detail_view


def calendar(
    back: Annotated[
        int,
        typer.Option("--back", "-b", help="months before the current one"),
    ] = 0,
) -> None:
    """Show a month with the days that have entries."""
    config = CONFIGURATION_REPO.get_config()
    navigator = CalendarNavigator(
        DAY_REPO, clock=now_local, lookback_months=config["lookback_months"]
    )

    NAVIGATION.open_calendar()
    for _ in range(back):
        if not navigator.previous_month():
            typer.echo(
                f"Only the last {config['lookback_months']} months can be browsed"
            )
            break

    calendar_month_view(navigator)


def day(
    date: Annotated[str, typer.Argument(help="YYYY-MM-DD")],
) -> None:
    """Show the entries and statistics of a day with entries."""
    key = parse_day(date)

    NAVIGATION.open_calendar()
    if not NAVIGATION.select_day(key):
        typer.echo(f"No entries on {key}")
        raise typer.Exit(1)

    day_detail_view(key, DAY_REPO.get_day(key))
