# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from daylog.service.calendar import WEEKDAY_HEADERS, CalendarNavigator
from daylog.time import month_display_str
from daylog.view.views.header import header

HAS_DATA_STYLE = "bold sky_blue1"
NO_DATA_STYLE = "bright_black"
TODAY_EMPHASIS = "reverse"


def day_style(has_data: bool, is_today: bool) -> str:
    """Has-data colouring, with today drawn reversed on top of it."""
    style = HAS_DATA_STYLE if has_data else NO_DATA_STYLE
    if is_today:
        style = f"{style} {TODAY_EMPHASIS}"
    return style


def calendar_month_view(navigator: CalendarNavigator) -> None:
    """
    Month grid, Monday first.

    Days with at least one entry are highlighted and can be opened with
    the day command; today is marked whether or not it has data.
    """
    header("calendar")

    days_with_data = navigator.days_with_data()

    back = "◀" if navigator.can_go_back else " "
    forward = "▶" if navigator.can_go_forward else " "
    title = f"{back}  {month_display_str(navigator.year, navigator.month)}  {forward}"

    table = Table(box=box.SIMPLE, title=title, title_style="bold")
    for weekday in WEEKDAY_HEADERS:
        table.add_column(weekday, justify="right")

    for week in navigator.weeks():
        row: list[Text] = []
        for day in week:
            if day is None:
                row.append(Text(""))
                continue
            style = day_style(day in days_with_data, navigator.is_today(day))
            row.append(Text(f"{day:>2}", style=style))
        table.add_row(*row)

    console = Console()
    console.print(table)
    console.print(
        f"[bright_black]{len(days_with_data)} day(s) with entries[/bright_black]"
    )
