# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from daylog.model.day import Day, DayKey
from daylog.model.elimination import Elimination
from daylog.model.intake import Intake
from daylog.service.day import aggregate_by_slot, day_totals, sorted_by_time
from daylog.time import SLOT_COUNT, day_key_to_display_str, slot_label
from daylog.view.views.header import header

INTAKE_COLOR = "sky_blue1"
ELIMINATION_COLOR = "gold1"
MAGNITUDE_LABELS = {1: "small", 2: "medium", 3: "large"}
CHART_WIDTH = 12


def magnitude_bars(magnitude: int) -> str:
    return "▮" * magnitude


def intake_table(intakes: list[Intake]) -> Table:
    table = Table(box=box.SIMPLE, title="Drinks", title_style=f"bold {INTAKE_COLOR}")
    table.add_column("#", justify="right")
    table.add_column("")
    table.add_column("type")
    table.add_column("time")
    table.add_column("amount", justify="right")

    for position, intake in enumerate(sorted_by_time(intakes), start=1):
        table.add_row(
            str(position),
            intake["glyph"],
            intake["category"],
            intake["time"],
            intake["quantity"],
            style=INTAKE_COLOR,
        )
    return table


def elimination_table(eliminations: list[Elimination]) -> Table:
    table = Table(box=box.SIMPLE, title="Pees", title_style=f"bold {ELIMINATION_COLOR}")
    table.add_column("#", justify="right")
    table.add_column("")
    table.add_column("time")
    table.add_column("size")

    for position, elimination in enumerate(sorted_by_time(eliminations), start=1):
        table.add_row(
            str(position),
            elimination["glyph"],
            elimination["time"],
            f"{magnitude_bars(elimination['magnitude'])} "
            f"{MAGNITUDE_LABELS[elimination['magnitude']]}",
            style=ELIMINATION_COLOR,
        )
    return table


def slot_chart(day: Day) -> Table:
    """Side-by-side bars of intake and elimination counts per 3-hour slot."""
    slots = aggregate_by_slot(day)
    max_value = max(
        [max(slot["intake_count"], slot["elimination_count"]) for slot in slots] + [1]
    )

    table = Table(box=box.SIMPLE, title="Activity by time", show_header=True)
    table.add_column("hours", justify="right")
    table.add_column("drinks")
    table.add_column("pees")

    for index in range(SLOT_COUNT):
        slot = slots[index]
        intake_bar = Text(
            "█" * round(slot["intake_count"] / max_value * CHART_WIDTH),
            style=INTAKE_COLOR,
        )
        if slot["intake_count"]:
            intake_bar.append(f" {slot['intake_count']}")
        elimination_bar = Text(
            "█" * round(slot["elimination_count"] / max_value * CHART_WIDTH),
            style=ELIMINATION_COLOR,
        )
        if slot["elimination_count"]:
            elimination_bar.append(f" {slot['elimination_count']}")
        table.add_row(slot_label(index), intake_bar, elimination_bar)
    return table


def totals_line(day: Day) -> str:
    totals = day_totals(day)
    line = f"{totals['intake_count']} drinks"
    if totals["intake_ml"]:
        line += f" ({totals['intake_ml']:g} ml)"
    line += f", {totals['elimination_count']} pees"
    return line


def home_view(key: DayKey, day: Day) -> None:
    """Today's drinks and pees, each sorted by time."""
    header("today")

    console = Console()
    console.print(f"\n[bold]{day_key_to_display_str(key)}[/bold]")
    console.print(intake_table(day["intake"]))
    console.print(elimination_table(day["elimination"]))
    if not day["intake"] and not day["elimination"]:
        console.print("[bright_black]Nothing logged yet today[/bright_black]")


def day_detail_view(key: DayKey, day: Day) -> None:
    """Read-only view of a past day with per-slot statistics."""
    header("day")

    console = Console()
    console.print(f"\n[bold]{day_key_to_display_str(key)}[/bold]")
    console.print(totals_line(day))
    console.print(slot_chart(day))
    console.print(intake_table(day["intake"]))
    console.print(elimination_table(day["elimination"]))
