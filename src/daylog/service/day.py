# SPDX-License-Identifier: MIT

import re
from typing import Optional, TypeVar

from daylog.model.day import Day, DayTotals, SlotCount
from daylog.model.elimination import Elimination
from daylog.model.intake import Intake
from daylog.time import SLOT_COUNT, time_slot

_QUANTITY_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:ml)?\s*$", re.IGNORECASE)

T = TypeVar("T", Intake, Elimination)


def sorted_by_time(entries: list[T]) -> list[T]:
    """
    Order entries by their HH:MM time.

    Times are fixed-width and zero-padded so string order is clock order.
    sorted() is stable, so entries sharing a time keep their insertion order.
    """
    return sorted(entries, key=lambda entry: entry["time"])


def aggregate_by_slot(day: Day) -> list[SlotCount]:
    """Count intake and elimination events in each of the eight 3-hour slots."""
    slots: list[SlotCount] = [
        {"intake_count": 0, "elimination_count": 0} for _ in range(SLOT_COUNT)
    ]
    for intake in day["intake"]:
        slots[time_slot(intake["time"])]["intake_count"] += 1
    for elimination in day["elimination"]:
        slots[time_slot(elimination["time"])]["elimination_count"] += 1
    return slots


def parse_quantity_ml(quantity: str) -> Optional[float]:
    """Millilitres in a '<number> ml' quantity string, None if blank or not numeric."""
    match = _QUANTITY_PATTERN.match(quantity)
    if match is None:
        return None
    return float(match.group(1))


def day_totals(day: Day) -> DayTotals:
    intake_ml = 0.0
    for intake in day["intake"]:
        quantity = parse_quantity_ml(intake["quantity"])
        if quantity is not None:
            intake_ml += quantity
    return {
        "intake_count": len(day["intake"]),
        "elimination_count": len(day["elimination"]),
        "intake_ml": intake_ml,
    }
