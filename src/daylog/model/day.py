# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

from daylog.model.elimination import Elimination
from daylog.model.intake import Intake

DayKey: TypeAlias = str  # YYYY-MM-DD


class Day(TypedDict):
    intake: list[Intake]
    elimination: list[Elimination]


class SlotCount(TypedDict):
    intake_count: int
    elimination_count: int


class DayTotals(TypedDict):
    intake_count: int
    elimination_count: int
    intake_ml: float


def empty_day() -> Day:
    return {"intake": [], "elimination": []}


def is_empty_day(day: Day) -> bool:
    return not day["intake"] and not day["elimination"]
