# SPDX-License-Identifier: MIT

import re
from typing import Callable, Optional, TypeAlias

import pendulum

SLOT_COUNT = 8
SLOT_HOURS = 3

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_DAY_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")

Clock: TypeAlias = Callable[[], pendulum.DateTime]


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_key(now: Optional[pendulum.DateTime] = None) -> str:
    """Day key for the local wall-clock date, not UTC-normalized."""
    if now is None:
        now = now_local()
    return day_key(now.year, now.month, now.day)


def now_time(now: Optional[pendulum.DateTime] = None) -> str:
    if now is None:
        now = now_local()
    return f"{now.hour:02d}:{now.minute:02d}"


def time_slot(time: str) -> int:
    """Index of the 3-hour slot containing an HH:MM time, in [0, 7]."""
    hour = int(time.split(":")[0])
    return min(max(hour // SLOT_HOURS, 0), SLOT_COUNT - 1)


def slot_label(slot: int) -> str:
    start = slot * SLOT_HOURS
    return f"{start}-{start + SLOT_HOURS}"


def is_valid_time(time: str) -> bool:
    return _TIME_PATTERN.match(time) is not None


def normalize_time(time: str) -> str:
    """Pad H:MM to HH:MM so that lexical order matches clock order."""
    hour, minute = time.strip().split(":")
    return f"{int(hour):02d}:{int(minute):02d}"


def day_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_day_key(key: str) -> tuple[int, int, int]:
    """
    Split a day key into (year, month, day).

    Accepts both padded (2024-03-05) and unpadded (2024-3-5) keys.
    Raises ValueError for anything else, including impossible dates.
    """
    match = _DAY_KEY_PATTERN.match(key.strip())
    if match is None:
        raise ValueError(f"invalid day key: {key!r}")
    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
        raise ValueError(f"invalid day key: {key!r}")
    return year, month, day


def normalize_day_key(key: str) -> str:
    return day_key(*parse_day_key(key))


def day_key_to_date(key: str) -> pendulum.Date:
    return pendulum.date(*parse_day_key(key))


def day_key_to_display_str(key: str) -> str:
    """Long display form, e.g. 'March 5, 2024'."""
    return day_key_to_date(key).format("MMMM D, YYYY")


def month_display_str(year: int, month: int) -> str:
    return pendulum.date(year, month, 1).format("MMMM YYYY")


def days_in_month(year: int, month: int) -> int:
    return pendulum.date(year, month, 1).days_in_month


def first_weekday_offset(year: int, month: int) -> int:
    """Number of blank cells before the 1st in a Monday-first week grid."""
    # isoweekday is Monday=1..Sunday=7; fold into Sunday=0..Saturday=6
    sunday_first = pendulum.date(year, month, 1).isoweekday() % 7
    return 6 if sunday_first == 0 else sunday_first - 1
