# SPDX-License-Identifier: MIT

from typing import Optional

from daylog.configuration import DEFAULT_LOOKBACK_MONTHS
from daylog.repository.day import DayRepository
from daylog.time import Clock, days_in_month, first_weekday_offset, now_local

WEEKDAY_HEADERS = ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]


def _month_index(year: int, month: int) -> int:
    return year * 12 + (month - 1)


class CalendarNavigator:
    """
    Month cursor for the calendar screen.

    The cursor can move back at most `lookback_months` months before the
    real current month and never past it. Both bounds are measured from the
    clock, not from the cursor.
    """

    def __init__(
        self,
        day_repo: DayRepository,
        clock: Clock = now_local,
        lookback_months: int = DEFAULT_LOOKBACK_MONTHS,
    ) -> None:
        self._day_repo = day_repo
        self._clock = clock
        self._lookback_months = lookback_months
        now = clock()
        self.year = now.year
        self.month = now.month

    @property
    def cursor(self) -> tuple[int, int]:
        return self.year, self.month

    def __current_index(self) -> int:
        now = self._clock()
        return _month_index(now.year, now.month)

    @property
    def can_go_back(self) -> bool:
        earliest = self.__current_index() - self._lookback_months
        return _month_index(self.year, self.month) > earliest

    @property
    def can_go_forward(self) -> bool:
        return _month_index(self.year, self.month) < self.__current_index()

    def previous_month(self) -> bool:
        if not self.can_go_back:
            return False
        if self.month == 1:
            self.year -= 1
            self.month = 12
        else:
            self.month -= 1
        return True

    def next_month(self) -> bool:
        if not self.can_go_forward:
            return False
        if self.month == 12:
            self.year += 1
            self.month = 1
        else:
            self.month += 1
        return True

    def days_with_data(self) -> set[int]:
        return self._day_repo.days_with_data_in_month(self.year, self.month)

    def is_today(self, day: int) -> bool:
        now = self._clock()
        return (now.year, now.month, now.day) == (self.year, self.month, day)

    def weeks(self) -> list[list[Optional[int]]]:
        """Monday-first rows of day numbers, padded with None."""
        cells: list[Optional[int]] = [None] * first_weekday_offset(self.year, self.month)
        cells.extend(range(1, days_in_month(self.year, self.month) + 1))
        cells.extend([None] * (-len(cells) % 7))
        return [cells[index : index + 7] for index in range(0, len(cells), 7)]
