import unittest

from helpers import fixed_clock

from daylog.model.entity_id import IdGenerator
from daylog.repository.day import DayRepository
from daylog.service.calendar import WEEKDAY_HEADERS, CalendarNavigator
from daylog.view.views.calendar import (
    HAS_DATA_STYLE,
    NO_DATA_STYLE,
    TODAY_EMPHASIS,
    day_style,
)


class TestCalendarNavigator(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = DayRepository(id_generator=IdGenerator())
        self.repo.load({})

    def test_starts_on_the_current_month(self) -> None:
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 6, 15))

        self.assertEqual(navigator.cursor, (2024, 6))
        self.assertTrue(navigator.can_go_back)
        self.assertFalse(navigator.can_go_forward)

    def test_forward_is_refused_on_the_current_month(self) -> None:
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 6, 15))

        self.assertFalse(navigator.next_month())
        self.assertEqual(navigator.cursor, (2024, 6))

    def test_back_is_limited_to_five_months(self) -> None:
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 6, 15))

        for expected in [(2024, 5), (2024, 4), (2024, 3), (2024, 2), (2024, 1)]:
            self.assertTrue(navigator.previous_month())
            self.assertEqual(navigator.cursor, expected)

        self.assertFalse(navigator.can_go_back)
        self.assertFalse(navigator.previous_month())
        self.assertEqual(navigator.cursor, (2024, 1))
        self.assertTrue(navigator.can_go_forward)

    def test_back_and_forward_cross_the_year_boundary(self) -> None:
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 2, 10))

        for expected in [(2024, 1), (2023, 12), (2023, 11), (2023, 10), (2023, 9)]:
            self.assertTrue(navigator.previous_month())
            self.assertEqual(navigator.cursor, expected)
        self.assertFalse(navigator.previous_month())

        for expected in [(2023, 10), (2023, 11), (2023, 12), (2024, 1), (2024, 2)]:
            self.assertTrue(navigator.next_month())
            self.assertEqual(navigator.cursor, expected)
        self.assertFalse(navigator.next_month())

    def test_lookback_is_configurable(self) -> None:
        navigator = CalendarNavigator(
            self.repo, clock=fixed_clock(2024, 6, 15), lookback_months=1
        )

        self.assertTrue(navigator.previous_month())
        self.assertFalse(navigator.previous_month())
        self.assertEqual(navigator.cursor, (2024, 5))

    def test_days_with_data_follow_the_cursor(self) -> None:
        self.repo.add_intake(
            "2024-06-03",
            {"glyph": "", "category": "Water", "time": "08:00", "quantity": ""},
        )
        self.repo.add_elimination(
            "2024-05-20", {"glyph": "", "time": "08:00", "magnitude": 2}
        )
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 6, 15))

        self.assertEqual(navigator.days_with_data(), {3})
        navigator.previous_month()
        self.assertEqual(navigator.days_with_data(), {20})
        navigator.previous_month()
        self.assertEqual(navigator.days_with_data(), set())

    def test_is_today_only_in_the_current_month(self) -> None:
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 6, 15))

        self.assertTrue(navigator.is_today(15))
        self.assertFalse(navigator.is_today(14))
        navigator.previous_month()
        self.assertFalse(navigator.is_today(15))

    def test_weeks_are_monday_first(self) -> None:
        # June 2024 starts on a Saturday
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 6, 15))

        weeks = navigator.weeks()

        self.assertEqual(len(WEEKDAY_HEADERS), 7)
        self.assertTrue(all(len(week) == 7 for week in weeks))
        self.assertEqual(weeks[0], [None, None, None, None, None, 1, 2])
        self.assertEqual(weeks[-1], [24, 25, 26, 27, 28, 29, 30])
        days = [day for week in weeks for day in week if day is not None]
        self.assertEqual(days, list(range(1, 31)))

    def test_weeks_pad_the_last_row(self) -> None:
        # April 2024 starts on a Monday
        navigator = CalendarNavigator(self.repo, clock=fixed_clock(2024, 4, 1))

        weeks = navigator.weeks()

        self.assertEqual(weeks[0], [1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(weeks[-1], [29, 30, None, None, None, None, None])


class TestCalendarDayStyle(unittest.TestCase):
    def test_today_keeps_its_has_data_colouring(self) -> None:
        with_data = day_style(has_data=True, is_today=True)
        without_data = day_style(has_data=False, is_today=True)

        self.assertNotEqual(with_data, without_data)
        self.assertIn(HAS_DATA_STYLE, with_data)
        self.assertIn(NO_DATA_STYLE, without_data)
        self.assertIn(TODAY_EMPHASIS, with_data)
        self.assertIn(TODAY_EMPHASIS, without_data)

    def test_other_days_are_not_emphasized(self) -> None:
        self.assertEqual(day_style(has_data=True, is_today=False), HAS_DATA_STYLE)
        self.assertEqual(day_style(has_data=False, is_today=False), NO_DATA_STYLE)


if __name__ == "__main__":
    unittest.main()
