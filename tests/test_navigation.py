import unittest

from helpers import fixed_clock

from daylog.model.entity_id import IdGenerator
from daylog.model.entity_type import EntityType
from daylog.model.navigation import DeleteIntent, EditTarget, NavigationState, Screen
from daylog.repository.day import DayRepository
from daylog.service.navigation import NavigationController

TODAY = "2024-03-05"


class TestNavigationController(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = DayRepository(id_generator=IdGenerator())
        self.repo.load({})
        self.navigation = NavigationController(
            self.repo, clock=fixed_clock(2024, 3, 5, 9, 30)
        )

    def add_intake(self, key: str = TODAY, time: str = "08:00") -> int:
        return self.repo.add_intake(
            key, {"glyph": "", "category": "Water", "time": time, "quantity": ""}
        )["id"]

    def add_elimination(self, key: str = TODAY, time: str = "08:00") -> int:
        return self.repo.add_elimination(
            key, {"glyph": "", "time": time, "magnitude": 2}
        )["id"]

    def test_starts_home_with_nothing_pending(self) -> None:
        self.assertEqual(self.navigation.state, NavigationState())
        self.assertEqual(self.navigation.state.screen, Screen.HOME)
        self.assertEqual(self.navigation.today_key, TODAY)

    def test_calendar_round_trip(self) -> None:
        self.assertTrue(self.navigation.open_calendar())
        self.assertEqual(self.navigation.state.screen, Screen.CALENDAR)
        self.assertTrue(self.navigation.close_calendar())
        self.assertEqual(self.navigation.state.screen, Screen.HOME)

    def test_select_day_with_data(self) -> None:
        self.add_intake("2024-02-20")
        self.navigation.open_calendar()

        self.assertTrue(self.navigation.select_day("2024-2-20"))

        self.assertEqual(self.navigation.state.screen, Screen.DAY_DETAIL)
        self.assertEqual(self.navigation.state.selected_day, "2024-02-20")

        self.assertTrue(self.navigation.back_to_calendar())
        self.assertEqual(self.navigation.state.screen, Screen.CALENDAR)
        self.assertIsNone(self.navigation.state.selected_day)

    def test_select_day_without_data_is_ignored(self) -> None:
        self.navigation.open_calendar()

        self.assertFalse(self.navigation.select_day("2024-02-21"))

        self.assertEqual(self.navigation.state.screen, Screen.CALENDAR)
        self.assertIsNone(self.navigation.state.selected_day)

    def test_transitions_from_the_wrong_screen_are_ignored(self) -> None:
        self.add_intake("2024-02-20")

        self.assertFalse(self.navigation.close_calendar())
        self.assertFalse(self.navigation.select_day("2024-02-20"))
        self.assertFalse(self.navigation.back_to_calendar())
        self.assertFalse(self.navigation.cancel_form())
        self.assertEqual(self.navigation.state, NavigationState())

        self.navigation.open_calendar()
        self.assertFalse(self.navigation.start_add_intake())
        self.assertFalse(self.navigation.start_add_elimination())
        self.assertFalse(self.navigation.open_calendar())
        self.assertEqual(self.navigation.state.screen, Screen.CALENDAR)

    def test_add_intake_inserts_on_today(self) -> None:
        self.assertTrue(self.navigation.start_add_intake())
        self.assertEqual(self.navigation.state.screen, Screen.ADD_INTAKE)

        saved = self.navigation.save_intake(
            {"glyph": "", "category": "Tea", "time": "09:15", "quantity": "250 ml"}
        )

        self.assertIsNotNone(saved)
        self.assertEqual(self.navigation.state.screen, Screen.HOME)
        day = self.repo.get_day(TODAY)
        self.assertEqual(len(day["intake"]), 1)
        self.assertEqual(day["intake"][0]["category"], "Tea")

    def test_add_elimination_inserts_on_today(self) -> None:
        self.navigation.start_add_elimination()

        self.navigation.save_elimination({"glyph": "", "time": "09:15", "magnitude": 1})

        self.assertEqual(self.navigation.state.screen, Screen.HOME)
        self.assertEqual(len(self.repo.get_day(TODAY)["elimination"]), 1)

    def test_save_on_the_wrong_screen_is_ignored(self) -> None:
        self.assertIsNone(
            self.navigation.save_intake(
                {"glyph": "", "category": "Tea", "time": "09:15", "quantity": ""}
            )
        )
        self.navigation.start_add_intake()
        self.assertIsNone(
            self.navigation.save_elimination({"glyph": "", "time": "09:15", "magnitude": 1})
        )
        self.assertEqual(self.repo.snapshot(), {})

    def test_cancel_form_leaves_the_store_untouched(self) -> None:
        id = self.add_intake()
        before = self.repo.snapshot()

        self.navigation.start_add_elimination()
        self.assertTrue(self.navigation.cancel_form())
        self.navigation.request_edit(EntityType.INTAKE, id)
        self.assertTrue(self.navigation.cancel_form())

        self.assertEqual(self.navigation.state, NavigationState())
        self.assertEqual(self.repo.snapshot(), before)

    def test_edit_updates_in_place(self) -> None:
        id = self.add_intake(time="08:00")

        self.assertTrue(self.navigation.request_edit(EntityType.INTAKE, id))
        self.assertEqual(self.navigation.state.screen, Screen.ADD_INTAKE)
        self.assertEqual(
            self.navigation.state.edit_target,
            EditTarget(kind=EntityType.INTAKE, id=id, day_key=TODAY),
        )
        record = self.navigation.editing_record()
        assert record is not None
        self.assertEqual(record["time"], "08:00")

        saved = self.navigation.save_intake(
            {"glyph": "", "category": "Juice", "time": "08:45", "quantity": "100 ml"}
        )

        assert saved is not None
        self.assertEqual(saved["id"], id)
        day = self.repo.get_day(TODAY)
        self.assertEqual(len(day["intake"]), 1)
        self.assertEqual(day["intake"][0]["id"], id)
        self.assertEqual(day["intake"][0]["category"], "Juice")
        self.assertEqual(self.navigation.state, NavigationState())

    def test_edit_elimination_updates_in_place(self) -> None:
        id = self.add_elimination()

        self.navigation.request_edit(EntityType.ELIMINATION, id)
        self.assertEqual(self.navigation.state.screen, Screen.ADD_ELIMINATION)
        self.navigation.save_elimination({"glyph": "", "time": "10:00", "magnitude": 3})

        day = self.repo.get_day(TODAY)
        self.assertEqual(len(day["elimination"]), 1)
        self.assertEqual(day["elimination"][0]["magnitude"], 3)

    def test_edit_of_unknown_or_past_record_is_ignored(self) -> None:
        past_id = self.add_intake("2024-03-04")

        self.assertFalse(self.navigation.request_edit(EntityType.INTAKE, past_id))
        self.assertFalse(self.navigation.request_edit(EntityType.ELIMINATION, 42))
        self.assertEqual(self.navigation.state, NavigationState())
        self.assertIsNone(self.navigation.editing_record())

    def test_add_after_edit_inserts(self) -> None:
        id = self.add_intake()
        self.navigation.request_edit(EntityType.INTAKE, id)
        self.navigation.save_intake(
            {"glyph": "", "category": "Water", "time": "08:00", "quantity": ""}
        )

        self.navigation.start_add_intake()
        self.assertIsNone(self.navigation.state.edit_target)
        self.navigation.save_intake(
            {"glyph": "", "category": "Water", "time": "09:00", "quantity": ""}
        )

        self.assertEqual(len(self.repo.get_day(TODAY)["intake"]), 2)

    def test_delete_cancel_then_confirm(self) -> None:
        id = self.add_elimination()
        other = self.add_elimination(time="09:00")

        self.assertTrue(self.navigation.request_delete(EntityType.ELIMINATION, id))
        self.assertEqual(
            self.navigation.state.pending_delete,
            DeleteIntent(kind=EntityType.ELIMINATION, id=id, day_key=TODAY),
        )
        self.assertTrue(self.navigation.cancel_delete())
        self.assertIsNone(self.navigation.state.pending_delete)
        self.assertEqual(len(self.repo.get_day(TODAY)["elimination"]), 2)

        self.navigation.request_delete(EntityType.ELIMINATION, id)
        self.assertTrue(self.navigation.confirm_delete())

        remaining = self.repo.get_day(TODAY)["elimination"]
        self.assertEqual([elimination["id"] for elimination in remaining], [other])
        self.assertIsNone(self.navigation.state.pending_delete)

    def test_escape_and_dismiss_cancel_the_delete(self) -> None:
        id = self.add_intake()

        for cancel in [self.navigation.escape, self.navigation.dismiss]:
            self.navigation.request_delete(EntityType.INTAKE, id)
            self.assertTrue(cancel())
            self.assertIsNone(self.navigation.state.pending_delete)

        self.assertEqual(len(self.repo.get_day(TODAY)["intake"]), 1)

    def test_latest_delete_request_wins(self) -> None:
        first = self.add_intake()
        second = self.add_intake(time="09:00")

        self.navigation.request_delete(EntityType.INTAKE, first)
        self.navigation.request_delete(EntityType.INTAKE, second)
        self.navigation.confirm_delete()

        remaining = self.repo.get_day(TODAY)["intake"]
        self.assertEqual([intake["id"] for intake in remaining], [first])

    def test_confirm_without_request_is_ignored(self) -> None:
        self.add_intake()
        before = self.repo.snapshot()

        self.assertFalse(self.navigation.confirm_delete())
        self.assertFalse(self.navigation.cancel_delete())

        self.assertEqual(self.repo.snapshot(), before)

    def test_opening_a_form_or_the_calendar_drops_a_pending_delete(self) -> None:
        id = self.add_intake()

        self.navigation.request_delete(EntityType.INTAKE, id)
        self.navigation.open_calendar()
        self.assertIsNone(self.navigation.state.pending_delete)
        self.navigation.close_calendar()

        self.navigation.request_delete(EntityType.INTAKE, id)
        self.navigation.start_add_intake()
        self.assertIsNone(self.navigation.state.pending_delete)

    def test_delete_request_off_home_is_ignored(self) -> None:
        id = self.add_intake()
        self.navigation.open_calendar()

        self.assertFalse(self.navigation.request_delete(EntityType.INTAKE, id))
        self.assertIsNone(self.navigation.state.pending_delete)


if __name__ == "__main__":
    unittest.main()
