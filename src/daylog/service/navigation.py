# SPDX-License-Identifier: MIT

import logging
from dataclasses import replace
from typing import Any, Optional

from daylog.model.day import DayKey
from daylog.model.elimination import Elimination, EliminationFields
from daylog.model.entity_id import EntityId
from daylog.model.entity_type import EntityKind, EntityType
from daylog.model.intake import Intake, IntakeFields
from daylog.model.navigation import (
    DeleteIntent,
    EditTarget,
    NavigationState,
    Screen,
)
from daylog.repository.day import DAY_REPO, DayRepository
from daylog.time import Clock, normalize_day_key, now_local, today_key

logger = logging.getLogger(__name__)

FORM_SCREENS = {
    EntityType.INTAKE: Screen.ADD_INTAKE,
    EntityType.ELIMINATION: Screen.ADD_ELIMINATION,
}


class NavigationController:
    """
    Owns the current screen and the transient edit and delete intents.

    The state is an immutable NavigationState replaced wholesale on every
    transition. Requests that make no sense on the current screen are
    ignored and reported by returning False.
    """

    def __init__(self, day_repo: DayRepository, clock: Clock = now_local) -> None:
        self._day_repo = day_repo
        self._clock = clock
        self._state = NavigationState()

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def today_key(self) -> DayKey:
        return today_key(self._clock())

    def __transition(self, allowed: set[Screen], action: str, **changes: Any) -> bool:
        if self._state.screen not in allowed:
            logger.debug("%s ignored on %s screen", action, self._state.screen.value)
            return False
        self._state = replace(self._state, **changes)
        return True

    def open_calendar(self) -> bool:
        return self.__transition(
            {Screen.HOME}, "open_calendar", screen=Screen.CALENDAR, pending_delete=None
        )

    def close_calendar(self) -> bool:
        return self.__transition({Screen.CALENDAR}, "close_calendar", screen=Screen.HOME)

    def select_day(self, key: DayKey) -> bool:
        """Open the day detail screen; days without events are not navigable."""
        if not self._day_repo.has_data(key):
            logger.debug("select_day ignored, no data on %s", key)
            return False
        return self.__transition(
            {Screen.CALENDAR},
            "select_day",
            screen=Screen.DAY_DETAIL,
            selected_day=normalize_day_key(key),
        )

    def back_to_calendar(self) -> bool:
        return self.__transition(
            {Screen.DAY_DETAIL},
            "back_to_calendar",
            screen=Screen.CALENDAR,
            selected_day=None,
        )

    def start_add_intake(self) -> bool:
        return self.__transition(
            {Screen.HOME},
            "start_add_intake",
            screen=Screen.ADD_INTAKE,
            edit_target=None,
            pending_delete=None,
        )

    def start_add_elimination(self) -> bool:
        return self.__transition(
            {Screen.HOME},
            "start_add_elimination",
            screen=Screen.ADD_ELIMINATION,
            edit_target=None,
            pending_delete=None,
        )

    def request_edit(self, kind: EntityKind, id: EntityId) -> bool:
        """Open the form for an existing record of today in edit mode."""
        key = self.today_key
        if self.__find(kind, id, key) is None:
            logger.debug("request_edit ignored, %s %s not found on %s", kind, id, key)
            return False
        return self.__transition(
            {Screen.HOME},
            "request_edit",
            screen=FORM_SCREENS[kind],
            edit_target=EditTarget(kind=kind, id=id, day_key=key),
            pending_delete=None,
        )

    def __find(
        self, kind: EntityKind, id: EntityId, key: DayKey
    ) -> Optional[Intake | Elimination]:
        if kind == EntityType.INTAKE:
            return self._day_repo.find_intake(key, id)
        return self._day_repo.find_elimination(key, id)

    def editing_record(self) -> Optional[Intake | Elimination]:
        """Current values of the record under edit, used to prefill the form."""
        target = self._state.edit_target
        if target is None:
            return None
        return self.__find(target.kind, target.id, target.day_key)

    def save_intake(self, fields: IntakeFields) -> Optional[Intake]:
        if self._state.screen != Screen.ADD_INTAKE:
            logger.debug("save_intake ignored on %s screen", self._state.screen.value)
            return None
        target = self._state.edit_target
        if target is not None and target.kind == EntityType.INTAKE:
            self._day_repo.update_intake(target.day_key, target.id, fields)
            saved = self._day_repo.find_intake(target.day_key, target.id)
        else:
            saved = self._day_repo.add_intake(self.today_key, fields)
        self._state = replace(self._state, screen=Screen.HOME, edit_target=None)
        return saved

    def save_elimination(self, fields: EliminationFields) -> Optional[Elimination]:
        if self._state.screen != Screen.ADD_ELIMINATION:
            logger.debug(
                "save_elimination ignored on %s screen", self._state.screen.value
            )
            return None
        target = self._state.edit_target
        if target is not None and target.kind == EntityType.ELIMINATION:
            self._day_repo.update_elimination(target.day_key, target.id, fields)
            saved = self._day_repo.find_elimination(target.day_key, target.id)
        else:
            saved = self._day_repo.add_elimination(self.today_key, fields)
        self._state = replace(self._state, screen=Screen.HOME, edit_target=None)
        return saved

    def cancel_form(self) -> bool:
        """Leave an add/edit form without touching the store."""
        return self.__transition(
            {Screen.ADD_INTAKE, Screen.ADD_ELIMINATION},
            "cancel_form",
            screen=Screen.HOME,
            edit_target=None,
        )

    def request_delete(self, kind: EntityKind, id: EntityId) -> bool:
        """Raise a delete confirmation; a newer request replaces a pending one."""
        return self.__transition(
            {Screen.HOME},
            "request_delete",
            pending_delete=DeleteIntent(kind=kind, id=id, day_key=self.today_key),
        )

    def confirm_delete(self) -> bool:
        intent = self._state.pending_delete
        if intent is None:
            logger.debug("confirm_delete ignored, nothing pending")
            return False
        if intent.kind == EntityType.INTAKE:
            self._day_repo.remove_intake(intent.day_key, intent.id)
        else:
            self._day_repo.remove_elimination(intent.day_key, intent.id)
        self._state = replace(self._state, pending_delete=None)
        return True

    def cancel_delete(self) -> bool:
        if self._state.pending_delete is None:
            return False
        self._state = replace(self._state, pending_delete=None)
        return True

    # escape key and a click outside the confirmation both cancel
    escape = cancel_delete
    dismiss = cancel_delete


NAVIGATION = NavigationController(DAY_REPO)
