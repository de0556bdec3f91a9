# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Callable, Optional, TypeAlias, cast

from daylog.model.day import Day, DayKey, empty_day, is_empty_day
from daylog.model.elimination import Elimination, EliminationFields
from daylog.model.entity_id import ID_GENERATOR, EntityId, IdGenerator
from daylog.model.entity_type import EntityKind, EntityType
from daylog.model.intake import Intake, IntakeFields
from daylog.time import normalize_day_key, parse_day_key

logger = logging.getLogger(__name__)

ChangeListener: TypeAlias = Callable[[], None]


class DayRepository:
    """
    Single owner of every intake and elimination record, keyed by day.

    Buckets are created on the first write to a day and pruned when their
    last record is removed. Reads always hand out copies.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._days: dict[DayKey, Day] = {}
        self._listeners: list[ChangeListener] = []
        self._id_generator = id_generator if id_generator is not None else ID_GENERATOR
        self.is_loaded = False

    def load(self, days: dict[DayKey, Day]) -> None:
        """Replace the whole store, e.g. with data read from the durable slot."""
        self._days = {}
        for key, day in days.items():
            if is_empty_day(day):
                continue
            self._days[self.__key(key)] = deepcopy(day)
            for entity in [*day["intake"], *day["elimination"]]:
                self._id_generator.observe(entity["id"])
        self.is_loaded = True

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def __notify(self) -> None:
        for listener in self._listeners:
            listener()

    def __key(self, key: DayKey) -> DayKey:
        try:
            return normalize_day_key(key)
        except ValueError:
            return key

    def __entries(self, key: DayKey, kind: EntityKind) -> list[dict[str, Any]]:
        day = self._days.setdefault(key, empty_day())
        return cast(list[dict[str, Any]], day[kind])

    def __add(self, key: DayKey, kind: EntityKind, fields: dict[str, Any]) -> dict[str, Any]:
        key = self.__key(key)
        entity = {**fields, "id": self._id_generator.next_id()}
        self.__entries(key, kind).append(entity)
        logger.debug("added %s %s on %s", kind, entity["id"], key)
        self.__notify()
        return deepcopy(entity)

    def __update(
        self, key: DayKey, kind: EntityKind, id: EntityId, fields: dict[str, Any]
    ) -> None:
        key = self.__key(key)
        if key not in self._days:
            logger.debug("update of %s %s ignored, no data on %s", kind, id, key)
            return
        entries = self.__entries(key, kind)
        for index, entity in enumerate(entries):
            if entity["id"] == id:
                entries[index] = {**fields, "id": id}
                self.__notify()
                return
        logger.debug("update of %s %s ignored, not found on %s", kind, id, key)

    def __remove(self, key: DayKey, kind: EntityKind, id: EntityId) -> None:
        key = self.__key(key)
        if key not in self._days:
            logger.debug("removal of %s %s ignored, no data on %s", kind, id, key)
            return
        entries = self.__entries(key, kind)
        remaining = [entity for entity in entries if entity["id"] != id]
        if len(remaining) == len(entries):
            logger.debug("removal of %s %s ignored, not found on %s", kind, id, key)
            return
        entries[:] = remaining
        if is_empty_day(self._days[key]):
            del self._days[key]
        self.__notify()

    def __find(
        self, key: DayKey, kind: EntityKind, id: EntityId
    ) -> Optional[dict[str, Any]]:
        day = self._days.get(self.__key(key))
        if day is None:
            return None
        for entity in cast(list[dict[str, Any]], day[kind]):
            if entity["id"] == id:
                return deepcopy(entity)
        return None

    def get_day(self, key: DayKey) -> Day:
        day = self._days.get(self.__key(key))
        if day is None:
            return empty_day()
        return deepcopy(day)

    def day_keys(self) -> list[DayKey]:
        return sorted(key for key, day in self._days.items() if not is_empty_day(day))

    def snapshot(self) -> dict[DayKey, Day]:
        return deepcopy(self._days)

    def add_intake(self, key: DayKey, fields: IntakeFields) -> Intake:
        return cast(
            Intake, self.__add(key, EntityType.INTAKE, cast(dict[str, Any], fields))
        )

    def update_intake(self, key: DayKey, id: EntityId, fields: IntakeFields) -> None:
        self.__update(key, EntityType.INTAKE, id, cast(dict[str, Any], fields))

    def remove_intake(self, key: DayKey, id: EntityId) -> None:
        self.__remove(key, EntityType.INTAKE, id)

    def find_intake(self, key: DayKey, id: EntityId) -> Optional[Intake]:
        return cast(Optional[Intake], self.__find(key, EntityType.INTAKE, id))

    def add_elimination(self, key: DayKey, fields: EliminationFields) -> Elimination:
        return cast(
            Elimination,
            self.__add(key, EntityType.ELIMINATION, cast(dict[str, Any], fields)),
        )

    def update_elimination(
        self, key: DayKey, id: EntityId, fields: EliminationFields
    ) -> None:
        self.__update(key, EntityType.ELIMINATION, id, cast(dict[str, Any], fields))

    def remove_elimination(self, key: DayKey, id: EntityId) -> None:
        self.__remove(key, EntityType.ELIMINATION, id)

    def find_elimination(self, key: DayKey, id: EntityId) -> Optional[Elimination]:
        return cast(Optional[Elimination], self.__find(key, EntityType.ELIMINATION, id))

    def has_data(self, key: DayKey) -> bool:
        day = self._days.get(self.__key(key))
        return day is not None and not is_empty_day(day)

    def days_with_data_in_month(self, year: int, month: int) -> set[int]:
        days: set[int] = set()
        for key, day in self._days.items():
            if is_empty_day(day):
                continue
            try:
                key_year, key_month, key_day = parse_day_key(key)
            except ValueError:
                continue
            if key_year == year and key_month == month:
                days.add(key_day)
        return days


DAY_REPO = DayRepository()
