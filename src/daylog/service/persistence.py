# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CSafeDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeDumper as Dumper, SafeLoader as Loader  # type: ignore[assignment]

from daylog import configuration
from daylog.model.day import Day, DayKey, empty_day
from daylog.model.elimination import MAGNITUDES, Elimination
from daylog.model.intake import Intake
from daylog.repository.day import DAY_REPO, DayRepository
from daylog.repository.slot import SLOT_REPO, SlotRepository
from daylog.time import day_key, is_valid_time, normalize_day_key

logger = logging.getLogger(__name__)


class CorruptDataError(ValueError):
    """Raised when the durable slot holds data of the wrong shape."""

    pass


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _string_field(raw: dict[str, Any], name: str) -> str:
    value = raw.get(name, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CorruptDataError(f"{name} must be a string")
    return value


def _deserialize_common(raw: Any) -> tuple[int, str]:
    if not isinstance(raw, dict):
        raise CorruptDataError("entry must be a mapping")
    if not _is_int(raw.get("id")):
        raise CorruptDataError("entry id must be an integer")
    time = raw.get("time")
    if not isinstance(time, str) or not is_valid_time(time):
        raise CorruptDataError(f"invalid entry time: {time!r}")
    return raw["id"], time


def _deserialize_intake(raw: Any) -> Intake:
    id, time = _deserialize_common(raw)
    return {
        "id": id,
        "glyph": _string_field(raw, "glyph"),
        "category": _string_field(raw, "category"),
        "time": time,
        "quantity": _string_field(raw, "quantity"),
    }


def _deserialize_elimination(raw: Any) -> Elimination:
    id, time = _deserialize_common(raw)
    magnitude = raw.get("magnitude")
    if magnitude not in MAGNITUDES or not _is_int(magnitude):
        raise CorruptDataError(f"invalid magnitude: {magnitude!r}")
    return {
        "id": id,
        "glyph": _string_field(raw, "glyph"),
        "time": time,
        "magnitude": magnitude,
    }


def deserialize_store(raw: Any) -> dict[DayKey, Day]:
    """
    Validate and convert a parsed slot document into store data.

    Unpadded day keys are normalized, keys that collapse onto the same day
    are merged and empty buckets are dropped. Anything else that does not
    match the expected shape raises CorruptDataError.
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise CorruptDataError("store must be a mapping of day keys")

    days: dict[DayKey, Day] = {}
    for raw_key, raw_day in raw.items():
        if isinstance(raw_key, datetime.date):
            # unquoted YAML dates load as date objects
            raw_key = day_key(raw_key.year, raw_key.month, raw_key.day)
        if not isinstance(raw_key, str):
            raise CorruptDataError(f"invalid day key: {raw_key!r}")
        try:
            key = normalize_day_key(raw_key)
        except ValueError as e:
            raise CorruptDataError(str(e)) from e
        if not isinstance(raw_day, dict):
            raise CorruptDataError(f"day {raw_key} must be a mapping")
        raw_intake = raw_day.get("intake")
        raw_elimination = raw_day.get("elimination")
        if not isinstance(raw_intake, list) or not isinstance(raw_elimination, list):
            raise CorruptDataError(f"day {raw_key} must hold intake and elimination lists")

        day = days.setdefault(key, empty_day())
        day["intake"].extend(_deserialize_intake(entry) for entry in raw_intake)
        day["elimination"].extend(
            _deserialize_elimination(entry) for entry in raw_elimination
        )

    return {
        key: day for key, day in days.items() if day["intake"] or day["elimination"]
    }


def serialize_store(days: dict[DayKey, Day]) -> str:
    return dump(days, Dumper=Dumper, allow_unicode=True, sort_keys=True)


class PersistenceAdapter:
    """
    Bridge between the day store and its durable slot.

    hydrate() loads the slot once at startup; afterwards every store
    mutation writes a full snapshot back to the same slot.
    """

    def __init__(
        self,
        day_repo: DayRepository = DAY_REPO,
        slot_repo: SlotRepository = SLOT_REPO,
        storage_key: Optional[str] = None,
    ) -> None:
        self._day_repo = day_repo
        self._slot_repo = slot_repo
        self._storage_key = storage_key
        self._subscribed = False

    @property
    def storage_key(self) -> str:
        if self._storage_key is not None:
            return self._storage_key
        return configuration.STORAGE_KEY

    def __read_slot(self) -> dict[DayKey, Day]:
        try:
            raw_text = self._slot_repo.read(self.storage_key)
            if raw_text is None:
                logger.debug(
                    "slot %s is empty, starting with an empty store", self.storage_key
                )
                return {}
            return deserialize_store(load(raw_text, Loader=Loader))
        except YAMLError:
            logger.warning(
                "slot %s could not be parsed, starting with an empty store",
                self.storage_key,
            )
        # also covers undecodable bytes and scalars PyYAML fails to construct,
        # such as an unquoted impossible date
        except ValueError as e:
            logger.warning(
                "slot %s holds malformed data (%s), starting with an empty store",
                self.storage_key,
                e,
            )
        return {}

    def hydrate(self) -> None:
        self._day_repo.load(self.__read_slot())
        if not self._subscribed:
            self._day_repo.subscribe(self.save)
            self._subscribed = True

    def save(self) -> None:
        if not self._day_repo.is_loaded:
            logger.debug("save before hydration suppressed")
            return
        self._slot_repo.write(self.storage_key, serialize_store(self._day_repo.snapshot()))
        logger.debug("saved store to slot %s", self.storage_key)


PERSISTENCE = PersistenceAdapter()
