# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from daylog.model.day import DayKey
from daylog.model.entity_id import EntityId
from daylog.model.entity_type import EntityKind


class Screen(Enum):
    HOME = "home"
    CALENDAR = "calendar"
    DAY_DETAIL = "day_detail"
    ADD_INTAKE = "add_intake"
    ADD_ELIMINATION = "add_elimination"


@dataclass(frozen=True)
class EditTarget:
    """Reference to the record being edited, never a copy of its data."""

    kind: EntityKind
    id: EntityId
    day_key: DayKey


@dataclass(frozen=True)
class DeleteIntent:
    kind: EntityKind
    id: EntityId
    day_key: DayKey


@dataclass(frozen=True)
class NavigationState:
    screen: Screen = Screen.HOME
    selected_day: Optional[DayKey] = None  # set on DAY_DETAIL
    edit_target: Optional[EditTarget] = None  # set on ADD_* in edit mode
    pending_delete: Optional[DeleteIntent] = None
