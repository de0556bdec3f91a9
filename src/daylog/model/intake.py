# SPDX-License-Identifier: MIT

from typing import TypedDict

from daylog.model.entity_id import EntityId


class IntakeFields(TypedDict):
    glyph: str  # e.g., "☕", may be empty
    category: str  # e.g., "Coffee"
    time: str  # HH:MM, 24-hour
    quantity: str  # "" or "<number> ml"


class Intake(IntakeFields):
    id: EntityId
