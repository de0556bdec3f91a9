# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from daylog.model.entity_id import EntityId

Magnitude = Literal[1, 2, 3]  # small, medium, large

MAGNITUDES: tuple[Magnitude, ...] = (1, 2, 3)


class EliminationFields(TypedDict):
    glyph: str
    time: str  # HH:MM, 24-hour
    magnitude: Magnitude


class Elimination(EliminationFields):
    id: EntityId
