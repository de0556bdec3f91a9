# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from daylog.model.day import Day
from daylog.model.entity_id import EntityId
from daylog.model.entity_type import EntityKind, EntityType
from daylog.service.day import sorted_by_time
from daylog.time import normalize_day_key

KIND_ALIASES: dict[str, EntityKind] = {
    "drink": EntityType.INTAKE,
    "d": EntityType.INTAKE,
    "intake": EntityType.INTAKE,
    "pee": EntityType.ELIMINATION,
    "p": EntityType.ELIMINATION,
    "elimination": EntityType.ELIMINATION,
}

KIND_LABELS = {
    EntityType.INTAKE: "drink",
    EntityType.ELIMINATION: "pee",
}


def parse_kind(kind: str) -> EntityKind:
    try:
        return KIND_ALIASES[kind.lower()]
    except KeyError:
        typer.echo(f"Invalid kind: {kind}. Valid options: drink, pee")
        raise typer.Exit(1)


def parse_day(value: str) -> str:
    try:
        return normalize_day_key(value)
    except ValueError:
        typer.echo(f"Invalid date: {value}. Expected YYYY-MM-DD")
        raise typer.Exit(1)


def id_at_position(day: Day, kind: EntityKind, position: int) -> Optional[EntityId]:
    """Map the 1-based '#' shown in the day tables back to a record id."""
    if kind == EntityType.INTAKE:
        ids = [intake["id"] for intake in sorted_by_time(day["intake"])]
    else:
        ids = [elimination["id"] for elimination in sorted_by_time(day["elimination"])]
    if 1 <= position <= len(ids):
        return ids[position - 1]
    return None
