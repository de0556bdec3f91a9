# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

from daylog.configuration import DEFAULT_INTAKE_CATEGORY
from daylog.model.elimination import MAGNITUDES, EliminationFields, Magnitude
from daylog.model.intake import IntakeFields
from daylog.time import is_valid_time, normalize_time

_AMOUNT_PATTERN = re.compile(r"^\d+(?:\.\d+)?$")
_ML_SUFFIX_PATTERN = re.compile(r"\s*ml\s*$", re.IGNORECASE)


class EntryValidationError(Exception):
    """Raised when form input for an intake or elimination is rejected."""

    pass


def validate_time(time: str) -> str:
    """Return the time as zero-padded HH:MM, accepting H:MM."""
    try:
        normalized = normalize_time(time)
    except ValueError as e:
        raise EntryValidationError(f"Invalid time: {time}. Expected HH:MM") from e
    if not is_valid_time(normalized):
        raise EntryValidationError(f"Invalid time: {time}. Expected HH:MM")
    return normalized


def strip_ml(quantity: str) -> str:
    """Edit forms show the bare number of a '<number> ml' quantity."""
    return _ML_SUFFIX_PATTERN.sub("", quantity)


def build_intake_fields(
    glyph: Optional[str],
    category: Optional[str],
    time: str,
    amount: Optional[str],
    default_category: str = DEFAULT_INTAKE_CATEGORY,
) -> IntakeFields:
    """
    Turn raw form values into intake fields.

    A blank category falls back to the default label and a blank amount
    leaves the quantity empty.
    """
    category = (category or "").strip() or default_category

    quantity = ""
    amount = strip_ml((amount or "").strip())
    if amount:
        if _AMOUNT_PATTERN.match(amount) is None:
            raise EntryValidationError(f"Invalid amount: {amount}. Expected a number")
        quantity = f"{amount} ml"

    return {
        "glyph": (glyph or "").strip(),
        "category": category,
        "time": validate_time(time),
        "quantity": quantity,
    }


def build_elimination_fields(
    glyph: Optional[str],
    time: str,
    magnitude: int = 2,
) -> EliminationFields:
    if magnitude not in MAGNITUDES:
        raise EntryValidationError(
            f"Invalid size: {magnitude}. Valid options: 1 (small), 2 (medium), 3 (large)"
        )
    return {
        "glyph": (glyph or "").strip(),
        "time": validate_time(time),
        "magnitude": cast(Magnitude, magnitude),
    }
