"""Base model utilities shared by the in-memory records."""

import calendar
from datetime import date

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """Immutable record held by the store.

    Records are never modified in place; changes go through ``model_copy``
    so every mutation yields a new object.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def month_name(value: date) -> str:
    """English month name used to tag payments (e.g. "January")."""
    return calendar.month_name[value.month]
