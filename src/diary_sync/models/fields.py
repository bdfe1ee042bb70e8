"""Annotated field types carrying the diary service's wire rules.

The generic pydantic behaviour is not what the service speaks:

- dates travel as ``YYYY-MM-DD`` strings, and only as such (no timestamps,
  no datetimes with a time component);
- the visibility status travels as the variant's symbolic name, never as
  its ordinal, and unknown names are rejected.
"""

from datetime import date, datetime
from enum import Enum, auto
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


class VisibilityStatus(Enum):
    """Who may see a diary entry."""

    PUBLIC = auto()
    PRIVATE = auto()
    FOLLOWERS = auto()


def status_to_wire(value: VisibilityStatus) -> str:
    return value.name


def status_from_wire(value: Any) -> VisibilityStatus:
    """Parse a status symbol; raises ValueError for anything unknown."""
    if isinstance(value, VisibilityStatus):
        return value
    if not isinstance(value, str):
        msg = f"status must be a variant name string, got {type(value).__name__}"
        raise ValueError(msg)
    try:
        return VisibilityStatus[value]
    except KeyError:
        known = ", ".join(v.name for v in VisibilityStatus)
        msg = f"unknown status {value!r} (expected one of: {known})"
        raise ValueError(msg) from None


def date_to_wire(value: date) -> str:
    return value.isoformat()


def date_from_wire(value: Any) -> date:
    """Parse a calendar date; raises ValueError for anything but ISO dates."""
    # datetime is a date subclass; a time component has no place here
    if isinstance(value, datetime):
        msg = "expected a calendar date, got a datetime"
        raise ValueError(msg)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        msg = f"date must be an ISO string, got {type(value).__name__}"
        raise ValueError(msg)
    try:
        return date.fromisoformat(value)
    except ValueError:
        msg = f"invalid ISO calendar date {value!r}"
        raise ValueError(msg) from None


StatusField = Annotated[
    VisibilityStatus,
    BeforeValidator(status_from_wire),
    PlainSerializer(status_to_wire, return_type=str),
]

DateField = Annotated[
    date,
    BeforeValidator(date_from_wire),
    PlainSerializer(date_to_wire, return_type=str),
]
