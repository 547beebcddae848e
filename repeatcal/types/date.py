"""Library for parsing and encoding calendar date and time values.

Dates cross the library boundary as ISO `YYYY-MM-DD` strings and times of
day as `HH:MM` strings. Everything inside the library works on
`datetime.date` and `datetime.time` values.
"""

from __future__ import annotations

import calendar
import datetime
import re
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from ..exceptions import CalendarParseError

__all__ = [
    "IsoDate",
    "ClockTime",
    "parse_date",
    "parse_time",
    "format_date",
    "format_time",
    "days_in_month",
    "last_day_of_month",
]

DATE_REGEX = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
TIME_REGEX = re.compile(r"^([0-9]{2}):([0-9]{2})$")


def parse_date(value: Any) -> datetime.date:
    """Coerce an ISO string, date or datetime into a date.

    A datetime is normalized to its calendar day so that comparisons only
    depend on the day.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise CalendarParseError(f"Expected date value as str or date: {value!r}")
    if not (match := DATE_REGEX.fullmatch(value)):
        raise CalendarParseError(f"Expected value to match DATE pattern: '{value}'")
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError as err:
        raise CalendarParseError(
            f"Invalid calendar date: '{value}'", detailed_error=str(err)
        ) from err


def parse_time(value: Any) -> datetime.time:
    """Coerce an `HH:MM` string into a time of day."""
    if isinstance(value, datetime.time):
        return value
    if not isinstance(value, str):
        raise CalendarParseError(f"Expected time value as str or time: {value!r}")
    if not (match := TIME_REGEX.fullmatch(value)):
        raise CalendarParseError(f"Expected value to match TIME pattern: '{value}'")
    hour, minute = (int(part) for part in match.groups())
    try:
        return datetime.time(hour, minute)
    except ValueError as err:
        raise CalendarParseError(
            f"Invalid time of day: '{value}'", detailed_error=str(err)
        ) from err


def format_date(value: datetime.date) -> str:
    """Serialize as an ISO calendar date."""
    return value.strftime("%Y-%m-%d")


def format_time(value: datetime.time) -> str:
    """Serialize as a time of day."""
    return value.strftime("%H:%M")


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the month."""
    return calendar.monthrange(year, month)[1]


def last_day_of_month(value: datetime.date) -> datetime.date:
    """Return the last day of the month containing the date."""
    return value.replace(day=days_in_month(value.year, value.month))


def _validate_date(value: Any) -> datetime.date:
    # pydantic only reports ValueError as a validation error
    try:
        return parse_date(value)
    except CalendarParseError as err:
        raise ValueError(err.message) from err


def _validate_time(value: Any) -> datetime.time:
    try:
        return parse_time(value)
    except CalendarParseError as err:
        raise ValueError(err.message) from err


IsoDate = Annotated[
    datetime.date,
    BeforeValidator(_validate_date),
    PlainSerializer(format_date, return_type=str, when_used="json"),
]
"""A date field that accepts and serializes ISO `YYYY-MM-DD` strings."""

ClockTime = Annotated[
    datetime.time,
    BeforeValidator(_validate_time),
    PlainSerializer(format_time, return_type=str, when_used="json"),
]
"""A time of day field that accepts and serializes `HH:MM` strings."""
