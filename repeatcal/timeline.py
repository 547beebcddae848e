"""A Timeline is a set of events on a calendar.

A timeline can be used to iterate over all events in chronological order,
and supports methods to scan ranges of events such as all events on a
specific day, week or month. Recurring events are already stored as one
event per occurrence, so no expansion happens here.

This module also has the helpers to lay out the month and week calendar
grids. Weeks start on Sunday.
"""

from __future__ import annotations

import calendar
import datetime
import logging
from collections.abc import Iterable, Iterator

from .event import Event
from .types.date import days_in_month, parse_date

__all__ = [
    "Timeline",
    "week_dates",
    "month_weeks",
    "week_of_month",
    "is_date_in_range",
]

_LOGGER = logging.getLogger(__name__)

_GRID = calendar.Calendar(firstweekday=calendar.SUNDAY)


def _sunday_index(day: datetime.date) -> int:
    """Return the index of the day within a Sunday first week."""
    return (day.weekday() + 1) % 7


def week_dates(day: datetime.date | str) -> list[datetime.date]:
    """Return the seven dates of the Sunday first week containing the day."""
    day = parse_date(day)
    sunday = day - datetime.timedelta(days=_sunday_index(day))
    return [sunday + datetime.timedelta(days=offset) for offset in range(7)]


def month_weeks(day: datetime.date | str) -> list[list[int | None]]:
    """Return the month grid for the month containing the day.

    Each week is a list of seven day numbers with None for the days that
    belong to the previous or next month.
    """
    day = parse_date(day)
    return [
        [value or None for value in week]
        for week in _GRID.monthdayscalendar(day.year, day.month)
    ]


def week_of_month(day: datetime.date | str) -> tuple[int, int, int]:
    """Return the (year, month, week number) of the week containing the day.

    A week that spans two months belongs to the month of its Thursday, so
    the first week of a month is the one containing its first Thursday.
    """
    day = parse_date(day)
    thursday = day + datetime.timedelta(days=4 - _sunday_index(day))
    first_of_month = thursday.replace(day=1)
    first_thursday = first_of_month + datetime.timedelta(
        days=(4 - _sunday_index(first_of_month)) % 7
    )
    week = (thursday - first_thursday).days // 7 + 1
    return (thursday.year, thursday.month, week)


def is_date_in_range(
    day: datetime.date | str,
    range_start: datetime.date | str,
    range_end: datetime.date | str,
) -> bool:
    """Return True if the day is within the range, inclusive on both ends.

    Only the calendar day of datetime values is compared.
    """
    return parse_date(range_start) <= parse_date(day) <= parse_date(range_end)


def _sort_key(event: Event) -> tuple[datetime.date, datetime.time, datetime.time, str]:
    return (event.date, event.start_time, event.end_time, event.id)


class Timeline(Iterable[Event]):
    """A set of events on a calendar in chronological order."""

    def __init__(self, events: Iterable[Event]) -> None:
        self._events = sorted(events, key=_sort_key)

    def __iter__(self) -> Iterator[Event]:
        """Return an iterator as a traversal over events in chronological order."""
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def included(
        self,
        start: datetime.date | str,
        end: datetime.date | str,
    ) -> Iterator[Event]:
        """Return an iterator for all events between the days.

        Both the start and end days are inclusive.
        """
        start = parse_date(start)
        end = parse_date(end)
        for event in self._events:
            if event.date > end:
                break
            if event.date >= start:
                yield event

    def on_date(self, day: datetime.date | str) -> Iterator[Event]:
        """Return an iterator containing all events on the specified day."""
        return self.included(day, day)

    def week(self, day: datetime.date | str) -> Iterator[Event]:
        """Return an iterator containing all events in the week of the day."""
        dates = week_dates(day)
        return self.included(dates[0], dates[-1])

    def month(self, day: datetime.date | str) -> Iterator[Event]:
        """Return an iterator containing all events in the month of the day."""
        day = parse_date(day)
        return self.included(
            day.replace(day=1),
            day.replace(day=days_in_month(day.year, day.month)),
        )

    def start_after(self, instant: datetime.datetime) -> Iterator[Event]:
        """Return an iterator containing events starting after the specified time."""
        for event in self._events:
            if event.start > instant:
                yield event

    def search(self, term: str) -> Iterator[Event]:
        """Return events with the term in the title, description or location.

        Matching is case insensitive and an empty term matches every event.
        """
        needle = term.strip().lower()
        for event in self._events:
            haystack = (event.title, event.description, event.location)
            if not needle or any(needle in value.lower() for value in haystack):
                yield event

    def overlapping(self, event: Event) -> list[Event]:
        """Return the other events whose time on the same day overlaps the event."""
        result = [
            other
            for other in self.on_date(event.date)
            if other.id != event.id
            and other.start < event.end
            and event.start < other.end
        ]
        _LOGGER.debug("Event %s overlaps %d events", event.id, len(result))
        return result
