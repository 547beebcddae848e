"""Tests for timeline related calendar events."""

from __future__ import annotations

import datetime

import pytest

from repeatcal.calendar import Calendar
from repeatcal.event import Event
from repeatcal.timeline import (
    Timeline,
    is_date_in_range,
    month_weeks,
    week_dates,
    week_of_month,
)


@pytest.mark.parametrize(
    "day",
    [
        datetime.date(2024, 10, 13),
        datetime.date(2024, 10, 16),
        datetime.date(2024, 10, 19),
        "2024-10-16",
    ],
)
def test_week_dates(day: datetime.date | str) -> None:
    """Test the week containing a day starts on Sunday."""
    assert week_dates(day) == [
        datetime.date(2024, 10, 13),
        datetime.date(2024, 10, 14),
        datetime.date(2024, 10, 15),
        datetime.date(2024, 10, 16),
        datetime.date(2024, 10, 17),
        datetime.date(2024, 10, 18),
        datetime.date(2024, 10, 19),
    ]


def test_week_dates_across_year() -> None:
    """Test a week that spans two years."""
    dates = week_dates(datetime.date(2025, 1, 1))
    assert dates[0] == datetime.date(2024, 12, 29)
    assert dates[-1] == datetime.date(2025, 1, 4)


def test_month_weeks() -> None:
    """Test the month grid is padded on both ends."""
    assert month_weeks(datetime.date(2024, 10, 16)) == [
        [None, None, 1, 2, 3, 4, 5],
        [6, 7, 8, 9, 10, 11, 12],
        [13, 14, 15, 16, 17, 18, 19],
        [20, 21, 22, 23, 24, 25, 26],
        [27, 28, 29, 30, 31, None, None],
    ]


def test_month_weeks_exact() -> None:
    """Test a month that starts on Sunday and fills four weeks."""
    assert month_weeks(datetime.date(2015, 2, 1)) == [
        [1, 2, 3, 4, 5, 6, 7],
        [8, 9, 10, 11, 12, 13, 14],
        [15, 16, 17, 18, 19, 20, 21],
        [22, 23, 24, 25, 26, 27, 28],
    ]


@pytest.mark.parametrize(
    "day,expected",
    [
        (datetime.date(2024, 10, 16), (2024, 10, 3)),
        (datetime.date(2024, 10, 3), (2024, 10, 1)),
        (datetime.date(2024, 9, 30), (2024, 10, 1)),
        (datetime.date(2024, 11, 1), (2024, 10, 5)),
        (datetime.date(2024, 12, 31), (2025, 1, 1)),
    ],
)
def test_week_of_month(day: datetime.date, expected: tuple[int, int, int]) -> None:
    """Test a week belongs to the month of its Thursday."""
    assert week_of_month(day) == expected


def test_is_date_in_range() -> None:
    """Test the range is inclusive and ignores the time of day."""
    start = datetime.date(2024, 7, 1)
    end = datetime.date(2024, 7, 31)
    assert is_date_in_range(datetime.date(2024, 7, 1), start, end)
    assert is_date_in_range(datetime.datetime(2024, 7, 31, 23, 59), start, end)
    assert is_date_in_range("2024-07-15", "2024-07-01", "2024-07-31")
    assert not is_date_in_range(datetime.date(2024, 6, 30), start, end)
    assert not is_date_in_range(datetime.date(2024, 8, 1), start, end)


@pytest.fixture(name="timeline")
def mock_timeline() -> Timeline:
    """Fixture to create a timeline with events out of order."""
    calendar = Calendar(
        events=[
            Event(
                id="lunch",
                title="Lunch",
                date="2024-10-15",
                start_time="12:00",
                end_time="13:00",
                location="Cafeteria",
            ),
            Event(
                id="standup",
                title="Standup",
                date="2024-10-15",
                start_time="09:00",
                end_time="09:30",
                description="Daily team sync",
            ),
            Event(
                id="review",
                title="Design review",
                date="2024-10-15",
                start_time="09:15",
                end_time="10:00",
            ),
            Event(
                id="planning",
                title="Planning",
                date="2024-10-20",
                start_time="10:00",
                end_time="11:00",
                description="Quarterly TEAM planning",
            ),
            Event(
                id="retro",
                title="Retro",
                date="2024-11-01",
                start_time="16:00",
                end_time="17:00",
            ),
        ]
    )
    return calendar.timeline


def test_iteration(timeline: Timeline) -> None:
    """Test events are returned in chronological order."""
    assert len(timeline) == 5
    assert [event.id for event in timeline] == [
        "standup",
        "review",
        "lunch",
        "planning",
        "retro",
    ]


def test_included(timeline: Timeline) -> None:
    """Test returning events between two days."""
    assert [event.id for event in timeline.included("2024-10-16", "2024-11-01")] == [
        "planning",
        "retro",
    ]
    assert [event.id for event in timeline.on_date(datetime.date(2024, 10, 15))] == [
        "standup",
        "review",
        "lunch",
    ]
    assert list(timeline.on_date(datetime.date(2024, 10, 16))) == []


def test_week_and_month(timeline: Timeline) -> None:
    """Test returning the events of a week or month."""
    assert [event.id for event in timeline.week(datetime.date(2024, 10, 19))] == [
        "standup",
        "review",
        "lunch",
    ]
    assert [event.id for event in timeline.week(datetime.date(2024, 10, 20))] == [
        "planning",
    ]
    assert [event.id for event in timeline.month(datetime.date(2024, 10, 1))] == [
        "standup",
        "review",
        "lunch",
        "planning",
    ]


def test_start_after(timeline: Timeline) -> None:
    """Test returning the events that have not started yet."""
    assert [
        event.id for event in timeline.start_after(datetime.datetime(2024, 10, 15, 9, 15))
    ] == ["lunch", "planning", "retro"]


@pytest.mark.parametrize(
    "term,expected",
    [
        ("team", ["standup", "planning"]),
        ("  CAFETERIA ", ["lunch"]),
        ("review", ["review"]),
        ("missing", []),
        ("", ["standup", "review", "lunch", "planning", "retro"]),
    ],
)
def test_search(timeline: Timeline, term: str, expected: list[str]) -> None:
    """Test searching the title, description and location of events."""
    assert [event.id for event in timeline.search(term)] == expected


def test_overlapping(timeline: Timeline) -> None:
    """Test finding events whose time overlaps."""
    standup, review, lunch = list(timeline.on_date("2024-10-15"))
    assert timeline.overlapping(standup) == [review]
    assert timeline.overlapping(review) == [standup]
    assert timeline.overlapping(lunch) == []

    adjacent = Event(
        title="Right after lunch",
        date="2024-10-15",
        start_time="13:00",
        end_time="14:00",
    )
    assert timeline.overlapping(adjacent) == []
