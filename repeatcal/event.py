"""A single event on a calendar.

An event happens on one calendar day between a start and end time of day.
A repeating event is stored as one `Event` per occurrence: every occurrence
carries the same `repeat_id` and the shared `repeat` settings, but has its
own `id` so that one occurrence can be edited or deleted on its own.
"""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import datetime
from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import ClockTime, IsoDate, RepeatInfo
from .util import uid_factory

__all__ = ["Event", "DEFAULT_NOTIFICATION_MINUTES"]

DEFAULT_NOTIFICATION_MINUTES = 10
"""Minutes before the start of an event that a notification is shown."""


class Event(BaseModel):
    """A single event on a calendar.

    The id function has a factory method invoked with a lambda to facilitate
    mocking in unit tests.

    Example:
    ```python
    from repeatcal.event import Event

    event = Event(
        title="Team meeting",
        date="2024-10-15",
        start_time="09:00",
        end_time="10:00",
    )
    print("The event starts at: ", event.start)
    ```

    An Event is a pydantic model and accepts the camel case names used by the
    form layer (e.g. `startTime`) as well as the field names.
    """

    id: str = Field(default_factory=lambda: uid_factory())
    """A unique identifier for this event or occurrence."""

    title: str = ""

    date: IsoDate
    """The calendar day the event happens on."""

    start_time: ClockTime = Field(alias="startTime")

    end_time: ClockTime = Field(alias="endTime")

    description: str = ""

    location: str = ""

    category: str = ""

    repeat: RepeatInfo = Field(default_factory=RepeatInfo)
    """The repeat settings the event was created with."""

    notification_time: int = Field(
        alias="notificationTime", default=DEFAULT_NOTIFICATION_MINUTES, ge=0
    )
    """Minutes before the start that a notification is shown."""

    repeat_id: Optional[str] = Field(alias="repeatId", default=None)
    """Identifies all occurrences expanded from the same repeating event."""

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _validate_times(self) -> Self:
        """Verify the event does not end before it starts."""
        if self.end_time < self.start_time:
            raise ValueError(
                f"Event end time '{self.end_time}' is before start time '{self.start_time}'"
            )
        return self

    @property
    def start(self) -> datetime.datetime:
        """Return the start date and time of the event."""
        return datetime.datetime.combine(self.date, self.start_time)

    @property
    def end(self) -> datetime.datetime:
        """Return the end date and time of the event."""
        return datetime.datetime.combine(self.date, self.end_time)

    @property
    def notify_at(self) -> datetime.datetime:
        """Return the time a notification for the event becomes due."""
        return self.start - datetime.timedelta(minutes=self.notification_time)

    @property
    def is_repeating(self) -> bool:
        """Return True if the event is an occurrence of a repeating series."""
        return self.repeat_id is not None

    def copy_and_validate(self, update: dict[str, Any]) -> Self:
        """Create a new object with updated values and validate it."""
        # Make a deep copy since the repeat settings are shared otherwise
        new_item_copy = self.model_copy(update=update, deep=True)
        # Create a new object using the constructor to ensure we're performing
        # validation on the new object.
        return self.__class__.model_validate(new_item_copy.model_dump())
