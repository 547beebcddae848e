"""Library for managing the lifecycle of events in a calendar.

A store is like a manager for events within a Calendar, assigning ids and
expanding repeating events into their occurrences. This higher level API is
a more convenient API than working with the lower level objects directly.
"""

from __future__ import annotations

import logging

from dateutil.relativedelta import relativedelta

from .calendar import Calendar
from .event import Event
from .exceptions import EventStoreError, StoreError
from .recurrence import expand_rule
from .types import DEFAULT_REPEAT_HORIZON, RepeatInfo
from .util import uid_factory

_LOGGER = logging.getLogger(__name__)


__all__ = [
    "EventStore",
    "EventStoreError",
    "StoreError",
]


class EventStore:
    """An event store manages the lifecycle of events on a Calendar.

    A repeating event is stored as one event per occurrence. All occurrences
    share a `repeat_id` and each has its own `id`, so an occurrence can be
    edited or deleted without affecting the rest of the series.

    Here is an example for setting up an `EventStore`:

    ```python
    from repeatcal.calendar import Calendar
    from repeatcal.event import Event
    from repeatcal.store import EventStore
    from repeatcal.types import RepeatInfo

    calendar = Calendar()
    store = EventStore(calendar)

    event = Event(
        title="Weekly sync",
        date="2024-10-01",
        start_time="09:00",
        end_time="09:30",
        repeat=RepeatInfo(type="weekly", interval=1, end_type="count", end_count=3),
    )
    store.add(event)
    ```

    This will add events to the calendar:
    ```python3
    for event in calendar.timeline:
        print(event.title, event.repeat_id, event.date)
    ```

    You may also delete a single occurrence with `store.delete(event_id)` or
    the complete series with `store.delete_series(repeat_id)`.

    A repeating event without an end is expanded up to `repeat_horizon`
    after its first occurrence.
    """

    def __init__(
        self,
        calendar: Calendar,
        repeat_horizon: relativedelta = DEFAULT_REPEAT_HORIZON,
    ) -> None:
        """Initialize the EventStore."""
        self._calendar = calendar
        self._repeat_horizon = repeat_horizon

    @property
    def _items(self) -> list[Event]:
        return self._calendar.events

    def _index(self, event_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == event_id:
                return index
        raise EventStoreError(f"No existing event with id: {event_id}")

    def _expand(self, event: Event) -> list[Event]:
        """Return the events to store for the event, one per occurrence."""
        rule = event.repeat.as_rule(event.date, self._repeat_horizon)
        if rule is None:
            return [event.copy_and_validate(update={"repeat_id": None})]
        dates = expand_rule(event.date, rule)
        if not dates:
            raise EventStoreError(
                f"Repeating event has no occurrences from {event.date}: {rule}"
            )
        repeat_id = uid_factory()
        _LOGGER.debug("Expanding event into %d occurrences (%s)", len(dates), repeat_id)
        return [
            event.copy_and_validate(
                update={"id": uid_factory(), "date": date, "repeat_id": repeat_id}
            )
            for date in dates
        ]

    def add(self, event: Event) -> list[Event]:
        """Add the specified event to the calendar.

        Returns the stored events: the event itself, or every occurrence when
        the event repeats.
        """
        new_items = self._expand(event)
        _LOGGER.debug("Adding events: %s", new_items)
        self._items.extend(new_items)
        return new_items

    def edit(self, event: Event) -> None:
        """Update the event with the same id as the specified event.

        Editing an occurrence of a repeating event turns it into a standalone
        event and leaves the rest of the series unchanged. It is not allowed to
        give a single occurrence a different repeat rule. Editing a standalone
        event to repeat replaces it with the expanded series.
        """
        index = self._index(event.id)
        store_item = self._items[index]
        _LOGGER.debug("Editing event %s with %s", store_item, event)
        if store_item.repeat_id is not None:
            if event.repeat.is_repeating and event.repeat != store_item.repeat:
                raise EventStoreError(
                    f"Can't update single occurrence with repeat rule (repeat={event.repeat})"
                )
            self._items[index] = event.copy_and_validate(
                update={"repeat": RepeatInfo(), "repeat_id": None}
            )
            return

        new_items = self._expand(event)
        self._items[index : index + 1] = new_items

    def delete(self, event_id: str) -> None:
        """Delete the event or single occurrence with the specified id."""
        index = self._index(event_id)
        _LOGGER.debug("Deleting event: %s", self._items[index])
        del self._items[index]

    def delete_series(self, repeat_id: str) -> None:
        """Delete every remaining occurrence of a repeating event."""
        remaining = [item for item in self._items if item.repeat_id != repeat_id]
        if len(remaining) == len(self._items):
            raise EventStoreError(f"No existing events with repeat id: {repeat_id}")
        _LOGGER.debug(
            "Deleting %d occurrences of %s",
            len(self._items) - len(remaining),
            repeat_id,
        )
        self._items[:] = remaining

    def series(self, repeat_id: str) -> list[Event]:
        """Return the occurrences of a repeating event in chronological order."""
        return sorted(
            (item for item in self._items if item.repeat_id == repeat_id),
            key=lambda item: item.date,
        )
