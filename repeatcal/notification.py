"""Notifications shown shortly before an event starts.

Each event has a `notification_time`, the number of minutes before its start
that a notification becomes due. A `Notifier` is polled with the current
events and returns the ones that became due, remembering which events it has
already notified about so that each event is only returned once.
"""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Iterable

from .event import Event
from .util import now_factory

__all__ = ["Notifier"]

_LOGGER = logging.getLogger(__name__)


class Notifier:
    """Tracks which events have been notified and finds newly due events."""

    def __init__(
        self,
        now_fn: Callable[[], datetime.datetime] = lambda: now_factory(),
    ) -> None:
        """Initialize the Notifier."""
        self._now_fn = now_fn
        self._notified: set[str] = set()

    @property
    def notified(self) -> frozenset[str]:
        """Return the ids of events that have been notified."""
        return frozenset(self._notified)

    def upcoming(self, events: Iterable[Event]) -> list[Event]:
        """Return events whose notification is due and mark them as notified.

        A notification is due from `notification_time` minutes before the
        start of the event until the event starts.
        """
        now = self._now_fn()
        due = [
            event
            for event in events
            if event.id not in self._notified and event.notify_at <= now < event.start
        ]
        for event in due:
            _LOGGER.debug("Notification due at %s for event %s", now, event.id)
            self._notified.add(event.id)
        return due

    def message(self, event: Event) -> str:
        """Return the notification text for the event."""
        return f"{event.title} starts in {event.notification_time} minutes."

    def dismiss(self, event_id: str) -> None:
        """Forget the event so that it can be notified again."""
        self._notified.discard(event_id)

    def reset(self) -> None:
        """Forget all notified events."""
        self._notified.clear()
