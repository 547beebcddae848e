"""
A library for managing calendar events, including repeating events.

The core of the library is `repeatcal.recurrence`, which computes the next
occurrence of a repeating event and expands a repeat rule into the dates of
all of its occurrences. The `repeatcal.store.EventStore` uses it to store a
repeating event as one event per occurrence on a `repeatcal.calendar.Calendar`.
"""

__all__ = [
    "calendar",
    "event",
    "exceptions",
    "notification",
    "recurrence",
    "store",
    "timeline",
    "types",
    "util",
]
