"""Utility methods used by multiple components."""

from __future__ import annotations

import datetime
import uuid

__all__ = [
    "uid_factory",
    "now_factory",
]


def uid_factory() -> str:
    """Factory method for new uids to facilitate mocking."""
    return str(uuid.uuid1())


def now_factory() -> datetime.datetime:
    """Factory method for the current local time to facilitate mocking.

    Events are scheduled in local wall clock time, so the value is naive.
    """
    return datetime.datetime.now()
