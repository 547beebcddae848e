"""The Calendar container of events."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .event import Event
from .timeline import Timeline

__all__ = ["Calendar"]


class Calendar(BaseModel):
    """A set of events, with each occurrence of a repeating event stored separately."""

    events: list[Event] = Field(default_factory=list)
    """Events associated with this calendar."""

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )

    @property
    def timeline(self) -> Timeline:
        """Return a timeline view of events on the calendar in chronological order."""
        return Timeline(self.events)
