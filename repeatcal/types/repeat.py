"""Data types for describing how an event repeats.

There are two levels of description. A `RepeatRule` is the bounded rule the
recurrence engine evaluates: a frequency, an interval and an end condition.
A `RepeatInfo` is what is stored on an event and edited in a form, where
repetition may be turned off entirely or left without an end. A `RepeatInfo`
is converted into a `RepeatRule` before any dates are computed:

```python
import datetime
from repeatcal.types import RepeatInfo, RepeatType

info = RepeatInfo(type=RepeatType.WEEKLY, interval=2, end_type="count", end_count=3)
rule = info.as_rule(datetime.date(2024, 1, 1))
```
"""

from __future__ import annotations

import datetime
import enum
import logging
from typing import Annotated, Literal, Optional, Self, Union

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..exceptions import InvalidIntervalError
from .date import IsoDate, parse_date

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_REPEAT_HORIZON",
    "EndByCount",
    "EndByDate",
    "EndCondition",
    "EndType",
    "Frequency",
    "RepeatInfo",
    "RepeatRule",
    "RepeatType",
]

DEFAULT_REPEAT_HORIZON = relativedelta(years=1)
"""How far a repeating event without an end date is expanded."""


class Frequency(str, enum.Enum):
    """Unit of a single recurrence step."""

    DAILY = "daily"
    """Repeating events based on an interval of a day or more."""

    WEEKLY = "weekly"
    """Repeating events based on an interval of a week or more."""

    MONTHLY = "monthly"
    """Repeating events based on an interval of a month or more."""

    YEARLY = "yearly"
    """Repeating events based on an interval of a year or more."""

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class RepeatType(str, enum.Enum):
    """Repeat selection for an event, including no repetition."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def frequency(self) -> Frequency | None:
        """Return the recurrence frequency, or None when not repeating."""
        if self is RepeatType.NONE:
            return None
        return Frequency(self.value)


class EndType(str, enum.Enum):
    """How the repetition of an event ends."""

    NONE = "none"
    """Repeats with no explicit end, bounded by a default horizon."""

    DATE = "date"
    """Repeats until an inclusive end date."""

    COUNT = "count"
    """Repeats for a fixed number of occurrences."""


class EndByDate(BaseModel):
    """Stop once an occurrence would fall after the end date."""

    kind: Literal["date"] = "date"

    end_date: IsoDate
    """The inclusive end date of the recurrence."""

    model_config = ConfigDict(frozen=True)


class EndByCount(BaseModel):
    """Stop once the number of occurrences has been produced."""

    kind: Literal["count"] = "count"

    occurrences: int = Field(ge=1)
    """The number of occurrences to bound the recurrence."""

    model_config = ConfigDict(frozen=True)


EndCondition = Annotated[Union[EndByDate, EndByCount], Field(discriminator="kind")]
"""A bound on the number of occurrences of a rule."""


class RepeatRule(BaseModel):
    """A single frequency recurrence rule with a mandatory end condition."""

    freq: Frequency

    interval: int = Field(default=1, ge=1)
    """Number of frequency units between occurrences."""

    end: EndCondition
    """The end condition, either by date or by count."""

    model_config = ConfigDict(frozen=True)


class RepeatInfo(BaseModel):
    """The repeat settings stored on an event."""

    type: RepeatType = RepeatType.NONE

    interval: int = Field(default=0, ge=0)
    """Interval of the repetition, 0 when the event does not repeat."""

    end_type: EndType = Field(alias="endType", default=EndType.NONE)

    end_date: Optional[IsoDate] = Field(alias="endDate", default=None)
    """Inclusive end date, required when end_type is date."""

    end_count: Optional[int] = Field(alias="endCount", default=None, ge=1)
    """Number of occurrences, required when end_type is count."""

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _validate_end(self) -> Self:
        """Verify the end condition has the value it refers to."""
        if self.end_type == EndType.DATE and self.end_date is None:
            raise ValueError("Repeat end type 'date' requires an end date")
        if self.end_type == EndType.COUNT and self.end_count is None:
            raise ValueError("Repeat end type 'count' requires an end count")
        return self

    @property
    def is_repeating(self) -> bool:
        """Return True if the settings describe a repeating event."""
        return self.type is not RepeatType.NONE

    def as_rule(
        self,
        start: datetime.date | str,
        horizon: relativedelta = DEFAULT_REPEAT_HORIZON,
    ) -> RepeatRule | None:
        """Return the bounded rule used to compute dates, or None if not repeating.

        A repetition with no end is bounded to `start + horizon`.
        """
        if (freq := self.type.frequency) is None:
            return None
        if self.interval < 1:
            raise InvalidIntervalError(
                f"Repeating event requires an interval of at least 1: {self.interval}"
            )
        end: EndByDate | EndByCount
        if self.end_type == EndType.DATE:
            end = EndByDate(end_date=self.end_date)
        elif self.end_type == EndType.COUNT:
            end = EndByCount(occurrences=self.end_count)
        else:
            end_date = parse_date(start) + horizon
            _LOGGER.debug("Bounding open ended repetition at %s", end_date)
            end = EndByDate(end_date=end_date)
        return RepeatRule(freq=freq, interval=self.interval, end=end)
