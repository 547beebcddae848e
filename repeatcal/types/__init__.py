"""Library for the data types used to describe events and recurrence rules."""

from .date import ClockTime, IsoDate
from .repeat import (
    DEFAULT_REPEAT_HORIZON,
    EndByCount,
    EndByDate,
    EndCondition,
    EndType,
    Frequency,
    RepeatInfo,
    RepeatRule,
    RepeatType,
)

__all__ = [
    "ClockTime",
    "DEFAULT_REPEAT_HORIZON",
    "EndByCount",
    "EndByDate",
    "EndCondition",
    "EndType",
    "Frequency",
    "IsoDate",
    "RepeatInfo",
    "RepeatRule",
    "RepeatType",
]
