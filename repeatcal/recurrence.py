"""Implementation of recurrence date calculation for repeating events.

A repeating event is described by a start date and a `RepeatRule`: a
frequency, an interval and an end condition. This module computes the
date of the next occurrence after a given one, and expands a rule into
the complete list of occurrence dates.

Monthly and yearly rules keep the day of month of the first occurrence as
an anchor. When a target month is too short for the anchor the occurrence
falls on the last day of that month, and the anchor is recovered in the
following longer months rather than drifting:

```python
import datetime
from repeatcal.recurrence import expand
from repeatcal.types import EndByCount, Frequency

print(expand(datetime.date(2024, 1, 31), Frequency.MONTHLY, 1, EndByCount(occurrences=3)))
```

The above example will output:
```
[datetime.date(2024, 1, 31),
 datetime.date(2024, 2, 29),
 datetime.date(2024, 3, 31)]
```
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable

from dateutil.relativedelta import relativedelta

from .exceptions import InvalidIntervalError, RecurrenceError, UnboundedExpansionError
from .types.date import days_in_month, parse_date
from .types.repeat import EndByCount, EndByDate, Frequency, RepeatRule

__all__ = [
    "next_occurrence",
    "expand",
    "expand_rule",
]

_LOGGER = logging.getLogger(__name__)


def _step_days(current: datetime.date, interval: int, anchor_day: int) -> datetime.date:
    return current + datetime.timedelta(days=interval)


def _step_weeks(current: datetime.date, interval: int, anchor_day: int) -> datetime.date:
    return current + datetime.timedelta(weeks=interval)


def _step_months(current: datetime.date, interval: int, anchor_day: int) -> datetime.date:
    """Advance by whole months, landing on the anchor day or the month end."""
    tentative = current + relativedelta(months=interval)
    last_day = days_in_month(tentative.year, tentative.month)
    if anchor_day > last_day:
        return tentative.replace(day=last_day)
    return tentative.replace(day=anchor_day)


def _step_years(current: datetime.date, interval: int, anchor_day: int) -> datetime.date:
    # Feb 29 lands on Feb 28 in common years and is recovered in leap years
    return _step_months(current, 12 * interval, anchor_day)


_STEPS: dict[Frequency, Callable[[datetime.date, int, int], datetime.date]] = {
    Frequency.DAILY: _step_days,
    Frequency.WEEKLY: _step_weeks,
    Frequency.MONTHLY: _step_months,
    Frequency.YEARLY: _step_years,
}


def _check_interval(interval: int) -> None:
    if interval < 1:
        raise InvalidIntervalError(
            f"Recurrence interval must be at least 1: {interval}"
        )


def next_occurrence(
    current: datetime.date | str,
    freq: Frequency | str,
    interval: int,
    anchor_day: int | None = None,
) -> datetime.date:
    """Return the date of the occurrence following `current`.

    The `anchor_day` is the day of month of the first occurrence in the
    series and is used as the target day for monthly and yearly steps. It
    defaults to the day of `current`.
    """
    current = parse_date(current)
    freq = Frequency(freq)
    _check_interval(interval)
    if anchor_day is None:
        anchor_day = current.day
    elif not 1 <= anchor_day <= 31:
        raise RecurrenceError(f"Anchor day must be between 1 and 31: {anchor_day}")
    try:
        return _STEPS[freq](current, interval, anchor_day)
    except (OverflowError, ValueError) as err:
        raise RecurrenceError(
            f"Next occurrence after {current} is outside the supported date range"
        ) from err


def expand(
    start: datetime.date | str,
    freq: Frequency | str,
    interval: int,
    end: EndByDate | EndByCount | None,
) -> list[datetime.date]:
    """Return the dates of every occurrence from `start` until the end condition.

    The end date of an `EndByDate` is inclusive. An end condition is required
    since a recurrence with no end would never finish expanding.
    """
    if end is None:
        raise UnboundedExpansionError(
            "Expanding a recurrence requires an end date or occurrence count"
        )
    _check_interval(interval)
    start = parse_date(start)
    step = _STEPS[Frequency(freq)]

    until: datetime.date | None = None
    count_limit: int | None = None
    if isinstance(end, EndByDate):
        until = end.end_date
    elif isinstance(end, EndByCount):
        count_limit = end.occurrences
    else:
        raise RecurrenceError(f"Unsupported recurrence end condition: {end!r}")

    dates: list[datetime.date] = []
    current = start
    count = 0
    while True:
        if until is not None and current > until:
            break
        if count_limit is not None and count >= count_limit:
            break
        dates.append(current)
        count += 1
        if count_limit is not None and count >= count_limit:
            break
        try:
            current = step(current, interval, start.day)
        except (OverflowError, ValueError) as err:
            if until is not None:
                # Any later occurrence is past the end date
                break
            raise RecurrenceError(
                f"Recurrence exceeds the supported date range after {current}"
            ) from err

    _LOGGER.debug(
        "Expanded %s recurrence from %s (interval=%s, end=%s) to %d dates",
        freq,
        start,
        interval,
        end,
        len(dates),
    )
    return dates


def expand_rule(start: datetime.date | str, rule: RepeatRule) -> list[datetime.date]:
    """Return the dates of every occurrence of the rule from `start`."""
    return expand(start, rule.freq, rule.interval, rule.end)
