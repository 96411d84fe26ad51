"""
First and last instants of calendar periods.

Every function takes an optional instant; when it is omitted, "now" is read
from the clock (see ``calbounds.clock``). Results keep the tzinfo of the
instant they were computed from.

End-of-period values are one ``RESOLUTION`` before the start of the next
period, so ``end_of_month(t)`` for February 2024 is 2024-02-29
23:59:59.999999.
"""

from datetime import datetime, timedelta
from typing import Optional

from calbounds.calendar.facts import days_in_month, quarter_of_month
from calbounds.calendar.weekday import Weekday, as_weekday, days_since
from calbounds.clock import Clock, resolve_instant

RESOLUTION = timedelta(microseconds=1)


def _midnight(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


def start_of_day(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    return _midnight(resolve_instant(instant, clock))


def end_of_day(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    # wall-clock arithmetic: lands on 23:59:59.999999 of the same date even across DST
    return start_of_day(instant, clock=clock) + timedelta(days=1) - RESOLUTION


def start_of_week_on(
    anchor: int,
    instant: Optional[datetime] = None,
    *,
    clock: Optional[Clock] = None,
) -> datetime:
    anchor = as_weekday(anchor)
    instant = resolve_instant(instant, clock)
    return _midnight(instant - timedelta(days=days_since(instant, anchor)))


def end_of_week_on(
    anchor: int,
    instant: Optional[datetime] = None,
    *,
    clock: Optional[Clock] = None,
) -> datetime:
    start = start_of_week_on(anchor, instant, clock=clock)
    return end_of_day(start + timedelta(days=6))


def start_of_week(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    return start_of_week_on(Weekday.SUNDAY, instant, clock=clock)


def end_of_week(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    return end_of_week_on(Weekday.SUNDAY, instant, clock=clock)


def start_of_month(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    return _midnight(resolve_instant(instant, clock).replace(day=1))


def end_of_month(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    instant = resolve_instant(instant, clock)
    last_day = days_in_month(instant.year, instant.month)
    return end_of_day(instant.replace(day=last_day))


def start_of_quarter(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    instant = resolve_instant(instant, clock)
    first_month = (quarter_of_month(instant.month) - 1) * 3 + 1
    return start_of_month(instant.replace(month=first_month, day=1))


def end_of_quarter(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    instant = resolve_instant(instant, clock)
    last_month = quarter_of_month(instant.month) * 3
    # day=1 keeps the month swap valid (May 31 -> Jun 31)
    return end_of_month(instant.replace(day=1, month=last_month))


def start_of_year(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    return _midnight(resolve_instant(instant, clock).replace(month=1, day=1))


def end_of_year(instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    return end_of_day(resolve_instant(instant, clock).replace(month=12, day=31))


# Short names
day_start = start_of_day
day_end = end_of_day
week_start = start_of_week
week_end = end_of_week
week_start_on = start_of_week_on
week_end_on = end_of_week_on
month_start = start_of_month
month_end = end_of_month
quarter_start = start_of_quarter
quarter_end = end_of_quarter
year_start = start_of_year
year_end = end_of_year
