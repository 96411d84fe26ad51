"""
Whole-period offsets that keep the time of day and tzinfo.

``days``/``weeks``/``months``/``years`` refuse ``n == 0``: a zero offset is
almost always a bug at the call site, so it raises PreconditionViolation
instead of handing the input back.
"""

from datetime import date, datetime, timedelta
from typing import Optional, TypeVar

from calbounds.calendar.facts import days_in_month
from calbounds.clock import Clock, now, resolve_instant
from calbounds.errors import require

D = TypeVar("D", date, datetime)


def shift_months(d: D, months: int) -> D:
    """Shift date by N months, keeping day in range for target month."""
    year = d.year + (d.month - 1 + months) // 12
    month = (d.month - 1 + months) % 12 + 1
    day = min(d.day, days_in_month(year, month))

    return d.replace(year=year, month=month, day=day)


def _check_offset(n: int, unit: str) -> None:
    require(
        isinstance(n, int) and not isinstance(n, bool) and n != 0,
        f"{unit} offset must be a non-zero int",
        unit=unit,
        n=n,
    )


def days(n: int, instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    _check_offset(n, "days")
    return resolve_instant(instant, clock) + timedelta(days=n)


def weeks(n: int, instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    _check_offset(n, "weeks")
    return resolve_instant(instant, clock) + timedelta(days=n * 7)


def months(n: int, instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    _check_offset(n, "months")
    return shift_months(resolve_instant(instant, clock), n)


def years(n: int, instant: Optional[datetime] = None, *, clock: Optional[Clock] = None) -> datetime:
    _check_offset(n, "years")
    return shift_months(resolve_instant(instant, clock), n * 12)


def yesterday(*, clock: Optional[Clock] = None) -> datetime:
    return days(-1, now(clock))


def tomorrow(*, clock: Optional[Clock] = None) -> datetime:
    return days(1, now(clock))


def last_week(*, clock: Optional[Clock] = None) -> datetime:
    return weeks(-1, now(clock))


def next_week(*, clock: Optional[Clock] = None) -> datetime:
    return weeks(1, now(clock))


def last_month(*, clock: Optional[Clock] = None) -> datetime:
    return months(-1, now(clock))


def next_month(*, clock: Optional[Clock] = None) -> datetime:
    return months(1, now(clock))


def last_year(*, clock: Optional[Clock] = None) -> datetime:
    return years(-1, now(clock))


def next_year(*, clock: Optional[Clock] = None) -> datetime:
    return years(1, now(clock))
