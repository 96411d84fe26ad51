from datetime import date
from enum import IntEnum

from calbounds.errors import require


class Weekday(IntEnum):
    """Week days numbered from Sunday, used as week-start anchors."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def weekday_of(d: date) -> Weekday:
    # date.weekday() counts from Monday
    return Weekday((d.weekday() + 1) % 7)


def as_weekday(value: int) -> Weekday:
    require(
        not isinstance(value, bool) and isinstance(value, int) and 0 <= value <= 6,
        "weekday must be an int in [0, 6] (Sunday=0)",
        weekday=value,
    )
    return Weekday(value)


def days_since(d: date, anchor: Weekday) -> int:
    """Days back from ``d`` to the latest ``anchor`` weekday on or before it."""
    return (weekday_of(d) - anchor + 7) % 7
