"""
Source of "now" for call forms that omit an instant.

Resolution order: an explicit ``clock`` argument, then a clock scoped with
``use_clock`` (held in a ContextVar, so it is private to the current thread or
asyncio task), then ``local_now``.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from tzlocal import get_localzone

from calbounds.config import settings

Clock = Callable[[], datetime]

_scoped_clock: ContextVar[Optional[Clock]] = ContextVar("calbounds_clock", default=None)


def local_zone() -> tzinfo:
    """
    The zone "now" is read in: ``settings.local_timezone`` when set, otherwise
    the system zone (``TZ`` or ``/etc/localtime``). Both are full IANA zones, so
    results computed from "now" pick up the offset of their own date.
    """
    if settings.local_timezone:
        return ZoneInfo(settings.local_timezone)
    return get_localzone()


def local_now() -> datetime:
    return datetime.now(local_zone())


def fixed_clock(instant: datetime) -> Clock:
    def _clock() -> datetime:
        return instant

    return _clock


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    token = _scoped_clock.set(clock)
    try:
        yield clock
    finally:
        _scoped_clock.reset(token)


def current_clock() -> Clock:
    return _scoped_clock.get() or local_now


def now(clock: Optional[Clock] = None) -> datetime:
    return (clock or current_clock())()


def resolve_instant(instant: Optional[datetime], clock: Optional[Clock] = None) -> datetime:
    if instant is not None:
        return instant
    return now(clock)
