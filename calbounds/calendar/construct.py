from datetime import datetime, time, timezone, tzinfo


def date_create(year: int, month: int, day: int, tz: tzinfo = timezone.utc) -> datetime:
    """Midnight of the given date, UTC unless another zone is passed."""
    return datetime(year, month, day, tzinfo=tz)


def time_create(hour: int, minute: int, second: int, tz: tzinfo = timezone.utc) -> time:
    return time(hour, minute, second, tzinfo=tz)
