from calbounds.errors import require

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _check_month(month: int) -> None:
    require(1 <= month <= 12, "month must be in [1, 12]", month=month)


def days_in_month(year: int, month: int) -> int:
    _check_month(month)

    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def days_in_quarter(year: int, quarter: int) -> int:
    """
    Number of days in a quarter (Q1 is 90 or 91, Q2 91, Q3 and Q4 92).

    Any quarter outside {1, 2, 3} is counted as Q4.
    """
    if quarter not in (1, 2, 3):
        quarter = 4

    first = (quarter - 1) * 3 + 1
    return sum(days_in_month(year, m) for m in range(first, first + 3))


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def quarter_of_month(month: int) -> int:
    _check_month(month)
    return (month - 1) // 3 + 1
