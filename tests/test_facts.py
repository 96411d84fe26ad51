import pytest

from calbounds.calendar.facts import (
    days_in_month,
    days_in_quarter,
    days_in_year,
    is_leap_year,
    quarter_of_month,
)
from calbounds.errors import PreconditionViolation


@pytest.mark.parametrize(
    "year, expected",
    [(2024, True), (1900, False), (2000, True), (2023, False), (2100, False), (2400, True), (4, True)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_days_in_month_non_leap():
    assert [days_in_month(2023, m) for m in range(1, 13)] == [
        31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
    ]


def test_february_follows_leap_rule():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(1900, 2) == 28
    assert days_in_month(2000, 2) == 29


@pytest.mark.parametrize("year", range(1896, 2105))
def test_months_add_up_to_year(year):
    assert sum(days_in_month(year, m) for m in range(1, 13)) == days_in_year(year)


@pytest.mark.parametrize("year", range(1896, 2105))
def test_quarters_add_up_to_year(year):
    assert sum(days_in_quarter(year, q) for q in range(1, 5)) == days_in_year(year)


def test_days_in_quarter():
    assert days_in_quarter(2022, 1) == 90
    assert days_in_quarter(2024, 1) == 91
    assert days_in_quarter(2022, 2) == 91
    assert days_in_quarter(2022, 3) == 92
    assert days_in_quarter(2022, 4) == 92


@pytest.mark.parametrize("quarter", [0, 5, -1, 99])
def test_out_of_range_quarter_counts_as_q4(quarter):
    assert days_in_quarter(2024, quarter) == days_in_quarter(2024, 4)


def test_days_in_year():
    assert days_in_year(2023) == 365
    assert days_in_year(2024) == 366


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(PreconditionViolation):
        days_in_month(2024, month)


def test_quarter_of_month():
    assert [quarter_of_month(m) for m in range(1, 13)] == [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4]

    with pytest.raises(PreconditionViolation):
        quarter_of_month(13)
