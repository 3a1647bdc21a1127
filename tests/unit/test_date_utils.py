"""Unit tests for calendar utilities"""

from datetime import date, datetime, timezone
from expiry_intel.utils.date_utils import (
    CENTURY_PIVOT,
    ceil_days_until,
    days_between,
    days_in_month,
    expand_two_digit_year,
    expand_year,
    is_leap_year,
    is_valid_calendar_date,
)


def test_century_pivot_is_fifty():
    """Stored data depends on this exact pivot"""
    assert CENTURY_PIVOT == 50


def test_expand_two_digit_year():
    assert expand_two_digit_year(0) == 2000
    assert expand_two_digit_year(23) == 2023
    assert expand_two_digit_year(49) == 2049
    assert expand_two_digit_year(50) == 1950
    assert expand_two_digit_year(99) == 1999


def test_expand_year_only_touches_two_digit_groups():
    assert expand_year("07") == 2007
    assert expand_year("75") == 1975
    assert expand_year("2025") == 2025
    assert expand_year("1975") == 1975


def test_leap_years():
    assert is_leap_year(2024)
    assert is_leap_year(2000)
    assert not is_leap_year(1900)
    assert not is_leap_year(2025)


def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert days_in_month(2025, 4) == 30
    assert days_in_month(2025, 12) == 31


def test_is_valid_calendar_date():
    assert is_valid_calendar_date(2024, 2, 29)
    assert not is_valid_calendar_date(2025, 2, 29)
    assert not is_valid_calendar_date(2025, 4, 31)
    assert not is_valid_calendar_date(2025, 13, 1)
    assert not is_valid_calendar_date(2025, 1, 0)
    assert not is_valid_calendar_date(1899, 12, 31)
    assert not is_valid_calendar_date(2100, 1, 1)
    assert is_valid_calendar_date(1900, 1, 1)
    assert is_valid_calendar_date(2099, 12, 31)


def test_days_between():
    assert days_between(date(2025, 3, 10), date(2025, 3, 15)) == 5
    assert days_between(date(2025, 3, 15), date(2025, 3, 10)) == -5
    assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2


def test_ceil_days_until_timezone_aware():
    """Aware datetimes are compared against the expiry date's midnight in the same zone"""
    now = datetime(2025, 3, 9, 22, 0, tzinfo=timezone.utc)
    assert ceil_days_until(date(2025, 3, 10), now) == 1
