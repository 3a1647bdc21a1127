"""Calendar utilities shared by extraction and classification"""

import calendar
import math
from datetime import date, datetime, time

# Two-digit years below the pivot land in the 2000s, the rest in the 1900s
CENTURY_PIVOT = 50

MIN_YEAR = 1900
MAX_YEAR = 2099

SECONDS_PER_DAY = 24 * 60 * 60

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def expand_two_digit_year(value: int) -> int:
    """Expand a two-digit year: < 50 -> 20xx, >= 50 -> 19xx"""
    if value < CENTURY_PIVOT:
        return 2000 + value
    return 1900 + value


def expand_year(raw: str) -> int:
    """Convert a captured year group to a four-digit year.

    Two-digit groups go through the century pivot; anything else is taken literally.
    """
    value = int(raw)
    if len(raw) == 2:
        return expand_two_digit_year(value)
    return value


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month (1-12), accounting for leap years"""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_calendar_date(year: int, month: int, day: int) -> bool:
    """Check that (year, month, day) names a real date within the supported year range"""
    if not MIN_YEAR <= year <= MAX_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (end - start).days


def ceil_days_until(expiry: date, now: datetime) -> int:
    """
    Days remaining until the start of the expiry date, rounding partial days up.

    "Expires tomorrow" seen at 10:00 today is 14 hours away and counts as 1 day.
    Any moment on the expiry date itself yields 0.
    """
    expiry_start = datetime.combine(expiry, time.min, tzinfo=now.tzinfo)
    seconds = (expiry_start - now).total_seconds()
    # ceil() of a small negative fraction is -0.0; int() normalises it
    return int(math.ceil(seconds / SECONDS_PER_DAY))
