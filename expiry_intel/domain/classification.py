"""Threshold classification - maps an expiry date to an urgency category"""

import logging
from datetime import date, datetime
from typing import Iterable, Union

from expiry_intel.domain.models import (
    Category,
    CategoryDisplay,
    CategorySummary,
    Classification,
    NormalizedDate,
    ThresholdConfig,
)
from expiry_intel.utils.date_utils import ceil_days_until, days_between

logger = logging.getLogger(__name__)

ExpiryInput = Union[NormalizedDate, date]
TodayInput = Union[date, datetime]

CATEGORY_DISPLAY = {
    Category.EXPIRED: CategoryDisplay(label="Expired", color="#FF4444"),
    Category.EXPIRING: CategoryDisplay(label="Expiring Soon", color="#FF8800"),
    Category.WARNING: CategoryDisplay(label="Warning", color="#FFAA00"),
    Category.FRESH: CategoryDisplay(label="Fresh", color="#44AA44"),
}


def _as_date(expiry: ExpiryInput) -> date:
    if isinstance(expiry, NormalizedDate):
        return expiry.to_date()
    # datetime is a date subclass; only its calendar day matters here
    if isinstance(expiry, datetime):
        return expiry.date()
    return expiry


def days_until_expiry(expiry: ExpiryInput, today: TodayInput) -> int:
    """
    Whole days from today until the expiry date.

    With a plain date for today this is the calendar difference. With a datetime,
    partial days round up: anything later than today counts as at least 1 day,
    while the expiry date itself is 0.
    """
    expiry_date = _as_date(expiry)
    if isinstance(today, datetime):
        return ceil_days_until(expiry_date, today)
    return days_between(today, expiry_date)


def category_for_days(days: int, thresholds: ThresholdConfig) -> Category:
    """
    Map days remaining to a category.

    Bands, checked in order:
    - days <= 0:             expired
    - days <= expiring_days: expiring
    - days <= warning_days:  warning
    - otherwise:             fresh

    Inverted thresholds (expiring_days >= warning_days) are applied literally;
    the warning band then becomes unreachable.
    """
    if days <= 0:
        return Category.EXPIRED
    elif days <= thresholds.expiring_days:
        return Category.EXPIRING
    elif days <= thresholds.warning_days:
        return Category.WARNING
    else:
        return Category.FRESH


def classify_with_days(
    expiry: ExpiryInput,
    today: TodayInput,
    thresholds: ThresholdConfig,
) -> Classification:
    """Classify and keep the day count alongside the category"""
    days = days_until_expiry(expiry, today)
    category = category_for_days(days, thresholds)

    if not thresholds.is_consistent:
        logger.debug(
            "Classifying with inconsistent thresholds warning=%d expiring=%d",
            thresholds.warning_days,
            thresholds.expiring_days,
        )

    return Classification(category=category, days_until_expiry=days)


def classify(expiry: ExpiryInput, today: TodayInput, thresholds: ThresholdConfig) -> Category:
    """
    Main entry point: urgency category for an expiry date.

    Deterministic in its three arguments; the system clock is never read.
    """
    return classify_with_days(expiry, today, thresholds).category


def describe(category: Category) -> CategoryDisplay:
    """Dashboard label and colour for a category"""
    return CATEGORY_DISPLAY[category]


def summarize(
    expiries: Iterable[ExpiryInput],
    today: TodayInput,
    thresholds: ThresholdConfig,
) -> CategorySummary:
    """Count products per category; every category is present, zero or not"""
    summary = CategorySummary()
    for expiry in expiries:
        summary.counts[classify(expiry, today, thresholds)] += 1
    return summary
