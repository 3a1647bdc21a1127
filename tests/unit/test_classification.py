"""Unit tests for threshold classification"""

import pytest
from datetime import date, datetime, timedelta
from expiry_intel.domain.classification import (
    category_for_days,
    classify,
    classify_with_days,
    days_until_expiry,
    describe,
    summarize,
)
from expiry_intel.domain.extraction import extract
from expiry_intel.domain.models import Category, NormalizedDate, ThresholdConfig


@pytest.mark.parametrize(
    "days, expected",
    [
        (-5, Category.EXPIRED),
        (0, Category.EXPIRED),
        (1, Category.EXPIRING),
        (3, Category.EXPIRING),
        (4, Category.WARNING),
        (7, Category.WARNING),
        (8, Category.FRESH),
        (365, Category.FRESH),
    ],
)
def test_classify_band_boundaries(today: date, default_thresholds: ThresholdConfig, days: int, expected: Category):
    """warning=7, expiring=3: each band edge lands in the right category"""
    expiry = today + timedelta(days=days)
    assert classify(expiry, today, default_thresholds) == expected


def test_classify_user_reported_case():
    """8 days left with warning=10, expiring=3 is a warning, not fresh"""
    thresholds = ThresholdConfig(warning_days=10, expiring_days=3)
    assert category_for_days(8, thresholds) == Category.WARNING
    assert category_for_days(10, thresholds) == Category.WARNING
    assert category_for_days(11, thresholds) == Category.FRESH


@pytest.mark.parametrize(
    "thresholds",
    [
        ThresholdConfig(warning_days=7, expiring_days=3),
        ThresholdConfig(warning_days=30, expiring_days=1),
        ThresholdConfig(warning_days=3, expiring_days=7),
        ThresholdConfig(warning_days=5, expiring_days=5),
    ],
)
def test_classify_is_monotonic_in_days(thresholds: ThresholdConfig):
    """More days remaining never makes a product more urgent"""
    ranks = [category_for_days(days, thresholds).rank for days in range(-10, 60)]
    assert ranks == sorted(ranks)


def test_classify_inverted_thresholds_applied_literally():
    """expiring_days >= warning_days is not rejected; the warning band is unreachable"""
    thresholds = ThresholdConfig(warning_days=3, expiring_days=7)
    assert not thresholds.is_consistent

    assert category_for_days(0, thresholds) == Category.EXPIRED
    assert category_for_days(2, thresholds) == Category.EXPIRING
    assert category_for_days(5, thresholds) == Category.EXPIRING
    assert category_for_days(7, thresholds) == Category.EXPIRING
    assert category_for_days(8, thresholds) == Category.FRESH
    assert all(category_for_days(d, thresholds) != Category.WARNING for d in range(-5, 40))


def test_days_until_expiry_with_dates(today: date):
    assert days_until_expiry(today, today) == 0
    assert days_until_expiry(today + timedelta(days=5), today) == 5
    assert days_until_expiry(today - timedelta(days=2), today) == -2
    assert days_until_expiry(NormalizedDate(2025, 3, 15), today) == 5


def test_days_until_expiry_rounds_partial_days_up():
    """With a datetime for 'now', any time before the expiry date counts as a full day"""
    expiry = date(2025, 3, 10)

    assert days_until_expiry(expiry, datetime(2025, 3, 9, 23, 59)) == 1
    assert days_until_expiry(expiry, datetime(2025, 3, 9, 0, 1)) == 1
    assert days_until_expiry(expiry, datetime(2025, 3, 8, 12, 0)) == 2
    assert days_until_expiry(expiry, datetime(2025, 3, 10, 0, 0)) == 0
    assert days_until_expiry(expiry, datetime(2025, 3, 10, 18, 30)) == 0
    assert days_until_expiry(expiry, datetime(2025, 3, 11, 9, 0)) == -1


def test_classify_with_days_keeps_day_count(today: date, default_thresholds: ThresholdConfig):
    result = classify_with_days(NormalizedDate(2025, 3, 12), today, default_thresholds)

    assert result.category == Category.EXPIRING
    assert result.days_until_expiry == 2


def test_scan_to_category_end_to_end(today: date, default_thresholds: ThresholdConfig):
    """OCR text -> extracted date -> category"""
    expiry = extract("Best Before: 15/03/2025")
    assert expiry == NormalizedDate(2025, 3, 15)

    result = classify_with_days(expiry, today, default_thresholds)
    assert result.days_until_expiry == 5
    assert result.category == Category.WARNING


def test_threshold_config_default_and_consistency():
    defaults = ThresholdConfig.default()

    assert defaults.warning_days == 7
    assert defaults.expiring_days == 3
    assert defaults.is_consistent
    assert not ThresholdConfig(warning_days=5, expiring_days=5).is_consistent
    assert not ThresholdConfig(warning_days=5, expiring_days=0).is_consistent


def test_category_rank_orders_by_urgency():
    assert Category.EXPIRED.rank < Category.EXPIRING.rank < Category.WARNING.rank < Category.FRESH.rank


def test_describe_category():
    assert describe(Category.EXPIRED).label == "Expired"
    assert describe(Category.EXPIRING).label == "Expiring Soon"
    assert describe(Category.WARNING).color == "#FFAA00"
    assert describe(Category.FRESH).color == "#44AA44"


def test_summarize_counts_every_category(today: date, default_thresholds: ThresholdConfig):
    expiries = [
        today - timedelta(days=1),
        today,
        today + timedelta(days=2),
        today + timedelta(days=6),
        NormalizedDate(2025, 12, 31),
    ]

    summary = summarize(expiries, today, default_thresholds)

    assert summary.counts == {
        Category.EXPIRED: 2,
        Category.EXPIRING: 1,
        Category.WARNING: 1,
        Category.FRESH: 1,
    }
    assert summary.total == 5


def test_summarize_empty_list(today: date, default_thresholds: ThresholdConfig):
    summary = summarize([], today, default_thresholds)

    assert summary.total == 0
    assert set(summary.counts) == set(Category)
