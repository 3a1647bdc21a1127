"""Unit tests for reminder schedule generation"""

from datetime import date, timedelta
from expiry_intel.domain.models import NormalizedDate
from expiry_intel.domain.reminders import build_reminder_schedule


def test_build_reminder_schedule_default_offsets():
    """7, 3 and 1 days before expiry, earliest first"""
    today = date(2025, 3, 1)
    expiry = date(2025, 3, 20)

    reminders = build_reminder_schedule(expiry, today)

    assert [r.days_before for r in reminders] == [7, 3, 1]
    assert reminders[0].remind_on == expiry - timedelta(days=7)
    assert reminders[1].remind_on == expiry - timedelta(days=3)
    assert reminders[2].remind_on == expiry - timedelta(days=1)


def test_build_reminder_schedule_drops_past_reminders():
    """Only reminders from today onwards are kept"""
    reminders = build_reminder_schedule(date(2025, 3, 15), date(2025, 3, 10))

    assert [(r.remind_on, r.days_before) for r in reminders] == [
        (date(2025, 3, 12), 3),
        (date(2025, 3, 14), 1),
    ]


def test_build_reminder_schedule_keeps_reminder_due_today():
    reminders = build_reminder_schedule(date(2025, 3, 13), date(2025, 3, 10))

    assert reminders[0].remind_on == date(2025, 3, 10)
    assert reminders[0].days_before == 3


def test_build_reminder_schedule_expired_product():
    """Nothing to schedule once the date has passed"""
    assert build_reminder_schedule(date(2025, 3, 1), date(2025, 3, 10)) == []


def test_build_reminder_schedule_custom_offsets():
    """Duplicates and non-positive offsets are ignored"""
    reminders = build_reminder_schedule(
        NormalizedDate(2025, 4, 30),
        date(2025, 3, 1),
        reminder_days=[14, 1, 14, 0, -3],
    )

    assert [r.days_before for r in reminders] == [14, 1]
    assert reminders[0].remind_on == date(2025, 4, 16)
