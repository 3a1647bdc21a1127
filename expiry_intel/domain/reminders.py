"""Expiry reminder schedule generation"""

from datetime import date, timedelta
from typing import Iterable, List, Union

from expiry_intel.domain.models import NormalizedDate, Reminder

DEFAULT_REMINDER_DAYS = (7, 3, 1)


def build_reminder_schedule(
    expiry: Union[NormalizedDate, date],
    today: date,
    reminder_days: Iterable[int] = DEFAULT_REMINDER_DAYS,
) -> List[Reminder]:
    """
    Work out when to remind the user about an upcoming expiry.

    Requirements:
    - One reminder per distinct positive offset, `days_before` days ahead of expiry
    - Reminders that would fall before today are dropped
    - Nothing is scheduled for a product that has already expired

    Args:
        expiry: Expiry date of the product
        today: Caller's current date
        reminder_days: Offsets in days before expiry (default 7, 3, 1)

    Returns:
        Reminders ordered by date, earliest first

    Example:
        expiry 2025-03-15, today 2025-03-10, offsets (7, 3, 1)
        → [2025-03-12 (3 days before), 2025-03-14 (1 day before)]
    """
    if isinstance(expiry, NormalizedDate):
        expiry = expiry.to_date()

    if expiry < today:
        return []

    offsets = sorted({days for days in reminder_days if days > 0}, reverse=True)

    reminders = []
    for days_before in offsets:
        remind_on = expiry - timedelta(days=days_before)
        if remind_on < today:
            continue
        reminders.append(Reminder(remind_on=remind_on, days_before=days_before))

    return reminders
