"""POST /v1/reminders - reminder schedule for an expiry date"""

from fastapi import APIRouter

from expiry_intel.api.dependencies import resolve_today
from expiry_intel.api.v1.schemas import ReminderRequest, ReminderResponse, ReminderSchema
from expiry_intel.config import settings
from expiry_intel.domain.reminders import build_reminder_schedule

router = APIRouter()


@router.post("/reminders", response_model=ReminderResponse)
def get_reminder_schedule(request_body: ReminderRequest):
    """
    Compute when reminders should fire; delivery is up to the notification service.

    Returns:
        Reminders still ahead of today, earliest first
    """
    reminder_days = request_body.reminder_days or settings.reminder_days
    reminders = build_reminder_schedule(
        request_body.expiry_date,
        resolve_today(request_body.today),
        reminder_days,
    )

    return ReminderResponse(
        expiry_date=request_body.expiry_date,
        reminders=[
            ReminderSchema(remind_on=r.remind_on, days_before=r.days_before)
            for r in reminders
        ],
    )
