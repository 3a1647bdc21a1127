"""Dependency injection for FastAPI endpoints"""

from datetime import date
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from expiry_intel.api.v1.schemas import ThresholdsSchema
from expiry_intel.config import settings
from expiry_intel.domain.models import NumericDateOrder, ThresholdConfig
from expiry_intel.infrastructure.database.repositories import ThresholdSettingsRepository
from expiry_intel.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_threshold_repository(db: Session = Depends(get_db)) -> ThresholdSettingsRepository:
    """Provide threshold settings store bound to the request session"""
    return ThresholdSettingsRepository(db)


def resolve_today(today: Optional[date]) -> date:
    """The caller's date if given; otherwise today's server date"""
    return today or date.today()


def resolve_numeric_order(numeric_order: Optional[NumericDateOrder]) -> NumericDateOrder:
    return numeric_order or settings.numeric_date_order


def resolve_thresholds(
    inline: Optional[ThresholdsSchema],
    profile_id: Optional[str],
    repo: ThresholdSettingsRepository,
) -> ThresholdConfig:
    """
    Inline thresholds win; otherwise take a fresh snapshot from the store.

    The snapshot is read per request, right before classification, so concurrent
    settings updates are seen by the next call rather than a cached copy.
    """
    if inline is not None:
        return inline.to_config()
    return repo.get_thresholds(profile_id or settings.default_profile_id)
