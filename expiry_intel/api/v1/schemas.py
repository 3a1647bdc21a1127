"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Dict, List, Optional

from expiry_intel.domain.models import Category, NumericDateOrder, PatternFamily, ThresholdConfig


class ThresholdsSchema(BaseModel):
    """Inline threshold snapshot; inverted pairs are accepted and applied literally"""

    warning_days: int = Field(..., ge=1, description="Warn when this many days or fewer remain")
    expiring_days: int = Field(..., ge=1, description="Expiring when this many days or fewer remain")

    def to_config(self) -> ThresholdConfig:
        return ThresholdConfig(warning_days=self.warning_days, expiring_days=self.expiring_days)

    @classmethod
    def from_config(cls, config: ThresholdConfig) -> "ThresholdsSchema":
        return cls(warning_days=config.warning_days, expiring_days=config.expiring_days)


class ExtractRequest(BaseModel):
    """Request body for POST /v1/extract"""

    text: str = Field(..., description="Raw OCR text from one scan attempt")
    numeric_order: Optional[NumericDateOrder] = Field(
        None, description="How to read ambiguous numeric dates; service default if omitted"
    )


class ExtractResponse(BaseModel):
    """Response for POST /v1/extract; found=false means no date, enter it manually"""

    found: bool
    expiry_date: Optional[date] = None
    pattern_family: Optional[PatternFamily] = None
    matched_text: Optional[str] = None


class ClassifyRequest(BaseModel):
    """Request body for POST /v1/classify"""

    expiry_date: date
    today: Optional[date] = Field(None, description="Caller's current date; server date if omitted")
    thresholds: Optional[ThresholdsSchema] = Field(
        None, description="Inline thresholds; the profile's stored thresholds if omitted"
    )
    profile_id: Optional[str] = None


class ClassifyResponse(BaseModel):
    """Response for POST /v1/classify"""

    category: Category
    days_until_expiry: int
    label: str
    color: str
    thresholds: ThresholdsSchema


class SummaryRequest(BaseModel):
    """Request body for POST /v1/classify/summary"""

    expiry_dates: List[date]
    today: Optional[date] = None
    thresholds: Optional[ThresholdsSchema] = None
    profile_id: Optional[str] = None


class SummaryResponse(BaseModel):
    """Response for POST /v1/classify/summary"""

    counts: Dict[Category, int]
    total: int


class ScanRequest(BaseModel):
    """Request body for POST /v1/scan"""

    text: str
    today: Optional[date] = None
    numeric_order: Optional[NumericDateOrder] = None
    thresholds: Optional[ThresholdsSchema] = None
    profile_id: Optional[str] = None


class ScanResponse(BaseModel):
    """Response for POST /v1/scan; classification is null when no date was found"""

    extraction: ExtractResponse
    classification: Optional[ClassifyResponse] = None


class ReminderRequest(BaseModel):
    """Request body for POST /v1/reminders"""

    expiry_date: date
    today: Optional[date] = None
    reminder_days: Optional[List[int]] = Field(None, description="Days before expiry; service default if omitted")


class ReminderSchema(BaseModel):
    """Single reminder in a schedule"""

    remind_on: date
    days_before: int


class ReminderResponse(BaseModel):
    """Response for POST /v1/reminders"""

    expiry_date: date
    reminders: List[ReminderSchema]


class ThresholdUpdateRequest(BaseModel):
    """Partial update body for PUT /v1/settings/{profile_id}/thresholds"""

    warning_days: Optional[int] = None
    expiring_days: Optional[int] = None


class ThresholdSettingsResponse(BaseModel):
    """Stored thresholds for a profile"""

    profile_id: str
    warning_days: int
    expiring_days: int
