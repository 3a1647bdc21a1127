"""Data access layer for expiry threshold settings"""

from typing import Optional
from sqlalchemy.orm import Session
from expiry_intel.infrastructure.database.models import ExpiryThresholdSettings
from expiry_intel.domain.exceptions import InvalidThresholdsError
from expiry_intel.domain.models import ThresholdConfig


def validate_thresholds(thresholds: ThresholdConfig) -> None:
    """
    Enforce the store invariant before persisting.

    Raises:
        InvalidThresholdsError: Unless 1 <= expiring_days < warning_days
    """
    if thresholds.expiring_days < 1 or thresholds.warning_days < 1:
        raise InvalidThresholdsError("Threshold days must be at least 1")
    if thresholds.expiring_days >= thresholds.warning_days:
        raise InvalidThresholdsError(
            f"expiring_days ({thresholds.expiring_days}) must be less than "
            f"warning_days ({thresholds.warning_days})"
        )


class ThresholdSettingsRepository:
    """Repository for per-profile expiry thresholds"""

    def __init__(self, db: Session):
        self.db = db

    def _get_row(self, profile_id: str) -> Optional[ExpiryThresholdSettings]:
        return (
            self.db.query(ExpiryThresholdSettings)
            .filter(ExpiryThresholdSettings.profile_id == profile_id)
            .first()
        )

    def get_thresholds(self, profile_id: str) -> ThresholdConfig:
        """Fetch a snapshot of the profile's thresholds, defaults if never saved"""
        row = self._get_row(profile_id)
        if row is None:
            return ThresholdConfig.default()
        return ThresholdConfig(warning_days=row.warning_days, expiring_days=row.expiring_days)

    def update_thresholds(
        self,
        profile_id: str,
        warning_days: Optional[int] = None,
        expiring_days: Optional[int] = None,
    ) -> ThresholdConfig:
        """
        Merge a partial update onto the current thresholds and persist it.

        Raises:
            InvalidThresholdsError: Merged pair violates the store invariant
        """
        current = self.get_thresholds(profile_id)
        merged = ThresholdConfig(
            warning_days=current.warning_days if warning_days is None else warning_days,
            expiring_days=current.expiring_days if expiring_days is None else expiring_days,
        )
        validate_thresholds(merged)
        self._save(profile_id, merged)
        return merged

    def reset_thresholds(self, profile_id: str) -> ThresholdConfig:
        """Restore default thresholds for the profile"""
        defaults = ThresholdConfig.default()
        self._save(profile_id, defaults)
        return defaults

    def _save(self, profile_id: str, thresholds: ThresholdConfig) -> None:
        row = self._get_row(profile_id)
        if row is None:
            row = ExpiryThresholdSettings(profile_id=profile_id)
            self.db.add(row)
        row.warning_days = thresholds.warning_days
        row.expiring_days = thresholds.expiring_days
        self.db.flush()
