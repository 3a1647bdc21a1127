"""/v1/settings/{profile_id}/thresholds - threshold settings store endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from expiry_intel.api.dependencies import get_request_id
from expiry_intel.api.v1.schemas import ThresholdSettingsResponse, ThresholdUpdateRequest
from expiry_intel.domain.exceptions import InvalidThresholdsError
from expiry_intel.domain.models import ThresholdConfig
from expiry_intel.infrastructure.database.repositories import ThresholdSettingsRepository
from expiry_intel.infrastructure.database.session import get_db
from expiry_intel.infrastructure.observability.metrics import threshold_update_counter

router = APIRouter()


def _to_response(profile_id: str, thresholds: ThresholdConfig) -> ThresholdSettingsResponse:
    return ThresholdSettingsResponse(
        profile_id=profile_id,
        warning_days=thresholds.warning_days,
        expiring_days=thresholds.expiring_days,
    )


@router.get("/settings/{profile_id}/thresholds", response_model=ThresholdSettingsResponse)
def get_thresholds(profile_id: str, db: Session = Depends(get_db)):
    """Current thresholds for a profile (defaults if never saved)"""
    repo = ThresholdSettingsRepository(db)
    return _to_response(profile_id, repo.get_thresholds(profile_id))


@router.put("/settings/{profile_id}/thresholds", response_model=ThresholdSettingsResponse)
def update_thresholds(
    profile_id: str,
    request_body: ThresholdUpdateRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Partially update a profile's thresholds.

    The merged pair must satisfy 1 <= expiring_days < warning_days, otherwise 422.
    """
    request_id = get_request_id(request)

    try:
        repo = ThresholdSettingsRepository(db)
        thresholds = repo.update_thresholds(
            profile_id,
            warning_days=request_body.warning_days,
            expiring_days=request_body.expiring_days,
        )
        db.commit()

    except InvalidThresholdsError as e:
        db.rollback()
        threshold_update_counter.labels(outcome="rejected").inc()
        logging.warning(f"Rejected threshold update: {e}", extra={"request_id": request_id, "profile_id": profile_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    threshold_update_counter.labels(outcome="accepted").inc()
    return _to_response(profile_id, thresholds)


@router.delete("/settings/{profile_id}/thresholds", response_model=ThresholdSettingsResponse)
def reset_thresholds(profile_id: str, request: Request, db: Session = Depends(get_db)):
    """Reset a profile's thresholds to the defaults"""
    request_id = get_request_id(request)

    try:
        thresholds = ThresholdSettingsRepository(db).reset_thresholds(profile_id)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    threshold_update_counter.labels(outcome="reset").inc()
    return _to_response(profile_id, thresholds)
