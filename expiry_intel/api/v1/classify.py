"""POST /v1/classify - urgency category for an expiry date"""

from fastapi import APIRouter, Depends, Request

from expiry_intel.api.dependencies import (
    get_request_id,
    get_threshold_repository,
    resolve_thresholds,
    resolve_today,
)
from expiry_intel.api.v1.schemas import (
    ClassifyRequest,
    ClassifyResponse,
    SummaryRequest,
    SummaryResponse,
    ThresholdsSchema,
)
from expiry_intel.domain.classification import classify_with_days, describe, summarize
from expiry_intel.domain.models import Classification, ThresholdConfig
from expiry_intel.infrastructure.database.repositories import ThresholdSettingsRepository
from expiry_intel.infrastructure.observability.logging import log_classification
from expiry_intel.infrastructure.observability.metrics import record_classification

router = APIRouter()


def build_classify_response(classification: Classification, thresholds: ThresholdConfig) -> ClassifyResponse:
    display = describe(classification.category)
    return ClassifyResponse(
        category=classification.category,
        days_until_expiry=classification.days_until_expiry,
        label=display.label,
        color=display.color,
        thresholds=ThresholdsSchema.from_config(thresholds),
    )


@router.post("/classify", response_model=ClassifyResponse)
def classify_expiry(
    request_body: ClassifyRequest,
    request: Request,
    repo: ThresholdSettingsRepository = Depends(get_threshold_repository),
):
    """
    Classify an expiry date as expired, expiring, warning, or fresh.

    Inverted inline thresholds are not rejected; the bands are applied literally.
    """
    request_id = get_request_id(request)
    thresholds = resolve_thresholds(request_body.thresholds, request_body.profile_id, repo)
    today = resolve_today(request_body.today)

    classification = classify_with_days(request_body.expiry_date, today, thresholds)

    record_classification(classification.category.value)
    log_classification(request_id, classification.category.value, classification.days_until_expiry, thresholds)

    return build_classify_response(classification, thresholds)


@router.post("/classify/summary", response_model=SummaryResponse)
def summarize_expiries(
    request_body: SummaryRequest,
    repo: ThresholdSettingsRepository = Depends(get_threshold_repository),
):
    """Count a product list per category, for dashboard badges"""
    thresholds = resolve_thresholds(request_body.thresholds, request_body.profile_id, repo)
    today = resolve_today(request_body.today)

    summary = summarize(request_body.expiry_dates, today, thresholds)
    return SummaryResponse(counts=summary.counts, total=summary.total)
