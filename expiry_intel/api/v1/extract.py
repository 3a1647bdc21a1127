"""POST /v1/extract and POST /v1/scan - expiry date extraction from OCR text"""

import time
from typing import Optional

from fastapi import APIRouter, Depends, Request

from expiry_intel.api.dependencies import (
    get_request_id,
    get_threshold_repository,
    resolve_numeric_order,
    resolve_thresholds,
    resolve_today,
)
from expiry_intel.api.v1.classify import build_classify_response
from expiry_intel.api.v1.schemas import ExtractRequest, ExtractResponse, ScanRequest, ScanResponse
from expiry_intel.domain.classification import classify_with_days
from expiry_intel.domain.extraction import extract_match
from expiry_intel.domain.models import ExtractionMatch, NumericDateOrder
from expiry_intel.infrastructure.database.repositories import ThresholdSettingsRepository
from expiry_intel.infrastructure.observability.logging import log_classification, log_extraction
from expiry_intel.infrastructure.observability.metrics import record_classification, record_extraction

router = APIRouter()


def _run_extraction(text: str, numeric_order: NumericDateOrder, request_id: str) -> Optional[ExtractionMatch]:
    """Extract, then record metrics and logs for the outcome"""
    start_time = time.time()
    match = extract_match(text, numeric_order)
    duration_ms = (time.time() - start_time) * 1000

    family = match.family.value if match else None
    record_extraction(family)
    log_extraction(request_id, match is not None, family, duration_ms)
    return match


def _to_extract_response(match: Optional[ExtractionMatch]) -> ExtractResponse:
    if match is None:
        return ExtractResponse(found=False)
    return ExtractResponse(
        found=True,
        expiry_date=match.expiry_date.to_date(),
        pattern_family=match.family,
        matched_text=match.matched_text,
    )


@router.post("/extract", response_model=ExtractResponse)
def extract_expiry_date(request_body: ExtractRequest, request: Request):
    """
    Pull an expiry date out of raw OCR text.

    A missing date is a normal outcome (found=false), not an error; the client
    falls back to manual entry.
    """
    request_id = get_request_id(request)
    numeric_order = resolve_numeric_order(request_body.numeric_order)

    match = _run_extraction(request_body.text, numeric_order, request_id)
    return _to_extract_response(match)


@router.post("/scan", response_model=ScanResponse)
def scan_label(
    request_body: ScanRequest,
    request: Request,
    repo: ThresholdSettingsRepository = Depends(get_threshold_repository),
):
    """
    End-to-end label scan.

    Flow:
    1. Extract the expiry date from OCR text
    2. If found, snapshot thresholds (inline or stored profile)
    3. Classify against the caller's date
    """
    request_id = get_request_id(request)
    numeric_order = resolve_numeric_order(request_body.numeric_order)

    match = _run_extraction(request_body.text, numeric_order, request_id)
    extraction = _to_extract_response(match)
    if match is None:
        return ScanResponse(extraction=extraction)

    thresholds = resolve_thresholds(request_body.thresholds, request_body.profile_id, repo)
    today = resolve_today(request_body.today)
    classification = classify_with_days(match.expiry_date, today, thresholds)

    record_classification(classification.category.value)
    log_classification(request_id, classification.category.value, classification.days_until_expiry, thresholds)

    return ScanResponse(
        extraction=extraction,
        classification=build_classify_response(classification, thresholds),
    )
