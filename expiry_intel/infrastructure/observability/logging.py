"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from expiry_intel.domain.models import ThresholdConfig


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "expiry-intel"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_extraction(
    request_id: str,
    found: bool,
    pattern_family: Optional[str],
    duration_ms: float,
) -> None:
    """Log structured extraction outcome; the OCR text itself is never logged"""
    logging.info(
        "Extraction completed",
        extra={
            "request_id": request_id,
            "step": "extraction_complete",
            "outcome": "found" if found else "not_found",
            "pattern_family": pattern_family,
            "duration_ms": duration_ms,
        },
    )


def log_classification(
    request_id: str,
    category: str,
    days_until_expiry: int,
    thresholds: ThresholdConfig,
) -> None:
    """Log structured classification outcome with the threshold snapshot used"""
    logging.info(
        "Classification completed",
        extra={
            "request_id": request_id,
            "step": "classification_complete",
            "category": category,
            "days_until_expiry": days_until_expiry,
            "warning_days": thresholds.warning_days,
            "expiring_days": thresholds.expiring_days,
            "thresholds_consistent": thresholds.is_consistent,
        },
    )
