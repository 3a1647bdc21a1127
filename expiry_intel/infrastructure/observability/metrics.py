"""Prometheus metrics for extraction hit rates, category distribution, and settings changes"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Extraction metrics
extraction_counter = Counter(
    "expiry_extraction_total",
    "Expiry date extraction attempts",
    ["outcome", "pattern_family"],  # found | not_found, family or "none"
)

# Classification metrics
classification_counter = Counter(
    "expiry_classification_total",
    "Expiry dates classified by category",
    ["category"],  # expired | expiring | warning | fresh
)

# Settings store metrics
threshold_update_counter = Counter(
    "expiry_threshold_updates_total",
    "Threshold settings update attempts",
    ["outcome"],  # accepted | rejected | reset
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_extraction(pattern_family: Optional[str]) -> None:
    """Record one extraction; a None family means no date was found"""
    if pattern_family is None:
        extraction_counter.labels(outcome="not_found", pattern_family="none").inc()
    else:
        extraction_counter.labels(outcome="found", pattern_family=pattern_family).inc()


def record_classification(category: str) -> None:
    classification_counter.labels(category=category).inc()
