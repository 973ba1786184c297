"""Classify raw User-Agent strings into a unified, null-safe description of the client."""

from ua_classifier.domain.models import ClassificationRequest, UnifiedResult
from ua_classifier.main import classify, create_result_aggregator

__all__ = [
    "ClassificationRequest",
    "UnifiedResult",
    "classify",
    "create_result_aggregator",
]
