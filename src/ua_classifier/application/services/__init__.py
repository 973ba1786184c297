"""Application services for user-agent classification."""

from ua_classifier.application.services.batch_classification_service import (
    BatchClassificationService,
)
from ua_classifier.application.services.result_aggregator import ResultAggregator
from ua_classifier.application.services.sanitizer import (
    Sanitizer,
    fill_fallbacks,
    normalize_blanks,
)

__all__ = [
    "BatchClassificationService",
    "ResultAggregator",
    "Sanitizer",
    "fill_fallbacks",
    "normalize_blanks",
]
