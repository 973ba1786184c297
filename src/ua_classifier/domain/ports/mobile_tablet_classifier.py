"""Mobile/tablet classifier port."""

from typing import Protocol

from ua_classifier.domain.models.mobile_classification import MobileClassification


class MobileTabletClassifier(Protocol):
    """Port for detecting mobile and tablet form factors."""

    def classify(self, user_agent: str) -> MobileClassification:
        """Classify a user agent. Returns an absent result instead of raising."""
        ...
