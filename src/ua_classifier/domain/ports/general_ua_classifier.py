"""General user-agent classifier port."""

from typing import Protocol

from ua_classifier.domain.models.client_info import GeneralClassification


class GeneralUaClassifier(Protocol):
    """Port for classifying user-agent software and OS family/version."""

    def classify(self, user_agent: str) -> GeneralClassification:
        """Classify a user agent. Returns an absent result instead of raising."""
        ...
