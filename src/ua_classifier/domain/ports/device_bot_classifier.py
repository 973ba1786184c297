"""Device and bot classifier port."""

from typing import Protocol

from ua_classifier.domain.models.device_classification import DeviceClassification


class DeviceBotClassifier(Protocol):
    """Port for bot detection and, for human clients, engine/device/OS details."""

    def classify(self, user_agent: str) -> DeviceClassification:
        """Classify a user agent. Returns an absent result instead of raising."""
        ...
