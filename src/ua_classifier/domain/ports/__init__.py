"""Ports (interfaces) for the ports-and-adapters architecture."""

from ua_classifier.domain.ports.device_bot_classifier import DeviceBotClassifier
from ua_classifier.domain.ports.general_ua_classifier import GeneralUaClassifier
from ua_classifier.domain.ports.mobile_tablet_classifier import MobileTabletClassifier

__all__ = [
    "DeviceBotClassifier",
    "GeneralUaClassifier",
    "MobileTabletClassifier",
]
