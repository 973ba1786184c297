"""Domain models for user-agent classification."""

from ua_classifier.domain.models.classification_request import ClassificationRequest
from ua_classifier.domain.models.client_info import ClientInfo, GeneralClassification
from ua_classifier.domain.models.device_classification import (
    BotInfo,
    BotVendor,
    DeviceClassification,
    OsMeta,
    RenderingEngine,
)
from ua_classifier.domain.models.mobile_classification import MobileClassification
from ua_classifier.domain.models.unified_result import ClientBlock, DeviceBlock, UnifiedResult
from ua_classifier.domain.models.version_info import VersionInfo

__all__ = [
    "BotInfo",
    "BotVendor",
    "ClassificationRequest",
    "ClientBlock",
    "ClientInfo",
    "DeviceBlock",
    "DeviceClassification",
    "GeneralClassification",
    "MobileClassification",
    "OsMeta",
    "RenderingEngine",
    "UnifiedResult",
    "VersionInfo",
]
