"""Domain layer - classification models, ports and version parsing."""

from ua_classifier.domain.errors import (
    AdapterUnavailableError,
    ClassificationError,
    InternalInconsistencyError,
    MalformedInputError,
)
from ua_classifier.domain.models import (
    ClassificationRequest,
    DeviceClassification,
    GeneralClassification,
    MobileClassification,
    UnifiedResult,
    VersionInfo,
)
from ua_classifier.domain.ports import (
    DeviceBotClassifier,
    GeneralUaClassifier,
    MobileTabletClassifier,
)
from ua_classifier.domain.version_string import parse_version

__all__ = [
    "AdapterUnavailableError",
    "ClassificationError",
    "ClassificationRequest",
    "DeviceBotClassifier",
    "DeviceClassification",
    "GeneralClassification",
    "GeneralUaClassifier",
    "InternalInconsistencyError",
    "MalformedInputError",
    "MobileClassification",
    "MobileTabletClassifier",
    "UnifiedResult",
    "VersionInfo",
    "parse_version",
]
