"""Adapters layer - classifier libraries and configuration."""

from ua_classifier.adapters.classifier_factory import ClassifierSet, create_classifiers
from ua_classifier.adapters.config import AppConfig
from ua_classifier.adapters.device_detector_classifier import DeviceDetectorClassifier
from ua_classifier.adapters.ua_parser_classifier import UaParserClassifier
from ua_classifier.adapters.user_agents_classifier import UserAgentsMobileClassifier

__all__ = [
    "AppConfig",
    "ClassifierSet",
    "DeviceDetectorClassifier",
    "UaParserClassifier",
    "UserAgentsMobileClassifier",
    "create_classifiers",
]
