"""Builds the classifier adapters selected by configuration."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from ua_classifier.adapters.config import AppConfig
from ua_classifier.adapters.device_detector_classifier import DeviceDetectorClassifier
from ua_classifier.adapters.ua_parser_classifier import UaParserClassifier
from ua_classifier.adapters.user_agents_classifier import UserAgentsMobileClassifier
from ua_classifier.domain.errors import AdapterUnavailableError
from ua_classifier.domain.ports import (
    DeviceBotClassifier,
    GeneralUaClassifier,
    MobileTabletClassifier,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ClassifierSet:
    """The three classifier ports. None marks a disabled or unavailable classifier."""

    general: GeneralUaClassifier | None
    device: DeviceBotClassifier | None
    mobile: MobileTabletClassifier | None


def _create(name: str, enabled: bool, factory: Callable[[], T]) -> T | None:
    """Create one classifier, logging and skipping it if it is disabled or unavailable."""
    if not enabled:
        logger.info(f"{name} classifier disabled by configuration")
        return None
    try:
        return factory()
    except AdapterUnavailableError as e:
        logger.warning(f"{name} classifier unavailable, its fields will be absent: {e}")
        return None


def create_classifiers(config: AppConfig) -> ClassifierSet:
    """Create the classifier adapters for the given configuration."""
    max_length = config.log_user_agent_max_length
    return ClassifierSet(
        general=_create(
            "general",
            config.general_classifier_enabled,
            lambda: UaParserClassifier(log_user_agent_max_length=max_length),
        ),
        device=_create(
            "device/bot",
            config.device_classifier_enabled,
            lambda: DeviceDetectorClassifier(log_user_agent_max_length=max_length),
        ),
        mobile=_create(
            "mobile/tablet",
            config.mobile_classifier_enabled,
            lambda: UserAgentsMobileClassifier(log_user_agent_max_length=max_length),
        ),
    )
