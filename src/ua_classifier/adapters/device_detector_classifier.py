"""Device and bot classifier backed by device-detector.

Bot detection runs first. A bot only gets its identity (name, category,
URL, producer); a human client gets rendering engine, client type, device
brand/model and OS details instead.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from ua_classifier.domain.errors import AdapterUnavailableError, MalformedInputError
from ua_classifier.domain.models import (
    BotInfo,
    BotVendor,
    DeviceClassification,
    OsMeta,
    RenderingEngine,
)
from ua_classifier.domain.ports import DeviceBotClassifier
from ua_classifier.domain.user_agent_text import truncate_for_log
from ua_classifier.domain.version_string import parse_version, version_summary

logger = logging.getLogger(__name__)


def _text(value: Any) -> str | None:
    """Reduce a detector value to plain text.

    device-detector returns some values as enums (client type) or as dicts
    keyed by ``"default"`` (engines that vary by version).
    """
    if isinstance(value, dict):
        value = value.get("default")
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    return None


def _default_detector_factory() -> Callable[[str], Any]:
    """Return a factory producing parsed device_detector.DeviceDetector instances."""
    try:
        from device_detector import DeviceDetector
    except ImportError as e:
        raise AdapterUnavailableError("device-detector is not installed") from e

    def detect(user_agent: str) -> Any:
        return DeviceDetector(user_agent).parse()

    return detect


class DeviceDetectorClassifier(DeviceBotClassifier):
    """Classifies bots, rendering engines, devices and OS details."""

    def __init__(
        self,
        detector_factory: Callable[[str], Any] | None = None,
        log_user_agent_max_length: int = 200,
    ) -> None:
        """Initialize the classifier.

        Args:
            detector_factory: Callable returning a parsed detector for a user agent.
                Defaults to ``DeviceDetector(user_agent).parse()``.
            log_user_agent_max_length: Truncation length for user agents in log messages.

        Raises:
            AdapterUnavailableError: If device-detector cannot be imported.
        """
        self._detect = detector_factory or _default_detector_factory()
        self._log_max_length = log_user_agent_max_length

    def classify(self, user_agent: str) -> DeviceClassification:
        """Classify a user agent, returning an absent result on failure."""
        try:
            return self._classify(user_agent)
        except MalformedInputError as e:
            logger.debug(f"device-detector skipped user agent: {e}")
        except Exception as e:
            logger.warning(
                f"device-detector failed for "
                f"'{truncate_for_log(user_agent, self._log_max_length)}': {e}"
            )
        return DeviceClassification.absent()

    def _classify(self, user_agent: str) -> DeviceClassification:
        if user_agent == "":
            raise MalformedInputError("empty user agent")

        detected = self._detect(user_agent)
        details: dict[str, Any] = getattr(detected, "all_details", None) or {}

        if detected.is_bot():
            return DeviceClassification(is_bot=True, bot_info=self._bot_info(details))

        client = details.get("client") or {}
        os_details = details.get("os") or {}

        engine = _text(detected.engine())
        engine_version = _text(client.get("engine_version"))
        rendering_engine = RenderingEngine(
            name=engine,
            version=parse_version(engine_version, version_summary(engine, engine_version)),
        )

        return DeviceClassification(
            is_bot=False,
            rendering_engine=rendering_engine,
            client_type=_text(detected.client_type()),
            client_name=_text(detected.client_name()),
            client_brand=_text(detected.device_brand()),
            client_model=_text(detected.device_model()),
            os_meta=OsMeta(
                name=_text(detected.os_name()),
                short_name=_text(os_details.get("short_name")),
                version=_text(detected.os_version()),
                platform=_text(os_details.get("platform")),
            ),
        )

    @staticmethod
    def _bot_info(details: dict[str, Any]) -> BotInfo:
        """Map the detector's bot details, including its producer, to BotInfo."""
        bot = details.get("bot") or {}
        producer = bot.get("producer") or {}
        return BotInfo(
            name=_text(bot.get("name")),
            category=_text(bot.get("category")),
            url=_text(bot.get("url")),
            vendor=BotVendor(name=_text(producer.get("name")), url=_text(producer.get("url"))),
        )
