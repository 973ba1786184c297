"""Merges the outputs of all classifiers into one unified result."""

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from ua_classifier.application.services.sanitizer import Sanitizer
from ua_classifier.domain.errors import InternalInconsistencyError
from ua_classifier.domain.models import (
    ClassificationRequest,
    DeviceClassification,
    GeneralClassification,
    MobileClassification,
    UnifiedResult,
)
from ua_classifier.domain.user_agent_text import truncate_for_log

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ua_classifier.domain.ports import (
        DeviceBotClassifier,
        GeneralUaClassifier,
        MobileTabletClassifier,
    )

T = TypeVar("T")


class ResultAggregator:
    """Runs the classifiers and assembles a UnifiedResult.

    Each output field has exactly one source classifier:

    - general classifier: client_summary, ua_family, ua_version, os_family, os_version
    - device/bot classifier: ua_type, bot_info, os_meta, rendering engine,
      device brand/model and the bot/user decision
    - mobile/tablet classifier: is_mobile, is_tablet (is_desktop is derived)

    A missing or failing classifier contributes its absent defaults; the
    aggregation itself never fails.
    """

    def __init__(
        self,
        general: "GeneralUaClassifier | None",
        device: "DeviceBotClassifier | None",
        mobile: "MobileTabletClassifier | None",
        sanitizer: Sanitizer | None = None,
        log_user_agent_max_length: int = 200,
    ) -> None:
        """Initialize with the three classifier ports.

        Args:
            general: General UA classifier, or None if unavailable.
            device: Device/bot classifier, or None if unavailable.
            mobile: Mobile/tablet classifier, or None if unavailable.
            sanitizer: Post-processing pass. Defaults to Sanitizer().
            log_user_agent_max_length: Truncation length for user agents in log messages.
        """
        self._general = general
        self._device = device
        self._mobile = mobile
        self._sanitizer = sanitizer or Sanitizer()
        self._log_max_length = log_user_agent_max_length

    def classify_request(self, request: ClassificationRequest) -> UnifiedResult:
        """Classify the user agent carried by a request."""
        return self.classify(request.user_agent)

    def classify(self, user_agent: str) -> UnifiedResult:
        """Classify a raw user-agent string.

        Raises:
            TypeError: If user_agent is not a string.
        """
        if not isinstance(user_agent, str):
            raise TypeError(f"user_agent must be str, not {type(user_agent).__name__}")

        general = self._run(
            "general", self._general, user_agent, GeneralClassification.absent
        )
        device = self._run("device/bot", self._device, user_agent, DeviceClassification.absent)
        mobile = self._run(
            "mobile/tablet", self._mobile, user_agent, MobileClassification.absent
        )

        device = self._resolve_inconsistency(device, user_agent)
        tree = self._assemble(general, device, mobile)
        return UnifiedResult.model_validate(self._sanitizer.sanitize(tree))

    def _run(
        self,
        name: str,
        classifier: Any,
        user_agent: str,
        absent: Callable[[], T],
    ) -> T:
        """Run one classifier, degrading to its absent result on any failure."""
        if classifier is None:
            return absent()
        try:
            result: T = classifier.classify(user_agent)
        except Exception as e:
            logger.warning(
                f"{name} classifier failed for '{truncate_for_log(user_agent, self._log_max_length)}': {e}"
            )
            return absent()
        return result

    def _resolve_inconsistency(
        self, device: DeviceClassification, user_agent: str
    ) -> DeviceClassification:
        """Prefer the bot branch when a classifier reports bot and client data together."""
        try:
            device.check_consistency()
        except InternalInconsistencyError as e:
            logger.warning(
                f"Inconsistent device classification for "
                f"'{truncate_for_log(user_agent, self._log_max_length)}': {e}"
            )
            return device.bot_only()
        return device

    @staticmethod
    def _assemble(
        general: GeneralClassification,
        device: DeviceClassification,
        mobile: MobileClassification,
    ) -> dict[str, Any]:
        """Build the unsanitized result tree from the per-classifier results."""
        return {
            "client_summary": general.client_summary,
            "ua_family": general.user_agent.family,
            "ua_version": general.user_agent.version.model_dump(),
            "os_family": general.os.family,
            "os_version": general.os.version.model_dump(),
            "ua_type": device.client_type,
            "bot_info": device.bot_info.model_dump(),
            "os_meta": device.os_meta.model_dump(),
            "ua_rendering_engine": device.rendering_engine.name,
            "ua_rendering_engine_version": device.rendering_engine.version.model_dump(),
            "device": {
                "is_mobile": mobile.is_mobile,
                "is_tablet": mobile.is_tablet,
                "is_desktop": mobile.is_desktop,
                "brand": device.client_brand,
                "model": device.client_model,
            },
            "client": {
                "bot": device.is_bot,
                "user": not device.is_bot,
            },
        }
