"""Mobile/tablet classifier backed by the user-agents library."""

import logging
from collections.abc import Callable
from typing import Any

from ua_classifier.domain.errors import AdapterUnavailableError, MalformedInputError
from ua_classifier.domain.models import MobileClassification
from ua_classifier.domain.ports import MobileTabletClassifier
from ua_classifier.domain.user_agent_text import truncate_for_log

logger = logging.getLogger(__name__)


class UserAgentsMobileClassifier(MobileTabletClassifier):
    """Detects mobile and tablet clients. Has no notion of bots."""

    def __init__(
        self,
        parse: Callable[[str], Any] | None = None,
        log_user_agent_max_length: int = 200,
    ) -> None:
        """Initialize the classifier.

        Args:
            parse: Callable returning an object with ``is_mobile`` and ``is_tablet``.
                Defaults to ``user_agents.parse``.
            log_user_agent_max_length: Truncation length for user agents in log messages.

        Raises:
            AdapterUnavailableError: If user-agents cannot be imported.
        """
        if parse is None:
            try:
                from user_agents import parse as parse_user_agent
            except ImportError as e:
                raise AdapterUnavailableError("user-agents is not installed") from e
            parse = parse_user_agent
        self._parse = parse
        self._log_max_length = log_user_agent_max_length

    def classify(self, user_agent: str) -> MobileClassification:
        """Classify a user agent, returning an absent result on failure."""
        try:
            return self._classify(user_agent)
        except MalformedInputError as e:
            logger.debug(f"user-agents skipped user agent: {e}")
        except Exception as e:
            logger.warning(
                f"user-agents failed for '{truncate_for_log(user_agent, self._log_max_length)}': {e}"
            )
        return MobileClassification.absent()

    def _classify(self, user_agent: str) -> MobileClassification:
        if user_agent == "":
            raise MalformedInputError("empty user agent")

        parsed = self._parse(user_agent)
        return MobileClassification(
            is_mobile=bool(parsed.is_mobile),
            is_tablet=bool(parsed.is_tablet),
        )
