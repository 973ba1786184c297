"""General user-agent classifier backed by ua-parser."""

import logging
from collections.abc import Callable
from typing import Any

from ua_classifier.domain.errors import AdapterUnavailableError, MalformedInputError
from ua_classifier.domain.models import ClientInfo, GeneralClassification
from ua_classifier.domain.ports import GeneralUaClassifier
from ua_classifier.domain.user_agent_text import truncate_for_log
from ua_classifier.domain.version_string import (
    join_version_parts,
    parse_version,
    version_summary,
)

logger = logging.getLogger(__name__)


def _client_info(section: dict[str, Any]) -> ClientInfo:
    """Map a ua-parser ``user_agent`` or ``os`` section to ClientInfo."""
    family = section.get("family")
    # The os section also carries patch_minor, which belongs in its summary
    version = join_version_parts(
        section.get("major"),
        section.get("minor"),
        section.get("patch"),
        section.get("patch_minor"),
    )
    summary = version_summary(family, version)
    return ClientInfo(
        family=family,
        version=parse_version(version, summary),
        summary=summary,
    )


class UaParserClassifier(GeneralUaClassifier):
    """Classifies user-agent software and OS using ua-parser's regex database."""

    def __init__(
        self,
        parse: Callable[[str], dict[str, Any]] | None = None,
        log_user_agent_max_length: int = 200,
    ) -> None:
        """Initialize the classifier.

        Args:
            parse: Parse function returning ua-parser's dict shape. Defaults to
                ``ua_parser.user_agent_parser.Parse``.
            log_user_agent_max_length: Truncation length for user agents in log messages.

        Raises:
            AdapterUnavailableError: If ua-parser cannot be imported.
        """
        if parse is None:
            try:
                from ua_parser import user_agent_parser
            except ImportError as e:
                raise AdapterUnavailableError("ua-parser is not installed") from e
            parse = user_agent_parser.Parse
        self._parse = parse
        self._log_max_length = log_user_agent_max_length

    def classify(self, user_agent: str) -> GeneralClassification:
        """Classify a user agent, returning an absent result on failure."""
        try:
            return self._classify(user_agent)
        except MalformedInputError as e:
            logger.debug(f"ua-parser skipped user agent: {e}")
        except Exception as e:
            logger.warning(
                f"ua-parser failed for '{truncate_for_log(user_agent, self._log_max_length)}': {e}"
            )
        return GeneralClassification.absent()

    def _classify(self, user_agent: str) -> GeneralClassification:
        if user_agent == "":
            raise MalformedInputError("empty user agent")

        parsed = self._parse(user_agent)
        ua_info = _client_info(parsed.get("user_agent") or {})
        os_info = _client_info(parsed.get("os") or {})
        client_summary = (
            f"{ua_info.summary}/{os_info.summary}" if ua_info.summary or os_info.summary else None
        )
        return GeneralClassification(
            user_agent=ua_info,
            os=os_info,
            client_summary=client_summary,
        )
