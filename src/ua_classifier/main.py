"""Composition root wiring configuration, classifier adapters and services."""

import logging
import sys
from functools import lru_cache

from ua_classifier.adapters.classifier_factory import create_classifiers
from ua_classifier.adapters.config import AppConfig
from ua_classifier.application.services import ResultAggregator
from ua_classifier.domain.models import UnifiedResult

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )


def create_result_aggregator(config: AppConfig | None = None) -> ResultAggregator:
    """Create a ResultAggregator with the classifiers enabled in config."""
    config = config or AppConfig()
    classifiers = create_classifiers(config)
    return ResultAggregator(
        general=classifiers.general,
        device=classifiers.device,
        mobile=classifiers.mobile,
        log_user_agent_max_length=config.log_user_agent_max_length,
    )


@lru_cache(maxsize=1)
def _default_aggregator() -> ResultAggregator:
    return create_result_aggregator()


def classify(user_agent: str, config: AppConfig | None = None) -> UnifiedResult:
    """Classify a user agent.

    Without a config, a process-wide aggregator built from the environment is
    reused, so the classifier databases are only loaded once.
    """
    if config is None:
        return _default_aggregator().classify(user_agent)
    return create_result_aggregator(config).classify(user_agent)
