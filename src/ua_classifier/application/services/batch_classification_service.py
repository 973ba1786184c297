"""Concurrent classification of many user-agent strings."""

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ua_classifier.domain.models import UnifiedResult

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ua_classifier.application.services.result_aggregator import ResultAggregator


class BatchClassificationService:
    """Classifies batches of user agents on worker threads."""

    def __init__(self, aggregator: "ResultAggregator", max_concurrency: int = 8) -> None:
        """Initialize with an aggregator and the maximum number of parallel classifications."""
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._aggregator = aggregator
        self._max_concurrency = max_concurrency

    async def classify_many(self, user_agents: Iterable[str]) -> list[UnifiedResult]:
        """Classify every user agent, returning results in input order."""
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def classify_one(user_agent: str) -> UnifiedResult:
            async with semaphore:
                return await asyncio.to_thread(self._aggregator.classify, user_agent)

        user_agent_list = list(user_agents)
        logger.debug(
            f"Classifying {len(user_agent_list)} user agent(s) "
            f"with concurrency {self._max_concurrency}"
        )
        return list(await asyncio.gather(*(classify_one(ua) for ua in user_agent_list)))
