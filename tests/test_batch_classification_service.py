"""Tests for concurrent batch classification."""

import threading

import pytest

from tests.fakes import FakeDeviceClassifier, FakeGeneralClassifier, FakeMobileClassifier
from ua_classifier.application.services import BatchClassificationService, ResultAggregator
from ua_classifier.domain.models import (
    BotInfo,
    DeviceClassification,
    MobileClassification,
    UnifiedResult,
)


class EchoDeviceClassifier:
    """Reports a bot whose name is the user agent, recording the calling threads."""

    def __init__(self) -> None:
        """Initialize the thread record."""
        self.thread_ids: set[int] = set()
        self._lock = threading.Lock()

    def classify(self, user_agent: str) -> DeviceClassification:
        """Return a bot named after the input."""
        with self._lock:
            self.thread_ids.add(threading.get_ident())
        return DeviceClassification(is_bot=True, bot_info=BotInfo(name=user_agent))


@pytest.mark.asyncio
async def test_classify_many_returns_results_in_input_order() -> None:
    """Given several user agents, when classifying as a batch, then order is preserved."""
    aggregator = ResultAggregator(general=None, device=EchoDeviceClassifier(), mobile=None)
    service = BatchClassificationService(aggregator, max_concurrency=2)
    user_agents = [f"bot-{i}" for i in range(10)]

    results = await service.classify_many(user_agents)

    assert [r.bot_info.name for r in results] == user_agents
    assert all(isinstance(r, UnifiedResult) for r in results)


@pytest.mark.asyncio
async def test_classify_many_runs_off_the_event_loop_thread() -> None:
    """Given a batch, when classifying, then classifiers run on worker threads."""
    device = EchoDeviceClassifier()
    aggregator = ResultAggregator(general=None, device=device, mobile=None)

    await BatchClassificationService(aggregator).classify_many(["a", "b"])

    assert threading.get_ident() not in device.thread_ids


@pytest.mark.asyncio
async def test_classify_many_with_empty_input_returns_empty_list() -> None:
    """Given no user agents, when classifying, then an empty list is returned."""
    aggregator = ResultAggregator(
        general=FakeGeneralClassifier(),
        device=FakeDeviceClassifier(),
        mobile=FakeMobileClassifier(MobileClassification(is_mobile=True)),
    )

    assert await BatchClassificationService(aggregator).classify_many([]) == []


def test_batch_service_rejects_non_positive_concurrency() -> None:
    """Given zero concurrency, when creating the service, then ValueError is raised."""
    aggregator = ResultAggregator(general=None, device=None, mobile=None)

    with pytest.raises(ValueError, match="max_concurrency"):
        BatchClassificationService(aggregator, max_concurrency=0)
