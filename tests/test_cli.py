"""Tests for the command-line interface."""

import io
import json

import pytest

from tests.fakes import FakeDeviceClassifier, FakeGeneralClassifier, FakeMobileClassifier
from ua_classifier import cli
from ua_classifier.adapters.config import AppConfig
from ua_classifier.application.services import ResultAggregator
from ua_classifier.domain.models import BotInfo, DeviceClassification, MobileClassification


@pytest.fixture
def fake_aggregator(monkeypatch: pytest.MonkeyPatch) -> ResultAggregator:
    """Replace the real classifiers with fakes for CLI runs."""
    aggregator = ResultAggregator(
        general=FakeGeneralClassifier(),
        device=FakeDeviceClassifier(
            DeviceClassification(is_bot=True, bot_info=BotInfo(name="Googlebot", category="Search bot"))
        ),
        mobile=FakeMobileClassifier(MobileClassification()),
    )

    def create(config: AppConfig | None = None) -> ResultAggregator:  # noqa: ARG001
        return aggregator

    monkeypatch.setattr(cli, "create_result_aggregator", create)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return aggregator


@pytest.mark.usefixtures("fake_aggregator")
def test_main_prints_single_result_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a user agent argument, when running, then the unified result is printed."""
    exit_code = cli.main(["Googlebot/2.1"])

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output["client"] == {"bot": True, "user": False}
    assert output["ua_type"] == "Search bot"
    assert output["ua_family"] == "Chrome"


@pytest.mark.usefixtures("fake_aggregator")
def test_main_compact_prints_one_line(capsys: pytest.CaptureFixture[str]) -> None:
    """Given --compact, when running, then output fits on one line."""
    cli.main(["Googlebot/2.1", "--compact"])

    assert capsys.readouterr().out.count("\n") == 1


@pytest.mark.usefixtures("fake_aggregator")
def test_main_reads_stdin_lines(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given --stdin, when running, then one JSON document per input line is printed."""
    monkeypatch.setattr("sys.stdin", io.StringIO("first\nsecond\n"))

    exit_code = cli.main(["--stdin"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert len(lines) == 2
    assert all(json.loads(line)["bot_info"]["name"] == "Googlebot" for line in lines)


@pytest.mark.usefixtures("fake_aggregator")
def test_main_requires_exactly_one_input_source() -> None:
    """Given neither argument nor --stdin, when running, then argparse exits with usage error."""
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 2


@pytest.mark.usefixtures("fake_aggregator")
def test_main_rejects_unknown_log_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an invalid --log-level, when running, then a configuration error is reported."""
    exit_code = cli.main(["Mozilla/5.0", "--log-level", "chatty"])

    assert exit_code == 2
    assert "Invalid configuration" in capsys.readouterr().err
