"""Command-line interface for classifying user-agent strings."""

import argparse
import asyncio
import json
import logging
import sys

from ua_classifier.adapters.config import AppConfig, normalize_log_level
from ua_classifier.application.services import BatchClassificationService
from ua_classifier.domain.models import UnifiedResult
from ua_classifier.main import configure_logging, create_result_aggregator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ua-classifier",
        description="Classify User-Agent strings into browser, OS, device and bot details",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify a single user agent
  ua-classifier "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"

  # Classify one user agent per line from a log extract
  cut -f5 access.tsv | ua-classifier --stdin
        """,
    )
    parser.add_argument("user_agent", nargs="?", help="User-Agent string to classify")
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read one user agent per line from stdin and print one JSON document per line",
    )
    parser.add_argument(
        "--compact", action="store_true", help="Print single-user-agent output on one line"
    )
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--config", help="Path to a TOML configuration file")
    return parser


def _to_json(result: UnifiedResult, compact: bool) -> str:
    return json.dumps(result.to_dict(), indent=None if compact else 2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.stdin == (args.user_agent is not None):
        parser.error("provide either a user agent argument or --stdin")

    try:
        config = AppConfig(config_file=args.config) if args.config else AppConfig()
        if config.config_file:
            config.apply_toml_overrides()
        if args.log_level:
            config.log_level = normalize_log_level(args.log_level)
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)
    aggregator = create_result_aggregator(config)

    if args.stdin:
        user_agents = [line.rstrip("\r\n") for line in sys.stdin]
        service = BatchClassificationService(aggregator, config.batch_max_concurrency)
        results = asyncio.run(service.classify_many(user_agents))
        for result in results:
            print(_to_json(result, compact=True))
        logger.info(f"Classified {len(results)} user agent(s)")
        return 0

    print(_to_json(aggregator.classify(args.user_agent), compact=args.compact))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
