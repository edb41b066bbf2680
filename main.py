#!/usr/bin/env python
"""CLI for the newsdesk keyword news search."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from newsdesk.config import create_from_config, get_default_config_path, load_config
from newsdesk.data import SearchRequest
from newsdesk.errors import KeywordValidationError, NewsdeskError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    keywords: str
    date_from: date | None = None
    date_to: date | None = None
    deep: bool = False
    config: Path
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> None:
    """Execute a search with the given configuration and print JSON results.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    pipeline, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )
    request = SearchRequest(
        keywords=args.keywords,
        date_from=args.date_from.isoformat() if args.date_from else None,
        date_to=args.date_to.isoformat() if args.date_to else None,
        deep_research=args.deep,
    )

    logger.info(f"Searching for: {args.keywords}")
    logger.info(f"Config: {args.config}")

    response, usage = await pipeline.run(request)

    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))

    logger.info("\n--- Usage Summary ---")
    logger.info(f"Feed requests: {usage.feed_requests}")
    logger.info(f"Link resolutions: {usage.resolve_requests}")
    if usage.api_calls:
        logger.info(f"API calls: {len(usage.api_calls)}")
        logger.info(f"Input tokens: {usage.input_tokens:,}")
        logger.info(f"Output tokens: {usage.output_tokens:,}")

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search Google News by keyword.")
    parser.add_argument("keywords", help="Search keywords (2+ characters)")
    parser.add_argument("--from", dest="date_from", default=None, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", default=None, help="End date (YYYY-MM-DD)")
    parser.add_argument(
        "--deep",
        action="store_true",
        default=False,
        help="Deep research: resolve more links, return more results, score and summarize",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable intermediate pipeline logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            keywords=ns.keywords,
            date_from=ns.date_from,
            date_to=ns.date_to,
            deep=ns.deep,
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(2)

    try:
        asyncio.run(run(args))
    except KeywordValidationError as e:
        logger.error(str(e))
        sys.exit(2)
    except NewsdeskError as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
