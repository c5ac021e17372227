"""CLI entry point: run the feed pipeline once, to completion, then exit."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.config import load_config, set_config
from ingest_articles.sources import build_adapters
from run_pipeline.run_pipeline import run_pipeline
from storage.connection import get_session
from storage.seed import init_db

load_dotenv()

logger = logging.getLogger(__name__)


def parse_run_pipeline_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for run_pipeline."""
    parser = argparse.ArgumentParser(description="Fetch, classify and publish one batch of articles.")
    parser.add_argument(
        "--config",
        default=None,
        help="Config profile name (default: $CONFIG_ENV or prod)",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create tables and seed categories/sources before running",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_run_pipeline_args(argv)

    config = load_config(args.config)
    set_config(config)

    if args.init_db:
        init_db()

    with get_session() as session:
        run_pipeline(session, build_adapters(config.sources), config)


if __name__ == "__main__":
    main()
