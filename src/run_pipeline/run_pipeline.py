"""One pipeline run: ingest -> dedup -> classify -> publish -> audit."""

import logging
import time
from typing import Any, Callable

from sqlalchemy.orm import Session

from classify_articles.classify_articles import classify_articles
from common.config import PipelineConfig
from dedup_articles.dedup_articles import dedup_articles
from ingest_articles.ingest_articles import ingest_articles
from ingest_articles.sources.base import SourceAdapter
from publish_articles.publish_articles import publish_articles, update_featured
from run_pipeline.models import RunStats
from run_pipeline.report import log_summary, record_run

logger = logging.getLogger(__name__)


def _run_stages(
    session: Session,
    adapters: list[SourceAdapter],
    client: Any | None,
    config: PipelineConfig,
    stats: RunStats,
    sleep: Callable[[float], None],
) -> None:
    logger.info("[1/4] Fetching articles from %d sources", len(adapters))
    ingested = ingest_articles(adapters, config.max_articles)
    stats.fetched = ingested.fetched
    stats.deduplicated += ingested.deduplicated
    stats.errors.extend(ingested.errors)

    logger.info("[2/4] Checking %d candidates against history", len(ingested.items))
    deduped = dedup_articles(
        session,
        ingested.items,
        threshold=config.dedup.similarity_threshold,
        window_hours=config.dedup.window_hours,
    )
    stats.deduplicated += deduped.deduplicated

    if deduped.items:
        logger.info("[3/4] Classifying %d new articles", len(deduped.items))
        classified = classify_articles(deduped.items, client, config.classify, sleep=sleep)
        stats.classified += len(classified.items)
        stats.errors.extend(classified.errors)

        logger.info("[4/4] Storing %d classified articles", len(classified.items))
        published = publish_articles(session, classified.items, config.publish)
        stats.published += published.published
        stats.rejected += published.rejected
        stats.deduplicated += published.already_stored
        stats.errors.extend(published.errors)
    else:
        logger.info("No new articles to classify")

    update_featured(
        session,
        count=config.publish.featured_count,
        window_hours=config.publish.featured_window_hours,
    )


def run_pipeline(
    session: Session,
    adapters: list[SourceAdapter],
    config: PipelineConfig,
    client: Any | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RunStats:
    """Run every stage once and always attempt to write the audit row.

    Args:
        session: Database session used for every read and write of the run
        adapters: Source adapters to fan out to
        config: Pipeline configuration
        client: OpenAI-compatible client; created from config when needed
        sleep: Delay function between classification batches

    Returns:
        The run's statistics, as recorded in ingestion_log
    """
    stats = RunStats()
    start_time = time.monotonic()
    logger.info("Pipeline started at %s", stats.started_at.isoformat())

    try:
        _run_stages(session, adapters, client, config, stats, sleep)
    except Exception as e:
        logger.exception("Pipeline error")
        stats.errors.append(f"Pipeline error: {e}")
        session.rollback()

    duration = round(time.monotonic() - start_time)
    record_run(session, stats, duration)
    log_summary(stats, duration)
    return stats
