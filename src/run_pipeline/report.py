"""Run audit: one ingestion_log row per run."""

import logging

from sqlalchemy.orm import Session

from common.errors import StorageError
from run_pipeline.models import RunStats
from storage.articles import insert_run_log

logger = logging.getLogger(__name__)


def record_run(session: Session, stats: RunStats, duration_seconds: int) -> str | None:
    """Write the audit row for this run. Failures are logged, never raised."""
    try:
        log_id = insert_run_log(
            session,
            run_at=stats.started_at,
            source="all",
            articles_fetched=stats.fetched,
            articles_classified=stats.classified,
            articles_published=stats.published,
            articles_rejected=stats.rejected,
            articles_deduplicated=stats.deduplicated,
            errors=list(stats.errors) or None,
            duration_seconds=duration_seconds,
        )
    except StorageError as e:
        logger.error("Could not record run: %s", e)
        return None
    return log_id


def log_summary(stats: RunStats, duration_seconds: int) -> None:
    logger.info("Pipeline complete in %ds", duration_seconds)
    logger.info(
        "Fetched: %d | Classified: %d | Published: %d | Rejected: %d | Deduped: %d | Errors: %d",
        stats.fetched,
        stats.classified,
        stats.published,
        stats.rejected,
        stats.deduplicated,
        len(stats.errors),
    )
