"""Store classified articles and refresh the featured set."""

import logging
import math
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classify_articles.models import ClassifiedItem
from common.config import PublishConfig
from common.datetime import utc_now
from common.errors import StorageConflictError, StorageError
from common.text import word_count
from publish_articles.models import PublishResult
from storage.articles import (
    clear_featured,
    find_category_id,
    find_source_id,
    insert_article,
    set_featured,
    top_published_since,
)

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
MIN_READ_MINUTES = 2
MAX_READ_MINUTES = 15
DEFAULT_READ_MINUTES = 3


def estimate_read_time(text: str | None) -> int:
    """Minutes to read `text` at 200 wpm, clamped to [2, 15]; 3 when empty."""
    words = word_count(text)
    if words == 0:
        return DEFAULT_READ_MINUTES
    minutes = math.floor(words / WORDS_PER_MINUTE + 0.5)
    return max(MIN_READ_MINUTES, min(MAX_READ_MINUTES, minutes))


def publish_status(bloom_score: int, min_bloom_score: int) -> str:
    return "published" if bloom_score >= min_bloom_score else "rejected"


def build_record(
    classified: ClassifiedItem,
    min_bloom_score: int,
    category_id: str | None,
    source_id: str | None,
) -> dict[str, Any]:
    """Map a classified item onto an articles row."""
    item = classified.item
    return {
        "title": item.title,
        "excerpt": item.excerpt,
        "content": item.raw_content,
        "source_url": item.source_url,
        "image_url": item.image_url,
        "category_id": category_id,
        "category_name": classified.category.value,
        "bloom_score": classified.bloom_score,
        "is_weird": classified.is_weird,
        "source_id": source_id,
        "source_name": item.source_name,
        "api_source": item.api_source,
        "author": item.author,
        "published_at": item.published_at,
        "ai_summary": classified.ai_summary,
        "ai_tags": classified.ai_tags,
        "ai_confidence": classified.ai_confidence,
        "raw_ai_response": classified.raw_ai_response,
        "classified_at": classified.classified_at,
        "status": publish_status(classified.bloom_score, min_bloom_score),
        "read_time_minutes": estimate_read_time(item.excerpt),
    }


def publish_article(session: Session, classified: ClassifiedItem, min_bloom_score: int) -> str:
    """Resolve references, then insert. Returns the stored status.

    Raises:
        StorageConflictError: the source_url is already stored.
        StorageError: any other persistence failure.
    """
    try:
        category_id = find_category_id(session, classified.category.value)
        source_id = find_source_id(session, classified.item.source_name)
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError(f"Reference lookup failed for {classified.source_url}: {e}") from e

    record = build_record(classified, min_bloom_score, category_id, source_id)
    insert_article(session, record)
    return record["status"]


def update_featured(
    session: Session,
    count: int = 3,
    window_hours: int = 24,
    now: datetime | None = None,
) -> list[str]:
    """Replace the featured set with the top published articles of the window.

    Ranking is bloom_score desc, then published_at desc.
    """
    now = now or utc_now()
    since = now - timedelta(hours=window_hours)
    try:
        cleared = clear_featured(session)
        featured_ids = top_published_since(session, since, count)
        set_featured(session, featured_ids)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError(f"Featured update failed: {e}") from e

    logger.info("Featured %d articles (cleared %d)", len(featured_ids), cleared)
    return featured_ids


def publish_articles(
    session: Session,
    items: list[ClassifiedItem],
    config: PublishConfig,
) -> PublishResult:
    """Insert every classified article one at a time; conflicts count as already stored."""
    result = PublishResult()

    for classified in items:
        try:
            status = publish_article(session, classified, config.min_bloom_score)
        except StorageConflictError:
            logger.info("Already stored, skipping: %s", classified.source_url)
            result.already_stored += 1
            continue
        except StorageError as e:
            logger.error("%s", e)
            result.errors.append(str(e))
            continue

        if status == "published":
            result.published += 1
        else:
            result.rejected += 1

    logger.info(
        "Published %d, rejected %d (bloom < %d), %d already stored, %d errors",
        result.published, result.rejected, config.min_bloom_score,
        result.already_stored, len(result.errors),
    )
    return result
