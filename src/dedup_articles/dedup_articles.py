"""Check candidates against stored history: exact URL first, then fuzzy title."""

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from common.datetime import utc_now
from dedup_articles.models import DedupResult
from dedup_articles.similarity import title_similarity, title_tokens
from ingest_articles.models import RawItem
from storage.articles import article_exists, load_recent_titles

logger = logging.getLogger(__name__)


class HistoryIndex:
    """Recent published titles, tokenized once per run."""

    def __init__(self, recent: list[tuple[str, str]]):
        self._entries = [(article_id, title_tokens(title)) for article_id, title in recent]

    def __len__(self) -> int:
        return len(self._entries)

    def find_similar(self, title: str, threshold: float) -> tuple[str, float] | None:
        """Return (article_id, similarity) of the first stored title at or above threshold."""
        tokens = title_tokens(title)
        for article_id, existing in self._entries:
            similarity = title_similarity(tokens, existing)
            if similarity >= threshold:
                return article_id, similarity
        return None


def dedup_articles(
    session: Session,
    items: list[RawItem],
    threshold: float = 0.6,
    window_hours: int = 48,
    now: datetime | None = None,
) -> DedupResult:
    """Keep only candidates with no exact or fuzzy match in stored history."""
    now = now or utc_now()
    since = now - timedelta(hours=window_hours)
    index = HistoryIndex(load_recent_titles(session, since))
    logger.info("Checking %d candidates against %d recent titles", len(items), len(index))

    result = DedupResult(items=[])
    for item in items:
        if article_exists(session, item.source_url):
            logger.debug("Exact duplicate: %s", item.source_url)
            result.exact_duplicates += 1
            continue

        match = index.find_similar(item.title, threshold)
        if match is not None:
            article_id, similarity = match
            logger.info(
                "Fuzzy duplicate (%.2f) of %s: %s", similarity, article_id, item.title[:80]
            )
            result.fuzzy_duplicates += 1
            continue

        result.items.append(item)

    logger.info(
        "%d new articles (%d exact, %d fuzzy duplicates skipped)",
        len(result.items), result.exact_duplicates, result.fuzzy_duplicates,
    )
    return result
