"""Fan out to every source adapter, then merge and dedupe the batch by URL."""

import asyncio
import logging

from common.errors import SourceFetchError
from ingest_articles.models import IngestResult, RawItem
from ingest_articles.sources.base import SourceAdapter

logger = logging.getLogger(__name__)


async def _gather(adapters: list[SourceAdapter]) -> list:
    # Adapters do blocking HTTP; each one gets its own worker thread
    tasks = [asyncio.to_thread(adapter.fetch) for adapter in adapters]
    return await asyncio.gather(*tasks, return_exceptions=True)


def fetch_all(adapters: list[SourceAdapter]) -> tuple[list[RawItem], list[str]]:
    """Run all adapters concurrently and wait for every one to settle.

    Returns:
        Items in adapter order, and error messages for failed adapters and
        failed sub-sources.
    """
    results = asyncio.run(_gather(adapters))

    items: list[RawItem] = []
    errors: list[str] = []
    for adapter, result in zip(adapters, results):
        if isinstance(result, BaseException):
            failure = SourceFetchError(adapter.name, "all", str(result))
            logger.error("%s", failure)
            errors.append(str(failure))
            continue
        items.extend(result)
        errors.extend(str(failure) for failure in adapter.failures)
    return items, errors


def dedupe_batch(items: list[RawItem], max_articles: int) -> tuple[list[RawItem], int]:
    """Drop items without title or URL, then exact-URL repeats (first seen wins).

    Returns:
        The first `max_articles` unique items, and the number of repeats dropped.
    """
    seen: set[str] = set()
    unique: list[RawItem] = []
    duplicates = 0
    for item in items:
        if not item.title or not item.source_url:
            continue
        if item.source_url in seen:
            duplicates += 1
            continue
        seen.add(item.source_url)
        unique.append(item)

    if len(unique) > max_articles:
        logger.info("Capping batch at %d of %d unique items", max_articles, len(unique))
    return unique[:max_articles], duplicates


def ingest_articles(adapters: list[SourceAdapter], max_articles: int) -> IngestResult:
    """Fetch from every adapter and return the unique candidates for this run."""
    logger.info("Ingesting articles from %d sources", len(adapters))

    raw_items, errors = fetch_all(adapters)
    unique, duplicates = dedupe_batch(raw_items, max_articles)

    logger.info(
        "Fetched %d items, %d unique (%d in-batch duplicates, %d source errors)",
        len(raw_items), len(unique), duplicates, len(errors),
    )
    return IngestResult(
        items=unique,
        fetched=len(raw_items),
        deduplicated=duplicates,
        errors=errors,
    )
