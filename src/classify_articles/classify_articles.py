"""Classify new articles in fixed-size chunks with an LLM oracle."""

import logging
import os
import time
from typing import Any, Callable

from openai import OpenAI, OpenAIError

from classify_articles.instructions import CLASSIFICATION_INSTRUCTIONS
from classify_articles.models import (
    DEFAULT_BLOOM_SCORE,
    DEFAULT_CATEGORY,
    ClassifiedItem,
    ClassifyResult,
)
from classify_articles.parse import parse_classifications
from common.config import ClassifyConfig
from common.datetime import utc_now
from common.errors import ClassificationError
from ingest_articles.models import RawItem

logger = logging.getLogger(__name__)


def create_client(config: ClassifyConfig) -> OpenAI:
    """Build the oracle client. Raises ClassificationError when it cannot be built."""
    try:
        return OpenAI(api_key=os.environ.get("OPENAI_API_KEY"), timeout=config.timeout_seconds)
    except OpenAIError as e:
        raise ClassificationError(f"Oracle client unavailable: {e}") from e


def _format_chunk_for_prompt(chunk: list[RawItem]) -> str:
    """Format a chunk of articles into the user prompt."""
    blocks = []
    for i, item in enumerate(chunk, 1):
        blocks.append(
            f"ARTICLE {i}:\n"
            f"Title: {item.title}\n"
            f"Excerpt: {item.excerpt or 'N/A'}\n"
            f"Source: {item.source_name}"
        )
    articles_text = "\n\n---\n\n".join(blocks)
    return (
        f"Classify these {len(chunk)} articles. Return a JSON array with one object per "
        "article, each containing: bloom_score, category, is_weird, summary, tags, confidence."
        f"\n\n{articles_text}"
    )


def _request_classifications(client: Any, chunk: list[RawItem], config: ClassifyConfig) -> str | None:
    try:
        response = client.chat.completions.create(
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            messages=[
                {"role": "system", "content": CLASSIFICATION_INSTRUCTIONS},
                {"role": "user", "content": _format_chunk_for_prompt(chunk)},
            ],
        )
        return response.choices[0].message.content
    except OpenAIError as e:
        raise ClassificationError(f"Oracle request failed: {e}") from e
    except (IndexError, AttributeError) as e:
        raise ClassificationError(f"Oracle response has no message content: {e}") from e


def classify_chunk(client: Any, chunk: list[RawItem], config: ClassifyConfig) -> list[ClassifiedItem]:
    """Classify one chunk. All-or-nothing: raises ClassificationError on any mismatch."""
    text = _request_classifications(client, chunk, config)
    classifications, raw = parse_classifications(text, expected=len(chunk))

    classified_at = utc_now()
    return [
        ClassifiedItem(
            item=item,
            bloom_score=result.bloom_score,
            category=result.category,
            is_weird=result.is_weird,
            ai_summary=result.summary or item.excerpt,
            ai_tags=list(result.tags),
            ai_confidence=result.confidence,
            raw_ai_response=raw_element,
            classified_at=classified_at,
        )
        for item, result, raw_element in zip(chunk, classifications, raw)
    ]


def fallback_classifications(chunk: list[RawItem], reason: str) -> list[ClassifiedItem]:
    """Neutral defaults used when a chunk could not be classified."""
    classified_at = utc_now()
    return [
        ClassifiedItem(
            item=item,
            bloom_score=DEFAULT_BLOOM_SCORE,
            category=DEFAULT_CATEGORY,
            is_weird=False,
            ai_summary=item.excerpt,
            ai_tags=[],
            ai_confidence=0.0,
            raw_ai_response={"error": reason},
            classified_at=classified_at,
        )
        for item in chunk
    ]


def classify_articles(
    items: list[RawItem],
    client: Any | None,
    config: ClassifyConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> ClassifyResult:
    """
    Classify articles chunk by chunk, sequentially.

    Args:
        items: New articles, already deduplicated
        client: OpenAI-compatible client (chat.completions.create); built
            from config when None
        config: Chunk size, delay and model settings
        sleep: Delay function between chunks

    Returns:
        ClassifyResult with one ClassifiedItem per input, in input order
    """
    result = ClassifyResult(items=[])
    if not items:
        logger.warning("No articles to classify")
        return result

    client_error = None
    if client is None:
        try:
            client = create_client(config)
        except ClassificationError as e:
            logger.error("%s", e)
            client_error = str(e)

    batch_size = max(1, config.batch_size)
    chunks = [items[i:i + batch_size] for i in range(0, len(items), batch_size)]

    for number, chunk in enumerate(chunks, 1):
        logger.info("Batch %d/%d: classifying %d articles", number, len(chunks), len(chunk))
        try:
            if client_error is not None:
                raise ClassificationError(client_error)
            classified = classify_chunk(client, chunk, config)
        except ClassificationError as e:
            logger.warning("Batch %d fell back to default classification: %s", number, e)
            classified = fallback_classifications(chunk, str(e))
            result.failed_chunks += 1
            result.errors.append(f"Classification batch {number} failed: {e}")
        result.items.extend(classified)

        # Small delay to stay under the oracle's rate limit
        if number < len(chunks) and config.batch_delay_seconds > 0:
            sleep(config.batch_delay_seconds)

    logger.info("Classified %d articles (%d batches fell back)", len(result.items), result.failed_chunks)
    return result
