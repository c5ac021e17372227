"""RSS/Atom feed adapter."""

import logging

import feedparser

from common.config import RSSConfig
from common.datetime import parse_datetime
from common.errors import SourceFetchError
from common.text import clean_text, extract_image_from_html, truncate
from ingest_articles.models import RawItem
from ingest_articles.sources.base import SourceAdapter

logger = logging.getLogger(__name__)

EXCERPT_LIMIT = 300


class RSSAdapter(SourceAdapter):
    """Reads a fixed list of feeds; each feed carries its display source name."""

    name = "rss"

    def __init__(self, config: RSSConfig, timeout: int = 30):
        super().__init__(timeout)
        self.config = config
        self._source_names = {feed.url: feed.source for feed in config.feeds}

    def targets(self) -> list[str]:
        return [feed.url for feed in self.config.feeds]

    def fetch_target(self, target: str) -> list[RawItem]:
        response = self._get(target)
        feed = feedparser.parse(response.content)

        if feed.bozo and not feed.entries:
            raise SourceFetchError(self.name, target, f"malformed feed: {feed.get('bozo_exception')}")

        source_name = self._source_names.get(target, "Unknown")
        items = []
        for entry in feed.entries[: self.config.max_entries]:
            try:
                items.append(_parse_entry(entry, source_name))
            except (AttributeError, KeyError, TypeError) as e:
                logger.warning("Failed to parse entry from %s: %s", target, e)
        return items


def _entry_html(entry) -> str | None:
    """Full HTML content when the feed provides it, else the summary."""
    content = entry.get("content")
    if content:
        return content[0].get("value")
    return entry.get("summary")


def _entry_image(entry, html: str | None) -> str | None:
    for enclosure in entry.get("enclosures") or []:
        href = enclosure.get("href") or enclosure.get("url")
        if href and (enclosure.get("type") or "image").startswith("image"):
            return href
    for key in ("media_content", "media_thumbnail"):
        media = entry.get(key) or []
        if media and media[0].get("url"):
            return media[0]["url"]
    return extract_image_from_html(html)


def _parse_entry(entry, source_name: str) -> RawItem:
    """Parse a single feed entry into a RawItem."""
    html = _entry_html(entry)
    excerpt = clean_text(entry.get("summary")) or clean_text(html)

    return RawItem(
        title=clean_text(entry.get("title")) or "",
        excerpt=truncate(excerpt, EXCERPT_LIMIT),
        source_url=entry.get("link") or "",
        source_name=source_name,
        published_at=parse_datetime(entry.get("published") or entry.get("updated")),
        api_source="rss",
        image_url=_entry_image(entry, html),
        author=entry.get("author"),
        raw_content=html,
    )
