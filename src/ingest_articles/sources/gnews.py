"""GNews.io adapter (free tier: 100 requests/day)."""

from common.config import GNewsConfig
from common.datetime import parse_datetime
from common.errors import SourceFetchError
from common.text import clean_text
from ingest_articles.models import RawItem
from ingest_articles.sources.base import SourceAdapter


class GNewsAdapter(SourceAdapter):
    name = "gnews"

    def __init__(self, api_key: str | None, config: GNewsConfig, timeout: int = 30):
        super().__init__(timeout)
        self.api_key = api_key
        self.config = config

    def is_enabled(self) -> bool:
        return bool(self.api_key)

    def targets(self) -> list[str]:
        return list(self.config.topics)

    def fetch_target(self, target: str) -> list[RawItem]:
        data = self._get_json(
            self.config.base_url,
            target,
            params={
                "topic": target,
                "lang": "en",
                "max": self.config.page_size,
                "apikey": self.api_key,
            },
        )
        if data.get("errors"):
            raise SourceFetchError(self.name, target, str(data["errors"]))

        return [_to_raw_item(article) for article in data.get("articles") or []]


def _to_raw_item(article: dict) -> RawItem:
    source = article.get("source") or {}
    # GNews does not expose bylines
    return RawItem(
        title=clean_text(article.get("title")) or "",
        excerpt=clean_text(article.get("description")) or "",
        source_url=article.get("url") or "",
        source_name=source.get("name") or "Unknown",
        published_at=parse_datetime(article.get("publishedAt")),
        api_source="gnews",
        image_url=article.get("image"),
        raw_content=article.get("content"),
    )
