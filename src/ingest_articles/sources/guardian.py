"""The Guardian Open Platform adapter (free: 5,000 requests/day)."""

from common.config import GuardianConfig
from common.datetime import parse_datetime
from common.errors import SourceFetchError
from common.text import clean_text
from ingest_articles.models import RawItem
from ingest_articles.sources.base import SourceAdapter

SOURCE_NAME = "The Guardian"


class GuardianAdapter(SourceAdapter):
    name = "guardian"

    def __init__(self, api_key: str | None, config: GuardianConfig, timeout: int = 30):
        super().__init__(timeout)
        self.api_key = api_key
        self.config = config

    def is_enabled(self) -> bool:
        return bool(self.api_key)

    def targets(self) -> list[str]:
        return list(self.config.sections)

    def fetch_target(self, target: str) -> list[RawItem]:
        data = self._get_json(
            self.config.base_url,
            target,
            params={
                "section": target,
                "order-by": "newest",
                "page-size": self.config.page_size,
                "show-fields": "trailText,thumbnail,byline",
                "api-key": self.api_key,
            },
        )
        response = data.get("response") or {}
        if response.get("status") == "error":
            raise SourceFetchError(self.name, target, response.get("message", "error status"))

        return [_to_raw_item(result) for result in response.get("results") or []]


def _to_raw_item(result: dict) -> RawItem:
    fields = result.get("fields") or {}
    return RawItem(
        title=clean_text(result.get("webTitle")) or "",
        excerpt=clean_text(fields.get("trailText")) or "",
        source_url=result.get("webUrl") or "",
        source_name=SOURCE_NAME,
        published_at=parse_datetime(result.get("webPublicationDate")),
        api_source="guardian",
        image_url=fields.get("thumbnail"),
        author=fields.get("byline"),
    )
