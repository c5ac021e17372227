"""Feed Pydantic models."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class FeedQuery:
    """Paging and filter state for one feed request."""
    category: str | None = None
    limit: int = 20
    offset: int = 0


class ArticleResponse(BaseModel):
    """Published article as served to the presentation layer."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    excerpt: str | None = None
    source_url: str
    image_url: str | None = None
    category_name: str | None = None
    bloom_score: int
    is_weird: bool
    is_featured: bool
    is_trending: bool
    source_name: str | None = None
    published_at: datetime | None = None
    read_time_minutes: int | None = None
    view_count: int
    ai_tags: list[str] | None = None
    ai_summary: str | None = None


class ArticleListResponse(BaseModel):
    """Paginated list of articles."""

    articles: list[ArticleResponse]
    total: int
    limit: int
    offset: int


class SubscribeRequest(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=320)


class SubscribeResponse(BaseModel):
    status: str = "accepted"
