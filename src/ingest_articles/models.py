"""Data models for ingest_articles pipeline stage."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RawItem:
    """Provider item normalized to the common shape. source_url is its identity."""
    title: str
    excerpt: str
    source_url: str
    source_name: str
    published_at: datetime
    api_source: str
    image_url: Optional[str] = None
    author: Optional[str] = None
    raw_content: Optional[str] = None


@dataclass
class IngestResult:
    """Outcome of the fetch + intra-batch dedup step."""
    items: list[RawItem]
    fetched: int
    deduplicated: int
    errors: list[str] = field(default_factory=list)
