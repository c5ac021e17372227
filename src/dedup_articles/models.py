"""Data models for dedup_articles pipeline stage."""

from dataclasses import dataclass

from ingest_articles.models import RawItem


@dataclass
class DedupResult:
    items: list[RawItem]
    exact_duplicates: int = 0
    fuzzy_duplicates: int = 0

    @property
    def deduplicated(self) -> int:
        return self.exact_duplicates + self.fuzzy_duplicates
