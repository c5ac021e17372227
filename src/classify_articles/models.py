"""Data models for classify_articles pipeline stage."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictBool, field_validator

from ingest_articles.models import RawItem


class Category(str, Enum):
    INNOVATION = "innovation"
    SCIENCE = "science"
    SPACE = "space"
    HEALTH = "health"
    ENVIRONMENT = "environment"
    COMMUNITY = "community"
    EDUCATION = "education"
    KINDNESS = "kindness"
    PROGRESS = "progress"
    WEIRD = "weird"


DEFAULT_CATEGORY = Category.PROGRESS
DEFAULT_BLOOM_SCORE = 3


class OracleClassification(BaseModel):
    """One element of the oracle's response array."""

    bloom_score: int = Field(ge=1, le=5, strict=True)
    category: Category
    is_weird: StrictBool
    summary: str
    tags: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("confidence", mode="before")
    @classmethod
    def _reject_non_numeric_confidence(cls, value: Any) -> Any:
        # Reject bools and strings; ints are accepted
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("confidence must be a number")
        return value


@dataclass(frozen=True)
class ClassifiedItem:
    """A RawItem with the oracle's verdict (or the fallback defaults)."""
    item: RawItem
    bloom_score: int
    category: Category
    is_weird: bool
    ai_summary: str
    ai_tags: list[str]
    ai_confidence: float
    raw_ai_response: Any
    classified_at: datetime

    @property
    def source_url(self) -> str:
        return self.item.source_url


@dataclass
class ClassifyResult:
    items: list[ClassifiedItem]
    failed_chunks: int = 0
    errors: list[str] = field(default_factory=list)
