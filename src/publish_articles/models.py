"""Data models for publish_articles pipeline stage."""

from dataclasses import dataclass, field


@dataclass
class PublishResult:
    published: int = 0
    rejected: int = 0
    already_stored: int = 0
    errors: list[str] = field(default_factory=list)
