"""Data models for run_pipeline."""

from dataclasses import dataclass, field
from datetime import datetime

from common.datetime import utc_now


@dataclass
class RunStats:
    """Counters and error messages for one pipeline execution."""
    started_at: datetime = field(default_factory=utc_now)
    fetched: int = 0
    classified: int = 0
    published: int = 0
    rejected: int = 0
    deduplicated: int = 0
    errors: list[str] = field(default_factory=list)
