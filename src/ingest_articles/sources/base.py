"""Shared adapter contract: fetch() never raises, failed sub-sources yield nothing."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import requests

from common.errors import SourceFetchError
from ingest_articles.models import RawItem

logger = logging.getLogger(__name__)

USER_AGENT = "bloom-feed/1.0 (news aggregator)"


class SourceAdapter(ABC):
    """One external provider.

    Subclasses list their sub-sources (queries, sections, topics, feeds) in
    `targets()` and turn one of them into items in `fetch_target()`. Sub-sources
    are fetched sequentially; a failure in one is logged, kept in `failures`
    and contributes zero items.
    """

    name: str = ""

    def __init__(self, timeout: int = 30):
        self.timeout = timeout
        self.failures: list[SourceFetchError] = []

    def is_enabled(self) -> bool:
        return True

    @abstractmethod
    def targets(self) -> list[str]:
        ...

    @abstractmethod
    def fetch_target(self, target: str) -> list[RawItem]:
        ...

    def fetch(self) -> list[RawItem]:
        self.failures = []
        if not self.is_enabled():
            logger.info("Skipping %s: no API key configured", self.name)
            return []

        start_time = time.monotonic()
        items: list[RawItem] = []
        for target in self.targets():
            try:
                batch = self.fetch_target(target)
            except Exception as e:
                failure = e if isinstance(e, SourceFetchError) else SourceFetchError(self.name, target, str(e))
                logger.warning("%s", failure)
                self.failures.append(failure)
                continue
            logger.debug("%s %s: %d items", self.name, target, len(batch))
            items.extend(batch)

        elapsed = time.monotonic() - start_time
        logger.info(
            "Fetched %d items from %s (%d failed sub-sources) in %.2fs",
            len(items), self.name, len(self.failures), elapsed,
        )
        return items

    def _get(self, url: str, params: dict[str, Any] | None = None,
             headers: dict[str, str] | None = None) -> requests.Response:
        response = requests.get(
            url,
            params=params,
            timeout=self.timeout,
            headers={"User-Agent": USER_AGENT, **(headers or {})},
        )
        response.raise_for_status()
        return response

    def _get_json(self, url: str, target: str, params: dict[str, Any] | None = None,
                  headers: dict[str, str] | None = None) -> dict:
        response = self._get(url, params=params, headers=headers)
        try:
            data = response.json()
        except ValueError as e:
            raise SourceFetchError(self.name, target, f"invalid JSON body: {e}") from e
        if not isinstance(data, dict):
            raise SourceFetchError(self.name, target, "unexpected response shape")
        return data
