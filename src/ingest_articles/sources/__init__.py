"""Source adapter registry."""

import os

from common.config import SourcesConfig
from ingest_articles.sources.base import SourceAdapter
from ingest_articles.sources.gnews import GNewsAdapter
from ingest_articles.sources.guardian import GuardianAdapter
from ingest_articles.sources.newsapi import NewsAPIAdapter
from ingest_articles.sources.rss import RSSAdapter


def build_adapters(config: SourcesConfig) -> list[SourceAdapter]:
    """Instantiate every provider adapter, reading API keys from the environment."""
    timeout = config.request_timeout
    return [
        NewsAPIAdapter(os.environ.get("NEWSAPI_KEY"), config.newsapi, timeout),
        GuardianAdapter(os.environ.get("GUARDIAN_API_KEY"), config.guardian, timeout),
        GNewsAdapter(os.environ.get("GNEWS_API_KEY"), config.gnews, timeout),
        RSSAdapter(config.rss, timeout),
    ]
