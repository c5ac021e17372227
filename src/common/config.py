"""Configuration loader for the feed pipeline."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

CONFIG_DIR = Path(__file__).parent / "configs"


@dataclass
class NewsAPIConfig:
    base_url: str = "https://newsapi.org/v2/everything"
    page_size: int = 20
    queries: list[str] = field(default_factory=lambda: [
        "breakthrough OR discovery OR innovation OR milestone",
        "renewable energy OR clean technology OR sustainability",
        "medical breakthrough OR cure OR treatment approved",
        "community OR volunteers OR nonprofit success",
        "space exploration OR NASA OR telescope discovery",
    ])


@dataclass
class GuardianConfig:
    base_url: str = "https://content.guardianapis.com/search"
    page_size: int = 20
    sections: list[str] = field(default_factory=lambda: [
        "science", "technology", "environment", "society",
    ])


@dataclass
class GNewsConfig:
    base_url: str = "https://gnews.io/api/v4/top-headlines"
    page_size: int = 20
    topics: list[str] = field(default_factory=lambda: [
        "science", "technology", "health", "world",
    ])


@dataclass
class RSSFeed:
    url: str
    source: str


@dataclass
class RSSConfig:
    max_entries: int = 15
    feeds: list[RSSFeed] = field(default_factory=list)


@dataclass
class SourcesConfig:
    request_timeout: int = 30
    newsapi: NewsAPIConfig = field(default_factory=NewsAPIConfig)
    guardian: GuardianConfig = field(default_factory=GuardianConfig)
    gnews: GNewsConfig = field(default_factory=GNewsConfig)
    rss: RSSConfig = field(default_factory=RSSConfig)


@dataclass
class DedupConfig:
    similarity_threshold: float = 0.6
    window_hours: int = 48


@dataclass
class ClassifyConfig:
    model: str = "gpt-4o-mini"
    batch_size: int = 10
    batch_delay_seconds: float = 0.5
    max_tokens: int = 4096
    temperature: float = 0.0
    timeout_seconds: float = 60.0


@dataclass
class PublishConfig:
    min_bloom_score: int = 3
    featured_count: int = 3
    featured_window_hours: int = 24


@dataclass
class PipelineConfig:
    max_articles: int = 200
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    classify: ClassifyConfig = field(default_factory=ClassifyConfig)
    publish: PublishConfig = field(default_factory=PublishConfig)


def load_config(config_name: str | None = None) -> PipelineConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded PipelineConfig object
    """
    if config_name is None:
        config_name = os.environ.get("CONFIG_ENV", "prod")

    config_path = CONFIG_DIR / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return parse_config(data)


def parse_config(data: dict) -> PipelineConfig:
    """Parse config dictionary into PipelineConfig object."""
    defaults = PipelineConfig()

    sources_raw = data.get("sources", {})
    newsapi_raw = sources_raw.get("newsapi", {})
    guardian_raw = sources_raw.get("guardian", {})
    gnews_raw = sources_raw.get("gnews", {})
    rss_raw = sources_raw.get("rss", {})

    sources = SourcesConfig(
        request_timeout=sources_raw.get("request_timeout", defaults.sources.request_timeout),
        newsapi=NewsAPIConfig(
            base_url=newsapi_raw.get("base_url", defaults.sources.newsapi.base_url),
            page_size=newsapi_raw.get("page_size", defaults.sources.newsapi.page_size),
            queries=newsapi_raw.get("queries", defaults.sources.newsapi.queries),
        ),
        guardian=GuardianConfig(
            base_url=guardian_raw.get("base_url", defaults.sources.guardian.base_url),
            page_size=guardian_raw.get("page_size", defaults.sources.guardian.page_size),
            sections=guardian_raw.get("sections", defaults.sources.guardian.sections),
        ),
        gnews=GNewsConfig(
            base_url=gnews_raw.get("base_url", defaults.sources.gnews.base_url),
            page_size=gnews_raw.get("page_size", defaults.sources.gnews.page_size),
            topics=gnews_raw.get("topics", defaults.sources.gnews.topics),
        ),
        rss=RSSConfig(
            max_entries=rss_raw.get("max_entries", defaults.sources.rss.max_entries),
            feeds=[
                RSSFeed(url=feed["url"], source=feed["source"])
                for feed in rss_raw.get("feeds", [])
            ],
        ),
    )

    dedup_raw = data.get("dedup", {})
    dedup = DedupConfig(
        similarity_threshold=dedup_raw.get("similarity_threshold", defaults.dedup.similarity_threshold),
        window_hours=dedup_raw.get("window_hours", defaults.dedup.window_hours),
    )

    classify_raw = data.get("classify", {})
    classify = ClassifyConfig(
        model=classify_raw.get("model", defaults.classify.model),
        batch_size=classify_raw.get("batch_size", defaults.classify.batch_size),
        batch_delay_seconds=classify_raw.get("batch_delay_seconds", defaults.classify.batch_delay_seconds),
        max_tokens=classify_raw.get("max_tokens", defaults.classify.max_tokens),
        temperature=classify_raw.get("temperature", defaults.classify.temperature),
        timeout_seconds=classify_raw.get("timeout_seconds", defaults.classify.timeout_seconds),
    )

    publish_raw = data.get("publish", {})
    publish = PublishConfig(
        min_bloom_score=publish_raw.get("min_bloom_score", defaults.publish.min_bloom_score),
        featured_count=publish_raw.get("featured_count", defaults.publish.featured_count),
        featured_window_hours=publish_raw.get("featured_window_hours", defaults.publish.featured_window_hours),
    )

    return PipelineConfig(
        max_articles=data.get("max_articles", defaults.max_articles),
        sources=sources,
        dedup=dedup,
        classify=classify,
        publish=publish,
    )


# Global config instance (loaded on first access)
_config: PipelineConfig | None = None


def get_config() -> PipelineConfig:
    """Get the current configuration (lazy-loaded)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: PipelineConfig):
    """Set the global configuration (useful for testing)."""
    global _config
    _config = config


def reset_config():
    """Reset the global configuration (forces reload on next access)."""
    global _config
    _config = None
