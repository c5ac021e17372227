"""Tests for common.config module."""

import pytest

from common.config import (
    PipelineConfig,
    get_config,
    load_config,
    parse_config,
    reset_config,
    set_config,
)


class TestParseConfig:
    def test_empty_dict_gives_defaults(self) -> None:
        config = parse_config({})
        assert config.max_articles == 200
        assert config.classify.batch_size == 10
        assert config.publish.min_bloom_score == 3
        assert config.dedup.similarity_threshold == 0.6
        assert config.dedup.window_hours == 48
        assert config.sources.rss.feeds == []
        assert len(config.sources.newsapi.queries) == 5

    def test_overrides_nested_values(self) -> None:
        config = parse_config({
            "max_articles": 50,
            "classify": {"batch_size": 4, "model": "gpt-4o"},
            "publish": {"min_bloom_score": 4},
            "sources": {
                "request_timeout": 5,
                "rss": {"feeds": [{"url": "https://a.example/feed", "source": "A"}]},
            },
        })
        assert config.max_articles == 50
        assert config.classify.batch_size == 4
        assert config.classify.model == "gpt-4o"
        assert config.classify.batch_delay_seconds == 0.5
        assert config.publish.min_bloom_score == 4
        assert config.sources.request_timeout == 5
        assert config.sources.rss.feeds[0].url == "https://a.example/feed"
        assert config.sources.rss.feeds[0].source == "A"


class TestLoadConfig:
    def test_prod_profile_loads(self) -> None:
        config = load_config("prod")
        assert config.max_articles == 200
        assert config.sources.rss.feeds
        assert config.sources.guardian.sections

    def test_local_profile_loads(self) -> None:
        config = load_config("local")
        assert config.classify.batch_size == 5

    def test_env_selects_profile(self, monkeypatch) -> None:
        monkeypatch.setenv("CONFIG_ENV", "local")
        assert load_config().max_articles == 30

    def test_missing_profile_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("does-not-exist")


class TestGlobalConfig:
    def test_set_and_reset(self) -> None:
        custom = PipelineConfig(max_articles=7)
        set_config(custom)
        try:
            assert get_config() is custom
        finally:
            reset_config()
