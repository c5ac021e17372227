"""Tests for storage.articles module."""

from datetime import timedelta

import pytest
from sqlalchemy import select

from common.errors import StorageConflictError, StorageError
from storage.articles import (
    article_exists,
    find_category_id,
    find_source_id,
    insert_article,
    insert_run_log,
    load_recent_titles,
)
from storage.models import IngestionLog


def _record(**overrides) -> dict:
    record = {
        "title": "Seagrass meadows bounce back",
        "source_url": "https://example.com/seagrass",
        "source_name": "BBC",
        "category_name": "environment",
        "bloom_score": 4,
        "status": "published",
    }
    record.update(overrides)
    return record


class TestArticleExists:
    def test_true_for_any_status(self, session, store_article) -> None:
        store_article(source_url="https://example.com/r", status="rejected")
        assert article_exists(session, "https://example.com/r") is True

    def test_false_when_missing(self, session) -> None:
        assert article_exists(session, "https://example.com/nope") is False


class TestInsertArticle:
    def test_returns_id(self, session) -> None:
        article_id = insert_article(session, _record())
        assert article_id
        assert article_exists(session, "https://example.com/seagrass")

    def test_duplicate_url_is_conflict(self, session) -> None:
        insert_article(session, _record())
        with pytest.raises(StorageConflictError) as exc_info:
            insert_article(session, _record(title="Another title"))
        assert exc_info.value.source_url == "https://example.com/seagrass"

    def test_other_integrity_failure_is_storage_error(self, session) -> None:
        with pytest.raises(StorageError):
            insert_article(session, _record(title=None))

    def test_session_usable_after_conflict(self, session) -> None:
        insert_article(session, _record())
        with pytest.raises(StorageConflictError):
            insert_article(session, _record())
        insert_article(session, _record(source_url="https://example.com/other"))
        assert article_exists(session, "https://example.com/other")


class TestLoadRecentTitles:
    def test_only_published_in_window(self, session, store_article, now) -> None:
        recent = store_article(title="Recent", published_at=now - timedelta(hours=1))
        store_article(title="Old", published_at=now - timedelta(hours=100))
        store_article(title="Rejected", status="rejected")

        titles = load_recent_titles(session, now - timedelta(hours=48))

        assert titles == [(recent.id, "Recent")]


class TestReferenceLookups:
    def test_category_by_slug(self, seeded_session) -> None:
        assert find_category_id(seeded_session, "space") is not None
        assert find_category_id(seeded_session, "politics") is None
        assert find_category_id(seeded_session, None) is None

    def test_source_by_name(self, seeded_session) -> None:
        assert find_source_id(seeded_session, "The Guardian") is not None
        assert find_source_id(seeded_session, "Unknown") is None
        assert find_source_id(seeded_session, "") is None


class TestInsertRunLog:
    def test_writes_row(self, session, now) -> None:
        log_id = insert_run_log(
            session,
            run_at=now,
            source="all",
            articles_fetched=3,
            errors=["x"],
            duration_seconds=2,
        )

        row = session.execute(select(IngestionLog)).scalar_one()
        assert row.id == log_id
        assert row.articles_fetched == 3
        assert row.errors == ["x"]
