"""Shared fixtures: in-memory database and item factories."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ingest_articles.models import RawItem
from storage.models import Article, Base
from storage.seed import seed_reference_data


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Session:
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def seeded_session(session: Session) -> Session:
    seed_reference_data(session)
    return session


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def make_item(now: datetime) -> Callable[..., RawItem]:
    def _make(n: int = 1, **overrides: Any) -> RawItem:
        fields = {
            "title": f"Volunteers restore wetland habitat number {n}",
            "excerpt": f"Excerpt for story {n}.",
            "source_url": f"https://example.com/story-{n}",
            "source_name": "Good News Network",
            "published_at": now - timedelta(hours=1),
            "api_source": "rss",
        }
        fields.update(overrides)
        return RawItem(**fields)

    return _make


@pytest.fixture
def store_article(session: Session, now: datetime) -> Callable[..., Article]:
    counter = {"n": 0}

    def _store(**overrides: Any) -> Article:
        counter["n"] += 1
        fields = {
            "title": f"Stored article {counter['n']}",
            "source_url": f"https://stored.example.com/{counter['n']}",
            "source_name": "NASA",
            "category_name": "science",
            "bloom_score": 4,
            "status": "published",
            "published_at": now - timedelta(hours=2),
        }
        fields.update(overrides)
        article = Article(**fields)
        session.add(article)
        session.commit()
        return article

    return _store
