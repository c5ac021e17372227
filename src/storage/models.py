"""SQLAlchemy models for the published feed, reference entities and run audit."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Source(Base):
    """Where content comes from."""
    __tablename__ = "sources"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(200), nullable=False, unique=True)
    slug = Column(String(100), nullable=False, unique=True)
    url = Column(String(500))
    feed_url = Column(String(500))
    api_source = Column(String(20))  # newsapi | guardian | gnews | rss
    reliability_score = Column(Integer, default=5)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(100), nullable=False, unique=True)
    slug = Column(String(50), nullable=False, unique=True)
    color = Column(String(20))
    display_order = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)


class Article(Base):
    """A classified article. source_url is the global identity key."""
    __tablename__ = "articles"

    id = Column(String(36), primary_key=True, default=_new_id)

    # Content
    title = Column(Text, nullable=False)
    excerpt = Column(Text)
    content = Column(Text)
    source_url = Column(String(2048), nullable=False, unique=True)
    image_url = Column(String(2048))

    # Classification
    category_id = Column(String(36), ForeignKey("categories.id"))
    category_name = Column(String(50))
    bloom_score = Column(Integer, nullable=False, default=3)
    is_weird = Column(Boolean, default=False)

    # Source attribution
    source_id = Column(String(36), ForeignKey("sources.id"))
    source_name = Column(String(200))
    api_source = Column(String(20))
    author = Column(String(500))
    published_at = Column(DateTime(timezone=True))

    # AI metadata
    ai_summary = Column(Text)
    ai_tags = Column(JSON, default=list)
    ai_confidence = Column(Float, default=0.0)
    raw_ai_response = Column(JSON)

    # Display
    is_featured = Column(Boolean, default=False, nullable=False)
    is_trending = Column(Boolean, default=False, nullable=False)
    read_time_minutes = Column(Integer, default=3)
    view_count = Column(Integer, default=0, nullable=False)

    # System
    status = Column(String(20), nullable=False, default="published")  # published | rejected
    ingested_at = Column(DateTime(timezone=True), default=_utcnow)
    classified_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("idx_articles_status_published_at", "status", "published_at"),
        Index("idx_articles_featured", "is_featured"),
    )


class IngestionLog(Base):
    """One row per pipeline run."""
    __tablename__ = "ingestion_log"

    id = Column(String(36), primary_key=True, default=_new_id)
    run_at = Column(DateTime(timezone=True), default=_utcnow)
    source = Column(String(50))
    articles_fetched = Column(Integer, default=0)
    articles_classified = Column(Integer, default=0)
    articles_published = Column(Integer, default=0)
    articles_rejected = Column(Integer, default=0)
    articles_deduplicated = Column(Integer, default=0)
    errors = Column(JSON)
    duration_seconds = Column(Integer)


class Subscriber(Base):
    __tablename__ = "subscribers"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(320), nullable=False, unique=True)
    is_premium = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    subscribed_at = Column(DateTime(timezone=True), default=_utcnow)
    unsubscribed_at = Column(DateTime(timezone=True))
