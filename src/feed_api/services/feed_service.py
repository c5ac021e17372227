"""Read-only queries over published articles, plus subscriber intake."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from feed_api.models.article import FeedQuery
from storage.models import Article, Subscriber

logger = logging.getLogger(__name__)


class FeedService:
    """Service for the public feed. Only published, bloom-qualified rows are visible."""

    def __init__(self, session: Session, min_bloom_score: int = 3):
        self.session = session
        self.min_bloom_score = min_bloom_score

    def _visible(self):
        return (
            select(Article)
            .where(Article.status == "published")
            .where(Article.bloom_score >= self.min_bloom_score)
        )

    def _page(self, stmt, query: FeedQuery) -> tuple[list[Article], int]:
        total = self.session.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        ).scalar_one()
        rows = self.session.execute(
            stmt.order_by(Article.published_at.desc()).limit(query.limit).offset(query.offset)
        ).scalars().all()
        return list(rows), total

    def list_feed(self, query: FeedQuery) -> tuple[list[Article], int]:
        """Newest first, optionally filtered by category slug ("all" means no filter)."""
        stmt = self._visible()
        if query.category and query.category != "all":
            stmt = stmt.where(Article.category_name == query.category)
        return self._page(stmt, query)

    def list_weird(self, query: FeedQuery) -> tuple[list[Article], int]:
        return self._page(self._visible().where(Article.is_weird.is_(True)), query)

    def list_featured(self, limit: int = 3) -> list[Article]:
        stmt = (
            self._visible()
            .where(Article.is_featured.is_(True))
            .order_by(Article.published_at.desc())
            .limit(limit)
        )
        return list(self.session.execute(stmt).scalars().all())

    def list_trending(self, limit: int = 7) -> list[Article]:
        stmt = (
            self._visible()
            .order_by(Article.view_count.desc(), Article.published_at.desc())
            .limit(limit)
        )
        return list(self.session.execute(stmt).scalars().all())

    def add_subscriber(self, email: str) -> bool:
        """Store an email address. Returns False when it was already subscribed."""
        normalized = email.strip().lower()
        exists = self.session.execute(
            select(Subscriber.id).where(Subscriber.email == normalized)
        ).first()
        if exists:
            return False

        self.session.add(Subscriber(email=normalized))
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return False
        logger.info("New subscriber added")
        return True
