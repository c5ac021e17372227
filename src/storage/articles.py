"""Article persistence: lookups, idempotent insert, featured updates and run audit."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from common.errors import StorageConflictError, StorageError
from storage.models import Article, Category, IngestionLog, Source

logger = logging.getLogger(__name__)


def article_exists(session: Session, source_url: str) -> bool:
    """Exact-key lookup on source_url, any status."""
    stmt = select(Article.id).where(Article.source_url == source_url).limit(1)
    return session.execute(stmt).first() is not None


def load_recent_titles(session: Session, since: datetime) -> list[tuple[str, str]]:
    """Return (id, title) for published articles with published_at >= since."""
    stmt = (
        select(Article.id, Article.title)
        .where(Article.status == "published")
        .where(Article.published_at >= since)
    )
    return [(row.id, row.title) for row in session.execute(stmt)]


def find_category_id(session: Session, slug: str | None) -> str | None:
    if not slug:
        return None
    stmt = select(Category.id).where(Category.slug == slug).limit(1)
    return session.execute(stmt).scalar_one_or_none()


def find_source_id(session: Session, name: str | None) -> str | None:
    if not name:
        return None
    stmt = select(Source.id).where(Source.name == name).limit(1)
    return session.execute(stmt).scalar_one_or_none()


def insert_article(session: Session, record: dict[str, Any]) -> str:
    """Insert one article and commit.

    Raises:
        StorageConflictError: source_url is already stored.
        StorageError: any other persistence failure.
    """
    article = Article(**record)
    session.add(article)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        # Only a clash on source_url is an idempotent duplicate
        if article_exists(session, record["source_url"]):
            raise StorageConflictError(record["source_url"]) from e
        raise StorageError(f"Insert failed for {record['source_url']}: {e.orig}") from e
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError(f"Insert failed for {record['source_url']}: {e}") from e
    return article.id


def clear_featured(session: Session) -> int:
    result = session.execute(
        update(Article).where(Article.is_featured.is_(True)).values(is_featured=False)
    )
    return result.rowcount or 0


def top_published_since(session: Session, since: datetime, limit: int) -> list[str]:
    """Ids of the best published articles since `since`, by bloom then recency."""
    stmt = (
        select(Article.id)
        .where(Article.status == "published")
        .where(Article.published_at >= since)
        .order_by(Article.bloom_score.desc(), Article.published_at.desc())
        .limit(limit)
    )
    return list(session.execute(stmt).scalars())


def set_featured(session: Session, article_ids: list[str]) -> None:
    if not article_ids:
        return
    session.execute(
        update(Article).where(Article.id.in_(article_ids)).values(is_featured=True)
    )


def insert_run_log(session: Session, **fields: Any) -> str:
    """Append one row to the run audit log and commit."""
    row = IngestionLog(**fields)
    session.add(row)
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError(f"Run log insert failed: {e}") from e
    return row.id
