"""FastAPI dependencies."""

from typing import Annotated, Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from common.config import get_config
from feed_api.services.feed_service import FeedService
from storage.connection import get_session_factory


def get_db_session() -> Iterator[Session]:
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


def get_feed_service(session: Annotated[Session, Depends(get_db_session)]) -> FeedService:
    """Dependency to get feed service."""
    return FeedService(session, min_bloom_score=get_config().publish.min_bloom_score)
