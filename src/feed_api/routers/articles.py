"""Feed API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from feed_api.dependencies import get_feed_service
from feed_api.models.article import ArticleListResponse, ArticleResponse, FeedQuery
from feed_api.services.feed_service import FeedService

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    service: Annotated[FeedService, Depends(get_feed_service)],
    category: Annotated[str | None, Query(description="Category slug, or 'all'")] = None,
    limit: Annotated[int, Query(ge=1, le=100, description="Max results")] = 20,
    offset: Annotated[int, Query(ge=0, description="Pagination offset")] = 0,
):
    """Full feed, newest first."""
    query = FeedQuery(category=category, limit=limit, offset=offset)
    articles, total = service.list_feed(query)
    return ArticleListResponse(
        articles=[ArticleResponse.model_validate(a) for a in articles],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/weird", response_model=ArticleListResponse)
async def list_weird_articles(
    service: Annotated[FeedService, Depends(get_feed_service)],
    limit: Annotated[int, Query(ge=1, le=100, description="Max results")] = 20,
    offset: Annotated[int, Query(ge=0, description="Pagination offset")] = 0,
):
    """Articles flagged as curiosities, newest first."""
    query = FeedQuery(limit=limit, offset=offset)
    articles, total = service.list_weird(query)
    return ArticleListResponse(
        articles=[ArticleResponse.model_validate(a) for a in articles],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/featured", response_model=list[ArticleResponse])
async def list_featured_articles(
    service: Annotated[FeedService, Depends(get_feed_service)],
):
    return [ArticleResponse.model_validate(a) for a in service.list_featured()]


@router.get("/trending", response_model=list[ArticleResponse])
async def list_trending_articles(
    service: Annotated[FeedService, Depends(get_feed_service)],
    limit: Annotated[int, Query(ge=1, le=50, description="Max results")] = 7,
):
    """Most-read published articles."""
    return [ArticleResponse.model_validate(a) for a in service.list_trending(limit)]
