"""Newsletter intake endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from feed_api.dependencies import get_feed_service
from feed_api.models.article import SubscribeRequest, SubscribeResponse
from feed_api.services.feed_service import FeedService

router = APIRouter(prefix="/subscribers", tags=["subscribers"])


@router.post("", response_model=SubscribeResponse, status_code=status.HTTP_202_ACCEPTED)
async def subscribe(
    request: SubscribeRequest,
    service: Annotated[FeedService, Depends(get_feed_service)],
):
    """Write-only: the response is the same whether or not the address was known."""
    service.add_subscriber(request.email)
    return SubscribeResponse()
