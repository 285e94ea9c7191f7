"""
Poll endpoints.

GET  /polls?id=<id>          one poll with its advanced config and fraud settings
GET  /polls?limit=&offset=   one page of polls, newest first
POST /polls                  create a poll from {"poll": {...}}
"""

from typing import Optional, Union

import structlog
from fastapi import APIRouter, Depends, Query, status

from core.config import settings
from core.errors import BadRequestError, NotFoundError
from repositories.provider import PollRepositoryProtocol, get_poll_repository
from schemas.poll import (
    PollCreatedResponse,
    PollCreateRequest,
    PollListResponse,
    PollResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=Union[PollResponse, PollListResponse])
async def get_polls(
    id: Optional[str] = Query(None, description="Return only this poll"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    poll_repo: PollRepositoryProtocol = Depends(get_poll_repository),
) -> Union[PollResponse, PollListResponse]:
    """
    Get a single poll by ID, or a page of polls.

    With `id`, the poll is returned together with `poll_advanced_config` and
    `poll_fraud_settings`. Without it, `total` is the size of the returned page
    (or the table row count when POLLS_EXACT_TOTAL is enabled).
    """
    if id:
        poll = await poll_repo.get_by_id(id)
        if poll is None:
            raise NotFoundError("Poll not found", code="POLL_NOT_FOUND")
        return PollResponse(poll=poll)

    polls = await poll_repo.list_page(limit=limit, offset=offset)
    total = await poll_repo.count() if settings.POLLS_EXACT_TOTAL else len(polls)

    return PollListResponse(polls=polls, total=total)


@router.post("", response_model=PollCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_poll(
    body: Optional[PollCreateRequest] = None,
    poll_repo: PollRepositoryProtocol = Depends(get_poll_repository),
) -> PollCreatedResponse:
    """Create a poll and return the inserted row."""
    if body is None or body.poll is None:
        raise BadRequestError("poll is required")

    poll = await poll_repo.create(body.poll)

    logger.info("poll_created", poll_id=poll.id, options=len(poll.options))
    return PollCreatedResponse(poll=poll)
