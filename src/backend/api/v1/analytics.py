"""
Poll analytics endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.config import settings
from core.errors import BadRequestError
from repositories.provider import AnalyticsRepositoryProtocol, get_analytics_repository
from schemas.analytics import AnalyticsResponse
from services.analytics_service import AnalyticsService

router = APIRouter()


async def get_analytics_service(
    repo: AnalyticsRepositoryProtocol = Depends(get_analytics_repository),
) -> AnalyticsService:
    return AnalyticsService(repo, trend_days=settings.ANALYTICS_TREND_DAYS)


@router.get("", response_model=AnalyticsResponse)
async def get_poll_analytics(
    poll_id: Optional[str] = Query(None),
    start_date: Optional[str] = Query(None, description="Accepted for compatibility; not applied"),
    end_date: Optional[str] = Query(None, description="Accepted for compatibility; not applied"),
    granularity: Optional[str] = Query(None, description="Accepted for compatibility; not applied"),
    service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsResponse:
    """
    Get the analytics report of a poll.

    `overview` is computed by the database. `demographics` and `trends` are
    placeholder data, as listed in `placeholderSections`.
    """
    if not poll_id:
        raise BadRequestError("poll_id is required")

    return await service.get_poll_analytics(poll_id)
