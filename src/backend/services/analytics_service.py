"""
Poll analytics service.

Assembles the analytics report of a poll. The overview comes from the
database-side calculate_poll_performance_metrics procedure. Demographics and
trends are placeholders: fixed breakdowns and a random daily series, built
without looking at the vote and view rows handed to them. Every report lists
them in placeholder_sections so that consumers do not mistake them for
measured data.
"""

import random
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Sequence

import structlog

from repositories.provider import AnalyticsRepositoryProtocol
from schemas.analytics import (
    AgeGroupBreakdown,
    AnalyticsResponse,
    Demographics,
    DeviceBreakdown,
    PerformanceMetrics,
    RegionBreakdown,
    TrendPoint,
)

logger = structlog.get_logger(__name__)

PLACEHOLDER_SECTIONS = ["demographics", "trends"]

REGION_BREAKDOWN = [
    {"name": "Centre", "votes": 85, "percentage": 35, "growth": 12},
    {"name": "Littoral", "votes": 73, "percentage": 30, "growth": 8},
    {"name": "West", "votes": 49, "percentage": 20, "growth": -3},
    {"name": "Northwest", "votes": 38, "percentage": 15, "growth": 15},
]

AGE_GROUP_BREAKDOWN = [
    {"group": "18-24", "votes": 89, "percentage": 36},
    {"group": "25-34", "votes": 78, "percentage": 32},
    {"group": "35-44", "votes": 52, "percentage": 21},
    {"group": "45-54", "votes": 18, "percentage": 7},
    {"group": "55+", "votes": 8, "percentage": 3},
]

DEVICE_BREAKDOWN = [
    {"type": "Mobile", "count": 156, "percentage": 64},
    {"type": "Desktop", "count": 67, "percentage": 27},
    {"type": "Tablet", "count": 22, "percentage": 9},
]

# Inclusive bounds of the random trend values
TREND_RANGES = {
    "votes": (5, 29),
    "views": (20, 99),
    "engagement": (10, 39),
    "completion_rate": (60, 99),
}


def build_demographics(votes: Sequence[Any], views: Sequence[Any]) -> Demographics:
    """Return the fixed placeholder demographic breakdowns."""
    return Demographics(
        regions=[RegionBreakdown(**r) for r in REGION_BREAKDOWN],
        age_groups=[AgeGroupBreakdown(**a) for a in AGE_GROUP_BREAKDOWN],
        device_types=[DeviceBreakdown(**d) for d in DEVICE_BREAKDOWN],
    )


def build_trends(
    votes: Sequence[Any],
    views: Sequence[Any],
    days: int = 30,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> list[TrendPoint]:
    """
    Return a random daily series of `days` points ending today.

    Points are in chronological order, one per calendar day.
    """
    rng = rng or random.Random()
    today = today or datetime.now(timezone.utc).date()

    points = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        values = {key: rng.randint(low, high) for key, (low, high) in TREND_RANGES.items()}
        points.append(TrendPoint(date=day.isoformat(), **values))
    return points


class AnalyticsService:
    """Builds analytics reports for polls."""

    def __init__(
        self,
        repo: AnalyticsRepositoryProtocol,
        trend_days: int = 30,
        rng: Optional[random.Random] = None,
    ):
        self.repo = repo
        self.trend_days = trend_days
        self.rng = rng

    async def get_poll_analytics(self, poll_id: str) -> AnalyticsResponse:
        """Collect metrics, votes and views of a poll and assemble the report."""
        metrics = await self.repo.get_performance_metrics(poll_id)
        votes = await self.repo.list_votes(poll_id)
        views = await self.repo.list_views(poll_id)

        overview = PerformanceMetrics(**metrics[0]) if metrics else None

        logger.info(
            "poll_analytics_generated",
            poll_id=poll_id,
            has_metrics=overview is not None,
            votes=len(votes),
            views=len(views),
        )

        return AnalyticsResponse(
            overview=overview,
            demographics=build_demographics(votes, views),
            trends=build_trends(votes, views, days=self.trend_days, rng=self.rng),
            poll_id=poll_id,
            generated_at=datetime.now(timezone.utc),
            placeholder_sections=list(PLACEHOLDER_SECTIONS),
        )
