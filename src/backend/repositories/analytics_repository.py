"""
Analytics repository.

Reads the inputs of poll analytics: the database-side performance metrics
procedure plus the raw vote and view-log rows of a poll.
"""

from typing import Any

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from models.vote import PollViewLog, PollVote
from repositories.poll_repository import is_uuid

PERFORMANCE_METRICS_QUERY = text("SELECT * FROM calculate_poll_performance_metrics(:p_poll_id)")


class AnalyticsRepository:
    """Read-only access to poll metrics, votes and views."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_performance_metrics(self, poll_id: str) -> list[dict[str, Any]]:
        """Run calculate_poll_performance_metrics for a poll."""
        if not is_uuid(poll_id):
            return []
        result = await self.db.execute(PERFORMANCE_METRICS_QUERY, {"p_poll_id": poll_id})
        return [dict(row) for row in result.mappings().all()]

    async def list_votes(self, poll_id: str) -> list[PollVote]:
        """Get every vote cast in a poll."""
        if not is_uuid(poll_id):
            return []
        result = await self.db.execute(select(PollVote).where(PollVote.poll_id == poll_id))
        return list(result.scalars().all())

    async def list_views(self, poll_id: str) -> list[PollViewLog]:
        """Get every logged view of a poll."""
        if not is_uuid(poll_id):
            return []
        result = await self.db.execute(select(PollViewLog).where(PollViewLog.poll_id == poll_id))
        return list(result.scalars().all())
