"""
Poll repository for database operations.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.poll import Poll as PollModel
from schemas.converters import poll_model_to_detail, poll_model_to_schema
from schemas.poll import Poll, PollCreate, PollDetail

logger = logging.getLogger(__name__)


def is_uuid(value: str) -> bool:
    """Check whether a string is a UUID (all primary keys are)."""
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


class PollRepository:
    """Repository for poll database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, poll_id: str) -> Optional[PollDetail]:
        """Get a poll by ID with its advanced config and fraud settings."""
        if not is_uuid(poll_id):
            return None

        result = await self.db.execute(
            select(PollModel)
            .options(
                selectinload(PollModel.advanced_config),
                selectinload(PollModel.fraud_settings),
            )
            .where(PollModel.id == poll_id)
        )
        poll = result.scalar_one_or_none()
        if poll is None:
            return None
        return poll_model_to_detail(poll)

    async def list_page(self, limit: int = 10, offset: int = 0) -> list[Poll]:
        """Get one page of polls, newest first."""
        result = await self.db.execute(
            select(PollModel)
            .order_by(PollModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return [poll_model_to_schema(p) for p in result.scalars().all()]

    async def count(self) -> int:
        """Count all polls."""
        result = await self.db.execute(select(func.count(PollModel.id)))
        return result.scalar() or 0

    async def create(self, data: PollCreate) -> Poll:
        """Insert a poll and return the stored row."""
        fields = data.model_dump()
        poll = PollModel(
            id=str(uuid4()),
            votes_count=0,
            created_at=datetime.now(timezone.utc),
            **fields,
        )
        self.db.add(poll)
        await self.db.commit()

        logger.info(f"Created poll {poll.id}")
        return poll_model_to_schema(poll)
