"""
Webhook repository for database operations.
"""

import logging
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.webhook import PollWebhook
from repositories.poll_repository import is_uuid
from schemas.converters import webhook_model_to_schema
from schemas.webhook import Webhook

logger = logging.getLogger(__name__)


class WebhookRepository:
    """Repository for webhook registrations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _get_rowcount(self, result: Any) -> int:
        """Safely get rowcount from result."""
        return getattr(result, "rowcount", 0) or 0

    async def list_all(self) -> list[Webhook]:
        """Get all webhook registrations, newest first."""
        result = await self.db.execute(select(PollWebhook).order_by(PollWebhook.created_at.desc()))
        return [webhook_model_to_schema(w) for w in result.scalars().all()]

    async def create(
        self,
        url: str,
        events: list[str],
        secret: str,
        created_at: datetime,
        poll_id: Optional[str] = None,
        is_active: bool = True,
    ) -> Webhook:
        """Insert a webhook registration and return the stored row."""
        webhook = PollWebhook(
            id=str(uuid4()),
            url=url,
            events=list(events),
            secret=secret,
            poll_id=poll_id,
            is_active=is_active,
            created_at=created_at,
        )
        self.db.add(webhook)
        await self.db.commit()

        logger.info(f"Created webhook {webhook.id} for {len(webhook.events)} events")
        return webhook_model_to_schema(webhook)

    async def delete(self, webhook_id: str) -> int:
        """
        Delete a webhook by ID.

        Returns the number of deleted rows; deleting an unknown ID is not an
        error.
        """
        if not is_uuid(webhook_id):
            return 0
        result = await self.db.execute(delete(PollWebhook).where(PollWebhook.id == webhook_id))
        await self.db.commit()
        return self._get_rowcount(result)
