"""
Integration repository for database operations.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from models.integration import PollIntegration
from schemas.converters import integration_model_to_schema
from schemas.integration import Integration

logger = logging.getLogger(__name__)


class IntegrationRepository:
    """Repository for configured integrations (write side only)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        integration_type: str,
        configuration: Optional[dict[str, Any]] = None,
    ) -> Integration:
        """Record a configured integration; it starts active with a pending sync."""
        integration = PollIntegration(
            id=str(uuid4()),
            integration_type=integration_type,
            configuration=configuration or {},
            is_active=True,
            sync_status="pending",
            created_at=datetime.now(timezone.utc),
        )
        self.db.add(integration)
        await self.db.commit()

        logger.info(f"Created {integration_type} integration {integration.id}")
        return integration_model_to_schema(integration)
