"""
Repository provider for dependency injection.

Routes never build repositories or sessions themselves; they declare the
repository they need and FastAPI resolves it from here. Tests replace these
providers through app.dependency_overrides.

Usage:
    from repositories.provider import PollRepositoryProtocol, get_poll_repository

    async def some_endpoint(
        poll_repo: PollRepositoryProtocol = Depends(get_poll_repository),
    ):
        poll = await poll_repo.get_by_id(poll_id)
"""

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from repositories.analytics_repository import AnalyticsRepository
from repositories.integration_repository import IntegrationRepository
from repositories.poll_repository import PollRepository
from repositories.webhook_repository import WebhookRepository
from schemas.integration import Integration
from schemas.poll import Poll, PollCreate, PollDetail
from schemas.webhook import Webhook


# =============================================================================
# Repository Protocols (Interfaces)
# =============================================================================


@runtime_checkable
class PollRepositoryProtocol(Protocol):
    """Protocol defining poll repository operations."""

    async def get_by_id(self, poll_id: str) -> Optional[PollDetail]: ...
    async def list_page(self, limit: int = 10, offset: int = 0) -> list[Poll]: ...
    async def count(self) -> int: ...
    async def create(self, data: PollCreate) -> Poll: ...


@runtime_checkable
class AnalyticsRepositoryProtocol(Protocol):
    """Protocol defining analytics repository operations."""

    async def get_performance_metrics(self, poll_id: str) -> list[dict[str, Any]]: ...
    async def list_votes(self, poll_id: str) -> list[Any]: ...
    async def list_views(self, poll_id: str) -> list[Any]: ...


@runtime_checkable
class WebhookRepositoryProtocol(Protocol):
    """Protocol defining webhook repository operations."""

    async def list_all(self) -> list[Webhook]: ...
    async def create(
        self,
        url: str,
        events: list[str],
        secret: str,
        created_at: datetime,
        poll_id: Optional[str] = None,
        is_active: bool = True,
    ) -> Webhook: ...
    async def delete(self, webhook_id: str) -> int: ...


@runtime_checkable
class IntegrationRepositoryProtocol(Protocol):
    """Protocol defining integration repository operations."""

    async def create(
        self,
        integration_type: str,
        configuration: Optional[dict[str, Any]] = None,
    ) -> Integration: ...


# =============================================================================
# FastAPI Dependencies
# =============================================================================


async def get_poll_repository(db: AsyncSession = Depends(get_db)) -> PollRepositoryProtocol:
    return PollRepository(db)


async def get_analytics_repository(db: AsyncSession = Depends(get_db)) -> AnalyticsRepositoryProtocol:
    return AnalyticsRepository(db)


async def get_webhook_repository(db: AsyncSession = Depends(get_db)) -> WebhookRepositoryProtocol:
    return WebhookRepository(db)


async def get_integration_repository(db: AsyncSession = Depends(get_db)) -> IntegrationRepositoryProtocol:
    return IntegrationRepository(db)
