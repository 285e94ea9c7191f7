"""
Pytest fixtures for CamerPulse Poll API tests.

API tests run the real application with its repositories swapped for the
in-memory fakes below, so no database is needed.
"""

import os
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_DB", "camerpulse_test")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("API_PREFIX", "")

from schemas.integration import Integration  # noqa: E402
from schemas.poll import Poll, PollCreate, PollDetail  # noqa: E402
from schemas.webhook import Webhook  # noqa: E402

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# In-memory repositories
# =============================================================================


class FakePollRepository:
    """Poll repository keeping rows in a dict."""

    def __init__(self) -> None:
        self.polls: dict[str, PollDetail] = {}
        self.created: list[PollCreate] = []

    async def get_by_id(self, poll_id: str) -> Optional[PollDetail]:
        return self.polls.get(poll_id)

    async def list_page(self, limit: int = 10, offset: int = 0) -> list[Poll]:
        ordered = sorted(self.polls.values(), key=lambda p: p.created_at, reverse=True)
        return [Poll(**p.model_dump(exclude={"poll_advanced_config", "poll_fraud_settings"})) for p in ordered][
            offset : offset + limit
        ]

    async def count(self) -> int:
        return len(self.polls)

    async def create(self, data: PollCreate) -> Poll:
        self.created.append(data)
        poll = Poll(
            id=str(uuid4()),
            votes_count=0,
            # Strictly increasing so ordering by created_at is deterministic
            created_at=BASE_TIME + timedelta(minutes=len(self.polls)),
            **data.model_dump(),
        )
        self.polls[poll.id] = PollDetail(**poll.model_dump())
        return poll


class FakeAnalyticsRepository:
    """Analytics repository returning canned rows and recording calls."""

    def __init__(self) -> None:
        self.metrics: list[dict[str, Any]] = []
        self.votes: list[dict[str, Any]] = []
        self.views: list[dict[str, Any]] = []
        self.calls: list[tuple[str, str]] = []

    async def get_performance_metrics(self, poll_id: str) -> list[dict[str, Any]]:
        self.calls.append(("get_performance_metrics", poll_id))
        return self.metrics

    async def list_votes(self, poll_id: str) -> list[Any]:
        self.calls.append(("list_votes", poll_id))
        return self.votes

    async def list_views(self, poll_id: str) -> list[Any]:
        self.calls.append(("list_views", poll_id))
        return self.views


class FakeWebhookRepository:
    """Webhook repository keeping rows in a dict."""

    def __init__(self) -> None:
        self.webhooks: dict[str, Webhook] = {}
        self.deleted: list[str] = []

    async def list_all(self) -> list[Webhook]:
        return sorted(self.webhooks.values(), key=lambda w: w.created_at, reverse=True)

    async def create(
        self,
        url: str,
        events: list[str],
        secret: str,
        created_at: datetime,
        poll_id: Optional[str] = None,
        is_active: bool = True,
    ) -> Webhook:
        webhook = Webhook(
            id=str(uuid4()),
            url=url,
            events=events,
            secret=secret,
            created_at=created_at,
            poll_id=poll_id,
            is_active=is_active,
        )
        self.webhooks[webhook.id] = webhook
        return webhook

    async def delete(self, webhook_id: str) -> int:
        self.deleted.append(webhook_id)
        return 1 if self.webhooks.pop(webhook_id, None) else 0


class FakeIntegrationRepository:
    """Integration repository keeping rows in a list."""

    def __init__(self) -> None:
        self.integrations: list[Integration] = []

    async def create(
        self,
        integration_type: str,
        configuration: Optional[dict[str, Any]] = None,
    ) -> Integration:
        integration = Integration(
            id=str(uuid4()),
            integration_type=integration_type,
            configuration=configuration or {},
            is_active=True,
            sync_status="pending",
            created_at=datetime.now(timezone.utc),
        )
        self.integrations.append(integration)
        return integration


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def poll_repo() -> FakePollRepository:
    return FakePollRepository()


@pytest.fixture
def analytics_repo() -> FakeAnalyticsRepository:
    return FakeAnalyticsRepository()


@pytest.fixture
def webhook_repo() -> FakeWebhookRepository:
    return FakeWebhookRepository()


@pytest.fixture
def integration_repo() -> FakeIntegrationRepository:
    return FakeIntegrationRepository()


@pytest.fixture
def app(
    poll_repo: FakePollRepository,
    analytics_repo: FakeAnalyticsRepository,
    webhook_repo: FakeWebhookRepository,
    integration_repo: FakeIntegrationRepository,
) -> Any:
    """FastAPI application wired to the in-memory repositories."""
    from main import app as fastapi_app
    from repositories.provider import (
        get_analytics_repository,
        get_integration_repository,
        get_poll_repository,
        get_webhook_repository,
    )

    fastapi_app.dependency_overrides[get_poll_repository] = lambda: poll_repo
    fastapi_app.dependency_overrides[get_analytics_repository] = lambda: analytics_repo
    fastapi_app.dependency_overrides[get_webhook_repository] = lambda: webhook_repo
    fastapi_app.dependency_overrides[get_integration_repository] = lambda: integration_repo
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def mock_session() -> AsyncMock:
    """Create a mock database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_poll_payload() -> dict[str, Any]:
    """Sample poll creation payload."""
    return {
        "title": "Should the Douala ring road be prioritized?",
        "description": "Infrastructure priorities for the Littoral region",
        "options": ["Yes", "No", "Undecided"],
        "is_active": True,
    }
