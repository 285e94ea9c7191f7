"""
Tests for webhook API endpoints.
"""

import re
from datetime import datetime
from typing import Optional

import pytest
from httpx import AsyncClient

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


@pytest.mark.unit
class TestCreateWebhook:
    """Test POST /webhooks."""

    async def test_create_webhook(self, client: AsyncClient) -> None:
        """Test the documented example registration."""
        response = await client.post(
            "/webhooks",
            json={"webhook": {"url": "https://example.com/hook", "events": ["poll.created"]}},
        )

        assert response.status_code == 201
        webhook = response.json()["webhook"]
        assert webhook["url"] == "https://example.com/hook"
        assert webhook["events"] == ["poll.created"]
        assert UUID_PATTERN.match(webhook["secret"])
        # ISO 8601 timestamp
        assert datetime.fromisoformat(webhook["created_at"].replace("Z", "+00:00"))

    async def test_secrets_are_unique(self, client: AsyncClient) -> None:
        """Test that two registrations never share a secret."""
        body = {"webhook": {"url": "https://example.com/hook", "events": ["poll.voted"]}}

        first = await client.post("/webhooks", json=body)
        second = await client.post("/webhooks", json=body)

        assert first.json()["webhook"]["secret"] != second.json()["webhook"]["secret"]

    async def test_client_supplied_secret_is_ignored(self, client: AsyncClient) -> None:
        """Test that the secret is always generated by the server."""
        response = await client.post(
            "/webhooks",
            json={
                "webhook": {
                    "url": "https://example.com/hook",
                    "events": ["poll.created"],
                    "secret": "chosen-by-client",
                }
            },
        )

        assert response.status_code == 201
        assert response.json()["webhook"]["secret"] != "chosen-by-client"

    async def test_optional_poll_scope_is_stored(self, client: AsyncClient) -> None:
        poll_id = "7a1f2c3e-0000-4000-8000-000000000001"
        response = await client.post(
            "/webhooks",
            json={"webhook": {"url": "https://example.com/hook", "events": ["poll.voted"], "poll_id": poll_id}},
        )

        assert response.json()["webhook"]["poll_id"] == poll_id

    @pytest.mark.parametrize("poll_id", ["abc", "42", ""])
    async def test_malformed_poll_id_returns_400(self, client: AsyncClient, webhook_repo, poll_id: str) -> None:
        """Test that a poll scope that is not a UUID never reaches the database."""
        response = await client.post(
            "/webhooks",
            json={"webhook": {"url": "https://example.com/hook", "events": ["poll.voted"], "poll_id": poll_id}},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "poll_id must be a UUID", "code": "INVALID_REQUEST"}
        assert webhook_repo.webhooks == {}

    @pytest.mark.parametrize(
        "webhook",
        [
            {"events": ["poll.created"]},
            {"url": "https://example.com/hook"},
            {"url": "", "events": ["poll.created"]},
            {},
            None,
        ],
    )
    async def test_missing_url_or_events_returns_400(
        self,
        client: AsyncClient,
        webhook_repo,
        webhook: Optional[dict],
    ) -> None:
        """Test that incomplete registrations are rejected without an insert."""
        response = await client.post("/webhooks", json={"webhook": webhook})

        assert response.status_code == 400
        assert response.json()["error"] == "url and events are required"
        assert webhook_repo.webhooks == {}

    async def test_missing_webhook_field_returns_400(self, client: AsyncClient, webhook_repo) -> None:
        response = await client.post("/webhooks", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "url and events are required"
        assert webhook_repo.webhooks == {}


@pytest.mark.unit
class TestListWebhooks:
    """Test GET /webhooks."""

    async def test_list_empty(self, client: AsyncClient) -> None:
        response = await client.get("/webhooks")

        assert response.status_code == 200
        assert response.json() == {"webhooks": []}

    async def test_list_returns_registrations(self, client: AsyncClient) -> None:
        """Test that created webhooks are listed, newest first."""
        for url in ["https://a.example.com", "https://b.example.com"]:
            await client.post("/webhooks", json={"webhook": {"url": url, "events": ["poll.created"]}})

        response = await client.get("/webhooks")

        webhooks = response.json()["webhooks"]
        assert len(webhooks) == 2
        created = [w["created_at"] for w in webhooks]
        assert created == sorted(created, reverse=True)


@pytest.mark.unit
class TestDeleteWebhook:
    """Test DELETE /webhooks."""

    async def test_delete_existing_webhook(self, client: AsyncClient, webhook_repo) -> None:
        created = await client.post(
            "/webhooks",
            json={"webhook": {"url": "https://example.com/hook", "events": ["poll.created"]}},
        )
        webhook_id = created.json()["webhook"]["id"]

        response = await client.delete("/webhooks", params={"id": webhook_id})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert webhook_id not in webhook_repo.webhooks

    async def test_delete_unknown_webhook_succeeds(self, client: AsyncClient, webhook_repo) -> None:
        """Test that deleting a nonexistent ID does not fail."""
        response = await client.delete("/webhooks", params={"id": "00000000-0000-4000-8000-000000000000"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert webhook_repo.deleted == ["00000000-0000-4000-8000-000000000000"]

    async def test_delete_without_id_returns_400(self, client: AsyncClient, webhook_repo) -> None:
        response = await client.delete("/webhooks")

        assert response.status_code == 400
        assert response.json() == {"error": "id is required", "code": "INVALID_REQUEST"}
        assert webhook_repo.deleted == []

    async def test_put_returns_405(self, client: AsyncClient) -> None:
        response = await client.put("/webhooks", json={})

        assert response.status_code == 405
        assert response.json()["error"] == "Method not allowed"
