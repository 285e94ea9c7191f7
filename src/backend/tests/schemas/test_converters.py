"""Tests for the schema converters."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from schemas.converters import (
    integration_model_to_schema,
    poll_model_to_detail,
    poll_model_to_schema,
    webhook_model_to_schema,
)

CREATED_AT = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestPollModelToSchema:
    """Tests for poll_model_to_schema converter."""

    @pytest.fixture
    def mock_poll(self):
        """Create a mock poll with all required fields."""
        poll = MagicMock()
        poll.id = "6f1c2b8e-3a52-4c3b-8a4e-2d5d0b6f9a10"
        poll.title = "Which region should host the next national festival?"
        poll.description = "Vote for one region"
        poll.options = ["Centre", "Littoral", "West"]
        poll.creator_id = "0a7e1d2c-5b4f-4e3a-9c8d-7f6e5d4c3b2a"
        poll.is_active = True
        poll.ends_at = None
        poll.votes_count = 3
        poll.privacy_mode = "public"
        poll.show_results_after_expiry = True
        poll.auto_delete_at = None
        poll.anonymous_mode = False
        poll.theme_color = None
        poll.banner_image_url = None
        poll.duration_days = None
        poll.created_at = CREATED_AT
        poll.advanced_config = None
        poll.fraud_settings = None
        return poll

    def test_basic_fields(self, mock_poll):
        result = poll_model_to_schema(mock_poll)

        assert result.id == mock_poll.id
        assert result.title == mock_poll.title
        assert result.options == ["Centre", "Littoral", "West"]
        assert result.creator_id == mock_poll.creator_id
        assert result.votes_count == 3
        assert result.created_at == CREATED_AT

    def test_null_options_become_empty(self, mock_poll):
        mock_poll.options = None
        mock_poll.creator_id = None

        result = poll_model_to_schema(mock_poll)

        assert result.options == []
        assert result.creator_id is None

    def test_detail_without_side_records(self, mock_poll):
        result = poll_model_to_detail(mock_poll)

        assert result.poll_advanced_config is None
        assert result.poll_fraud_settings is None
        assert result.title == mock_poll.title

    def test_detail_with_side_records(self, mock_poll):
        mock_poll.advanced_config = SimpleNamespace(
            id="cfg-1",
            poll_id=mock_poll.id,
            poll_type="multiple_choice",
            settings={"max_choices": 2},
            created_at=CREATED_AT,
        )
        mock_poll.fraud_settings = SimpleNamespace(
            id="fraud-1",
            poll_id=mock_poll.id,
            enable_captcha=True,
            enable_rate_limiting=True,
            max_votes_per_ip=3,
            created_at=CREATED_AT,
        )

        result = poll_model_to_detail(mock_poll)
        body = result.model_dump()

        assert body["poll_advanced_config"]["poll_type"] == "multiple_choice"
        assert body["poll_advanced_config"]["settings"] == {"max_choices": 2}
        assert body["poll_fraud_settings"]["max_votes_per_ip"] == 3


class TestWebhookModelToSchema:
    def test_secret_and_events_are_kept(self):
        webhook = SimpleNamespace(
            id="wh-1",
            poll_id=None,
            url="https://example.com/hook",
            events=["poll.created", "poll.voted"],
            secret="2b1f0e3c-9a8d-4c7b-b6a5-4d3c2b1a0f9e",
            is_active=True,
            last_triggered_at=None,
            created_at=CREATED_AT,
        )

        result = webhook_model_to_schema(webhook)

        assert result.events == ["poll.created", "poll.voted"]
        assert result.secret == webhook.secret
        assert result.poll_id is None


class TestIntegrationModelToSchema:
    def test_fields(self):
        integration = SimpleNamespace(
            id="int-1",
            integration_type="google_sheets",
            configuration={"sheet": "results"},
            is_active=True,
            sync_status="pending",
            last_sync_at=None,
            created_at=CREATED_AT,
        )

        result = integration_model_to_schema(integration)

        assert result.integration_type == "google_sheets"
        assert result.configuration == {"sheet": "results"}
        assert result.sync_status == "pending"
