"""
Schema converter functions.

Centralized helpers converting SQLAlchemy models to Pydantic schemas, so that
repositories hand plain schemas to the API layer and never leak ORM objects.
"""

from typing import TYPE_CHECKING

from schemas.integration import Integration
from schemas.poll import Poll, PollAdvancedConfig, PollDetail, PollFraudSettings
from schemas.webhook import Webhook

if TYPE_CHECKING:
    from models.integration import PollIntegration as PollIntegrationModel
    from models.poll import Poll as PollModel
    from models.webhook import PollWebhook as PollWebhookModel


def poll_model_to_schema(poll: "PollModel") -> Poll:
    """Convert a Poll model (without side records) to a Poll schema."""
    return Poll(
        id=str(poll.id),
        title=poll.title,
        description=poll.description,
        options=list(poll.options or []),
        creator_id=str(poll.creator_id) if poll.creator_id else None,
        is_active=poll.is_active,
        ends_at=poll.ends_at,
        votes_count=poll.votes_count,
        privacy_mode=poll.privacy_mode,
        show_results_after_expiry=poll.show_results_after_expiry,
        auto_delete_at=poll.auto_delete_at,
        anonymous_mode=poll.anonymous_mode,
        theme_color=poll.theme_color,
        banner_image_url=poll.banner_image_url,
        duration_days=poll.duration_days,
        created_at=poll.created_at,
    )


def poll_model_to_detail(poll: "PollModel") -> PollDetail:
    """
    Convert a Poll model with loaded side records to a PollDetail schema.

    The side records are exposed under their table names, which is what
    existing clients of the gateway read.
    """
    base = poll_model_to_schema(poll)
    return PollDetail(
        **base.model_dump(),
        poll_advanced_config=(
            PollAdvancedConfig.model_validate(poll.advanced_config) if poll.advanced_config else None
        ),
        poll_fraud_settings=(
            PollFraudSettings.model_validate(poll.fraud_settings) if poll.fraud_settings else None
        ),
    )


def webhook_model_to_schema(webhook: "PollWebhookModel") -> Webhook:
    """Convert a PollWebhook model to a Webhook schema."""
    return Webhook(
        id=str(webhook.id),
        poll_id=str(webhook.poll_id) if webhook.poll_id else None,
        url=webhook.url,
        events=list(webhook.events or []),
        secret=webhook.secret,
        is_active=webhook.is_active,
        last_triggered_at=webhook.last_triggered_at,
        created_at=webhook.created_at,
    )


def integration_model_to_schema(integration: "PollIntegrationModel") -> Integration:
    """Convert a PollIntegration model to an Integration schema."""
    return Integration.model_validate(integration)
