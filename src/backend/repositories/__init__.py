"""Repository modules for database access."""

from repositories.analytics_repository import AnalyticsRepository
from repositories.integration_repository import IntegrationRepository
from repositories.poll_repository import PollRepository
from repositories.webhook_repository import WebhookRepository

__all__ = [
    "PollRepository",
    "AnalyticsRepository",
    "WebhookRepository",
    "IntegrationRepository",
]
