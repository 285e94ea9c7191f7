"""Schemas module initialization."""

from schemas.analytics import AnalyticsResponse
from schemas.integration import Integration, IntegrationDescriptor
from schemas.poll import Poll, PollCreate, PollDetail
from schemas.webhook import Webhook, WebhookCreate

__all__ = [
    "Poll",
    "PollCreate",
    "PollDetail",
    "Webhook",
    "WebhookCreate",
    "Integration",
    "IntegrationDescriptor",
    "AnalyticsResponse",
]
