"""Database models module."""

from models.integration import PollIntegration
from models.poll import Poll, PollAdvancedConfig, PollFraudSettings
from models.vote import PollViewLog, PollVote
from models.webhook import PollWebhook

__all__ = [
    "Poll",
    "PollAdvancedConfig",
    "PollFraudSettings",
    "PollVote",
    "PollViewLog",
    "PollWebhook",
    "PollIntegration",
]
