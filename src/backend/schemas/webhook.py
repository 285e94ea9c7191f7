"""
Webhook registration schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WebhookCreate(BaseModel):
    """
    Webhook fields accepted on creation.

    url and events are checked by the endpoint rather than by the schema so
    that a missing field gets the gateway's own error message. Any client
    supplied secret is ignored.
    """

    url: Optional[str] = None
    events: Optional[list[str]] = None
    poll_id: Optional[str] = Field(None, description="Restrict the webhook to one poll")
    is_active: bool = True


class WebhookCreateRequest(BaseModel):
    """Request body for POST /webhooks."""

    webhook: Optional[WebhookCreate] = None


class Webhook(BaseModel):
    """Schema for webhook responses."""

    id: str
    poll_id: Optional[str] = None
    url: str
    events: list[str]
    secret: str
    is_active: bool = True
    last_triggered_at: Optional[datetime] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class WebhookResponse(BaseModel):
    webhook: Webhook


class WebhookListResponse(BaseModel):
    webhooks: list[Webhook]


class WebhookDeleteResponse(BaseModel):
    success: bool = True
