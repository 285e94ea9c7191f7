"""
Webhook registration endpoints.

Webhooks are only registered, listed and removed here. Each registration gets
a signing secret generated by the server when it is created.
"""

from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, status

from core.errors import BadRequestError
from core.security import generate_webhook_secret
from repositories.poll_repository import is_uuid
from repositories.provider import WebhookRepositoryProtocol, get_webhook_repository
from schemas.webhook import (
    WebhookCreateRequest,
    WebhookDeleteResponse,
    WebhookListResponse,
    WebhookResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=WebhookListResponse)
async def list_webhooks(
    webhook_repo: WebhookRepositoryProtocol = Depends(get_webhook_repository),
) -> WebhookListResponse:
    """List all webhook registrations, newest first."""
    webhooks = await webhook_repo.list_all()
    return WebhookListResponse(webhooks=webhooks)


@router.post("", response_model=WebhookResponse, status_code=status.HTTP_201_CREATED)
async def create_webhook(
    body: Optional[WebhookCreateRequest] = None,
    webhook_repo: WebhookRepositoryProtocol = Depends(get_webhook_repository),
) -> WebhookResponse:
    """
    Register a webhook.

    Requires `url` and `events`. The secret and creation timestamp are set
    here; nothing is stored when validation fails.
    """
    data = body.webhook if body else None
    if data is None or not data.url or data.events is None:
        raise BadRequestError("url and events are required")
    if data.poll_id is not None and not is_uuid(data.poll_id):
        raise BadRequestError("poll_id must be a UUID")

    webhook = await webhook_repo.create(
        url=data.url,
        events=data.events,
        secret=generate_webhook_secret(),
        created_at=datetime.now(timezone.utc),
        poll_id=data.poll_id,
        is_active=data.is_active,
    )

    logger.info(
        "webhook_created",
        webhook_id=webhook.id,
        events=webhook.events,
        poll_id=webhook.poll_id,
    )
    return WebhookResponse(webhook=webhook)


@router.delete("", response_model=WebhookDeleteResponse)
async def delete_webhook(
    id: Optional[str] = Query(None),
    webhook_repo: WebhookRepositoryProtocol = Depends(get_webhook_repository),
) -> WebhookDeleteResponse:
    """
    Delete a webhook by ID.

    Succeeds whether or not the webhook existed.
    """
    if not id:
        raise BadRequestError("id is required")

    deleted = await webhook_repo.delete(id)

    logger.info("webhook_deleted", webhook_id=id, deleted=deleted)
    return WebhookDeleteResponse(success=True)
