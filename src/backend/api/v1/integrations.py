"""
Integration endpoints.

GET lists the catalog of integration types the platform supports; it is
static and does not read the integrations created through POST.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, status

from core.errors import BadRequestError
from repositories.provider import IntegrationRepositoryProtocol, get_integration_repository
from schemas.integration import (
    IntegrationCatalogResponse,
    IntegrationCreateRequest,
    IntegrationDescriptor,
    IntegrationResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter()

INTEGRATION_CATALOG = [
    IntegrationDescriptor(
        type="slack",
        name="Slack",
        description="Send poll notifications to Slack channels",
    ),
    IntegrationDescriptor(
        type="microsoft_teams",
        name="Microsoft Teams",
        description="Integration with Teams channels",
    ),
    IntegrationDescriptor(
        type="zapier",
        name="Zapier",
        description="Connect to 1000+ apps via Zapier",
    ),
    IntegrationDescriptor(
        type="google_sheets",
        name="Google Sheets",
        description="Export results to Google Sheets",
    ),
]


@router.get("", response_model=IntegrationCatalogResponse)
async def list_integration_catalog() -> IntegrationCatalogResponse:
    """List the supported integration types."""
    return IntegrationCatalogResponse(integrations=INTEGRATION_CATALOG)


@router.post("", response_model=IntegrationResponse, status_code=status.HTTP_201_CREATED)
async def create_integration(
    body: Optional[IntegrationCreateRequest] = None,
    integration_repo: IntegrationRepositoryProtocol = Depends(get_integration_repository),
) -> IntegrationResponse:
    """Record a configured integration; it starts active."""
    if body is None or not body.integration:
        raise BadRequestError("integration is required")

    integration = await integration_repo.create(
        integration_type=body.integration,
        configuration=body.config,
    )

    logger.info(
        "integration_created",
        integration_id=integration.id,
        integration_type=integration.integration_type,
    )
    return IntegrationResponse(integration=integration)
