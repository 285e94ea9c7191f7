"""
Integration schemas.

Two different things share the /integrations endpoint: the catalog of
integration types the platform supports (GET) and the integrations a caller
has configured (POST).
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class IntegrationDescriptor(BaseModel):
    """A supported integration type, as listed in the catalog."""

    type: str
    name: str
    description: str
    status: str = "available"


class IntegrationCatalogResponse(BaseModel):
    integrations: list[IntegrationDescriptor]


class IntegrationCreateRequest(BaseModel):
    """Request body for POST /integrations."""

    integration: Optional[str] = Field(None, description="Integration type, e.g. 'slack'")
    config: Optional[dict[str, Any]] = None


class Integration(BaseModel):
    """A configured integration record."""

    id: str
    integration_type: str
    configuration: Optional[dict[str, Any]] = None
    is_active: bool = True
    sync_status: str = "pending"
    last_sync_at: Optional[datetime] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class IntegrationResponse(BaseModel):
    integration: Integration
