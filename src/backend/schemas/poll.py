"""
Poll-related Pydantic schemas.
"""

from datetime import datetime
from typing import Any, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class PollCreate(BaseModel):
    """
    Poll fields accepted on creation.

    Unknown fields are rejected so that nothing a client sends is dropped
    on the way to the polls table.
    """

    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    options: list[str] = Field(..., min_length=2, max_length=50)
    creator_id: Optional[str] = Field(None, description="Profile ID of the poll author")
    is_active: bool = True
    ends_at: Optional[datetime] = None
    privacy_mode: Literal["public", "private", "anonymous"] = "public"
    show_results_after_expiry: bool = True
    auto_delete_at: Optional[datetime] = None
    anonymous_mode: bool = False
    theme_color: Optional[str] = Field(None, max_length=32)
    banner_image_url: Optional[str] = None
    duration_days: Optional[int] = Field(None, ge=1)

    model_config = {"extra": "forbid"}

    @field_validator("creator_id")
    @classmethod
    def validate_creator_id(cls, v: Optional[str]) -> Optional[str]:
        """Profile IDs are UUIDs."""
        if v is not None:
            try:
                UUID(v)
            except ValueError:
                raise ValueError("must be a UUID") from None
        return v


class PollCreateRequest(BaseModel):
    """Request body for POST /polls."""

    poll: Optional[PollCreate] = None


class PollAdvancedConfig(BaseModel):
    """Advanced poll configuration (poll type and type-specific settings)."""

    id: str
    poll_id: str
    poll_type: str = "single_choice"
    settings: Optional[dict[str, Any]] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PollFraudSettings(BaseModel):
    """Fraud-prevention settings of a poll."""

    id: str
    poll_id: str
    enable_captcha: bool = False
    enable_rate_limiting: bool = False
    max_votes_per_ip: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class Poll(BaseModel):
    """Schema for poll responses."""

    id: str
    title: str
    description: Optional[str] = None
    options: list[Any] = Field(default_factory=list)
    creator_id: Optional[str] = None
    is_active: Optional[bool] = True
    ends_at: Optional[datetime] = None
    votes_count: Optional[int] = 0
    privacy_mode: Optional[str] = "public"
    show_results_after_expiry: Optional[bool] = True
    auto_delete_at: Optional[datetime] = None
    anonymous_mode: Optional[bool] = False
    theme_color: Optional[str] = None
    banner_image_url: Optional[str] = None
    duration_days: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PollDetail(Poll):
    """A single poll joined with its side records."""

    poll_advanced_config: Optional[PollAdvancedConfig] = None
    poll_fraud_settings: Optional[PollFraudSettings] = None


class PollResponse(BaseModel):
    poll: PollDetail


class PollCreatedResponse(BaseModel):
    poll: Poll


class PollListResponse(BaseModel):
    """
    One page of polls.

    `total` is the number of polls on this page unless exact totals are
    enabled, in which case it is the number of rows in the table.
    """

    polls: list[Poll]
    total: int
