"""
Poll models for PostgreSQL storage.

A poll row carries its question and options. Per-poll advanced configuration
and fraud-prevention settings live in one-to-one side tables and are joined
in when a single poll is requested.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base


class Poll(Base):
    """Poll question, its options and the denormalized vote counter."""

    __tablename__ = "polls"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    title: Mapped[str] = mapped_column(Text)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # List of option labels, stored as JSON
    options: Mapped[list[Any]] = mapped_column(JSONB, default=list)
    creator_id: Mapped[Optional[str]] = mapped_column(UUID(as_uuid=False), nullable=True)

    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)
    ends_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    votes_count: Mapped[Optional[int]] = mapped_column(Integer, default=0)

    # Visibility and lifecycle
    privacy_mode: Mapped[Optional[str]] = mapped_column(String(20), default="public")
    show_results_after_expiry: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)
    auto_delete_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    anonymous_mode: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    duration_days: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Presentation
    theme_color: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    banner_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )

    advanced_config: Mapped[Optional["PollAdvancedConfig"]] = relationship(
        back_populates="poll",
        uselist=False,
        lazy="raise",
    )
    fraud_settings: Mapped[Optional["PollFraudSettings"]] = relationship(
        back_populates="poll",
        uselist=False,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Poll {self.id}: {self.title[:30]}>"


class PollAdvancedConfig(Base):
    """Poll type and type-specific settings (ranking, rating, ...)."""

    __tablename__ = "poll_advanced_config"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    poll_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("polls.id", ondelete="CASCADE"),
        unique=True,
    )
    poll_type: Mapped[str] = mapped_column(String(50), default="single_choice")
    settings: Mapped[Optional[dict[str, Any]]] = mapped_column(JSONB, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    poll: Mapped["Poll"] = relationship(back_populates="advanced_config")


class PollFraudSettings(Base):
    """Fraud-prevention switches for a poll."""

    __tablename__ = "poll_fraud_settings"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    poll_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("polls.id", ondelete="CASCADE"),
        unique=True,
    )
    enable_captcha: Mapped[bool] = mapped_column(Boolean, default=False)
    enable_rate_limiting: Mapped[bool] = mapped_column(Boolean, default=False)
    max_votes_per_ip: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    poll: Mapped["Poll"] = relationship(back_populates="fraud_settings")
