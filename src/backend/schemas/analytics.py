"""
Poll analytics schemas.

Only `overview` comes from the database. `demographics` and `trends` are
placeholder data and are listed in `placeholderSections` of every response.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PerformanceMetrics(BaseModel):
    """One row of calculate_poll_performance_metrics()."""

    model_config = ConfigDict(extra="allow")

    total_votes: Optional[int] = None
    unique_voters: Optional[int] = None
    engagement_rate: Optional[float] = None
    fraud_risk_score: Optional[float] = None


class RegionBreakdown(BaseModel):
    name: str
    votes: int
    percentage: int
    growth: int


class AgeGroupBreakdown(BaseModel):
    group: str
    votes: int
    percentage: int


class DeviceBreakdown(BaseModel):
    type: str
    count: int
    percentage: int


class Demographics(BaseModel):
    """Placeholder demographic breakdowns."""

    model_config = ConfigDict(populate_by_name=True)

    regions: list[RegionBreakdown]
    age_groups: list[AgeGroupBreakdown] = Field(alias="ageGroups")
    device_types: list[DeviceBreakdown] = Field(alias="deviceTypes")


class TrendPoint(BaseModel):
    """One day of the placeholder trend series."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    votes: int
    views: int
    engagement: int
    completion_rate: int = Field(alias="completionRate")


class AnalyticsResponse(BaseModel):
    """Response of GET /analytics."""

    model_config = ConfigDict(populate_by_name=True)

    overview: Optional[PerformanceMetrics] = None
    demographics: Demographics
    trends: list[TrendPoint]
    poll_id: str = Field(alias="pollId")
    generated_at: datetime = Field(alias="generatedAt")
    placeholder_sections: list[str] = Field(
        default_factory=lambda: ["demographics", "trends"],
        alias="placeholderSections",
    )
