"""Pydantic models for the dashboard API.

Field aliases carry the JSON keys the dashboard frontend reads
(CSV-style names for content rows, camelCase for aggregates).
Models accept either the alias or the field name on input.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ContentItem(BaseModel):
    """One content row as served by GET /api/data."""

    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(alias="Category")
    url: str = Field(alias="URL")
    source: str = Field(alias="Source")
    time_spent_minutes: float = Field(alias="Time_Spent_Minutes")
    upvotes: int = Field(alias="Upvotes")
    views: int = Field(alias="Views")
    engagement_score: float = Field(alias="Engagement_Score")
    content_type: str = Field(alias="Content_Type")
    difficulty_level: str = Field(alias="Difficulty_Level")
    trending_score: float = Field(alias="Trending_Score")
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ContentStats(BaseModel):
    """Totals over the whole content table."""

    model_config = ConfigDict(populate_by_name=True)

    total_content: int = Field(alias="totalContent")
    avg_time_spent: float = Field(alias="avgTimeSpent")
    total_upvotes: int = Field(alias="totalUpvotes")
    total_views: int = Field(alias="totalViews")


class StatsResponse(BaseModel):
    """Payload of GET /api/stats."""

    stats: ContentStats
    categories: list[str]
    sources: list[str]


class CategoryStat(BaseModel):
    """Per-category figures for the category charts."""

    model_config = ConfigDict(populate_by_name=True)

    category: str
    count: int
    avg_time_spent: float = Field(alias="avgTimeSpent")
    total_upvotes: int = Field(alias="totalUpvotes")
    total_views: int = Field(alias="totalViews")
    avg_engagement: float = Field(alias="avgEngagement")


class SourceShare(BaseModel):
    """Share of the filtered rows coming from one source."""

    source: str
    count: int
    percentage: float


class ContentBreakdown(BaseModel):
    """Payload of GET /api/stats/breakdown."""

    model_config = ConfigDict(populate_by_name=True)

    totals: ContentStats
    category_stats: list[CategoryStat] = Field(alias="categoryStats")
    source_distribution: list[SourceShare] = Field(alias="sourceDistribution")
    top_by_time_spent: list[ContentItem] = Field(alias="topByTimeSpent")
    top_by_upvotes: list[ContentItem] = Field(alias="topByUpvotes")
