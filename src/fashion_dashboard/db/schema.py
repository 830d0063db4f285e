"""Database schema for the fashion dashboard.

A single flat table of content engagement rows. Rows are written only by
the bulk CSV import and are read-only for the API.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class ContentRecord(Base):
    """One row of fashion-content engagement data.

    engagement_score and trending_score are precomputed upstream and only
    used for ordering and averaging here.
    """

    __tablename__ = "content"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[str] = mapped_column(String(100), nullable=False)
    time_spent_minutes: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    engagement_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    difficulty_level: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    trending_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        Index("idx_content_category", "category"),
        Index("idx_content_source", "source"),
        Index("idx_content_engagement", "engagement_score"),
        Index("idx_content_trending", "trending_score"),
        Index("idx_content_type", "content_type"),
        Index("idx_content_difficulty", "difficulty_level"),
    )
