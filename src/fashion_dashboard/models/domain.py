"""Domain models for the fashion dashboard.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# Filter value the frontend sends to mean "no filter"
ALL_FILTER = "All"

# Largest limit/offset SQLite accepts as a bound parameter
MAX_PAGE_BOUND = 2**63 - 1


# ============================================================================
# Content Domain
# ============================================================================


@dataclass
class ContentEntity:
    """Domain model for a content row."""

    category: str
    url: str
    source: str
    time_spent_minutes: float = 0.0
    upvotes: int = 0
    views: int = 0
    engagement_score: float = 0.0
    content_type: str = ""
    difficulty_level: str = ""
    trending_score: float = 0.0
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ============================================================================
# Query Domain
# ============================================================================


def _normalize_filter(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value or value == ALL_FILTER:
        return None
    return value


@dataclass(frozen=True)
class ContentQuery:
    """Normalized search/filter/pagination parameters.

    None means "not constrained" for every field. Build instances with
    from_params() so "All" and blank values are folded to None.
    """

    search: str | None = None
    category: str | None = None
    source: str | None = None
    content_type: str | None = None
    difficulty_level: str | None = None
    limit: int | None = None
    offset: int | None = None

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        category: str | None = None,
        source: str | None = None,
        content_type: str | None = None,
        difficulty_level: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ContentQuery:
        """Normalize raw request parameters.

        Raises:
            ValueError: If limit is not positive, offset is negative, or
                either exceeds MAX_PAGE_BOUND.
        """
        if limit is not None and not 1 <= limit <= MAX_PAGE_BOUND:
            raise ValueError(f"limit must be between 1 and {MAX_PAGE_BOUND}, got {limit}")
        if offset is not None and not 0 <= offset <= MAX_PAGE_BOUND:
            raise ValueError(f"offset must be between 0 and {MAX_PAGE_BOUND}, got {offset}")

        search_text = search.strip() if search else None

        return cls(
            search=search_text or None,
            category=_normalize_filter(category),
            source=_normalize_filter(source),
            content_type=_normalize_filter(content_type),
            difficulty_level=_normalize_filter(difficulty_level),
            limit=limit,
            # Offset only applies together with a limit
            offset=offset if limit is not None else None,
        )

    def equality_filters(self) -> dict[str, str]:
        """Column name -> required value for every active equality filter."""
        filters = {
            "category": self.category,
            "source": self.source,
            "content_type": self.content_type,
            "difficulty_level": self.difficulty_level,
        }
        return {column: value for column, value in filters.items() if value is not None}
