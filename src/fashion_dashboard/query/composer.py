"""Content query composer.

Turns a ContentQuery into a SQLAlchemy query over the content table:
free-text search OR-ed across the descriptive columns, equality filters
AND-ed on top, ordered by engagement then trending score, then paginated.
"""

from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.orm import Query

from fashion_dashboard.db.schema import ContentRecord
from fashion_dashboard.models.domain import ContentQuery

# Columns the free-text search looks at
SEARCH_COLUMNS = (
    ContentRecord.category,
    ContentRecord.source,
    ContentRecord.content_type,
    ContentRecord.difficulty_level,
)

# Result ordering: engagement first, trending breaks ties, id keeps it total
ORDERING = (
    ContentRecord.engagement_score.desc(),
    ContentRecord.trending_score.desc(),
    ContentRecord.id.asc(),
)


def apply_content_query(query: Query, params: ContentQuery) -> Query:
    """Compose filters, ordering and pagination onto a content query.

    Args:
        query: Base query selecting ContentRecord.
        params: Normalized query parameters.

    Returns:
        Query ready to execute.
    """
    if params.search:
        query = query.filter(
            or_(*(column.icontains(params.search, autoescape=True) for column in SEARCH_COLUMNS))
        )

    for column_name, value in params.equality_filters().items():
        query = query.filter(getattr(ContentRecord, column_name) == value)

    query = query.order_by(*ORDERING)

    if params.limit is not None:
        query = query.limit(params.limit)
        if params.offset:
            query = query.offset(params.offset)

    return query
