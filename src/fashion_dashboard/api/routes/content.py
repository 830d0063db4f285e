"""Content API endpoint.

GET /api/data - Search, filter and paginate content rows
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from fashion_dashboard.aggregation.summary import to_content_item
from fashion_dashboard.api.app import get_db_session
from fashion_dashboard.db import repo
from fashion_dashboard.db.repo import ContentStoreError, DbSession
from fashion_dashboard.models.domain import ALL_FILTER, MAX_PAGE_BOUND, ContentQuery
from fashion_dashboard.models.types import ContentItem

router = APIRouter()


def get_content_query(
    search: str = Query("", description="Case-insensitive substring search"),
    category: str = Query(ALL_FILTER),
    source: str = Query(ALL_FILTER),
    content_type: str = Query("", alias="contentType"),
    difficulty_level: str = Query("", alias="difficultyLevel"),
    limit: int | None = Query(None, ge=1, le=MAX_PAGE_BOUND),
    offset: int | None = Query(None, ge=0, le=MAX_PAGE_BOUND),
) -> ContentQuery:
    """Dependency parsing the shared search/filter query parameters.

    Non-integer or out-of-range limit/offset are rejected with 422 by
    FastAPI before this runs.
    """
    try:
        return ContentQuery.from_params(
            search=search,
            category=category,
            source=source,
            content_type=content_type,
            difficulty_level=difficulty_level,
            limit=limit,
            offset=offset,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.get("/data", response_model=list[ContentItem])
def get_content(
    params: ContentQuery = Depends(get_content_query),
    session: DbSession = Depends(get_db_session),
) -> list[ContentItem]:
    """Get content rows ordered by engagement then trending score.

    Args:
        params: Parsed search/filter/pagination parameters (injected).
        session: Database session (injected).

    Returns:
        Matching content rows; empty list when nothing matches.

    Raises:
        HTTPException: 500 if the database cannot be read.
    """
    try:
        records = repo.query_content(session, params)
    except ContentStoreError as e:
        raise HTTPException(status_code=500, detail="Failed to load data from database") from e

    return [to_content_item(record) for record in records]
