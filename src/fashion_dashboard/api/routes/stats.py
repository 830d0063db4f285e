"""Statistics API endpoints.

GET /api/stats - Totals plus distinct categories and sources
GET /api/stats/breakdown - Chart figures for a filtered result set
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from fashion_dashboard.aggregation.summary import summarize_breakdown, summarize_content
from fashion_dashboard.api.app import get_db_session
from fashion_dashboard.api.routes.content import get_content_query
from fashion_dashboard.db.repo import ContentStoreError, DbSession
from fashion_dashboard.models.domain import ContentQuery
from fashion_dashboard.models.types import ContentBreakdown, StatsResponse

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
def get_stats(session: DbSession = Depends(get_db_session)) -> StatsResponse:
    """Get statistics over the whole content table.

    Raises:
        HTTPException: 500 if the database cannot be read.
    """
    try:
        return summarize_content(session)
    except ContentStoreError as e:
        raise HTTPException(status_code=500, detail="Failed to load statistics") from e


@router.get("/stats/breakdown", response_model=ContentBreakdown)
def get_breakdown(
    params: ContentQuery = Depends(get_content_query),
    session: DbSession = Depends(get_db_session),
) -> ContentBreakdown:
    """Get per-category, per-source and top-10 figures for filtered rows.

    Takes the same query parameters as GET /api/data.

    Raises:
        HTTPException: 500 if the database cannot be read.
    """
    try:
        return summarize_breakdown(session, params)
    except ContentStoreError as e:
        raise HTTPException(status_code=500, detail="Failed to load statistics") from e
