"""Content metrics aggregation.

Computes dashboard totals over the full table and the per-category /
per-source breakdown shown next to a filtered result set.
Domain logic is pure - database operations go through repo.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

from fashion_dashboard.db import repo
from fashion_dashboard.db.repo import DbSession
from fashion_dashboard.models.domain import ContentEntity, ContentQuery
from fashion_dashboard.models.types import (
    CategoryStat,
    ContentBreakdown,
    ContentItem,
    ContentStats,
    SourceShare,
    StatsResponse,
)

# Length of the "top content" lists
TOP_N = 10


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def to_content_item(entity: ContentEntity) -> ContentItem:
    """Convert a domain entity to its API payload."""
    return ContentItem(**asdict(entity))


def compute_content_stats(records: Sequence[ContentEntity]) -> ContentStats:
    """Compute totals over a record set.

    Pure function - no database access. An empty record set yields zeros.

    Args:
        records: Content rows to aggregate.

    Returns:
        ContentStats with count, mean time spent (2 decimals), and sums.
    """
    return ContentStats(
        total_content=len(records),
        avg_time_spent=round(_mean([r.time_spent_minutes for r in records]), 2),
        total_upvotes=sum(r.upvotes for r in records),
        total_views=sum(r.views for r in records),
    )


def summarize_content(session: DbSession) -> StatsResponse:
    """Compute dashboard statistics over the whole content table.

    Args:
        session: Database session.

    Returns:
        StatsResponse with totals and the distinct category/source lists.
    """
    records = repo.get_all_content(session)

    return StatsResponse(
        stats=compute_content_stats(records),
        categories=sorted({r.category for r in records}),
        sources=sorted({r.source for r in records}),
    )


def compute_breakdown(
    records: Sequence[ContentEntity],
    categories: Sequence[str],
    sources: Sequence[str],
) -> ContentBreakdown:
    """Compute chart figures for a (filtered) record set.

    Pure function - no database access. Every category and source in the
    given lists appears in the output, zero-filled when no record matches.

    Args:
        records: Filtered content rows, in dashboard order.
        categories: All known categories.
        sources: All known sources.

    Returns:
        ContentBreakdown with totals, per-category and per-source figures,
        and the top records by time spent and by upvotes.
    """
    by_category: dict[str, list[ContentEntity]] = {category: [] for category in categories}
    by_source: dict[str, int] = {source: 0 for source in sources}
    for record in records:
        if record.category in by_category:
            by_category[record.category].append(record)
        if record.source in by_source:
            by_source[record.source] += 1

    category_stats = [
        CategoryStat(
            category=category,
            count=len(rows),
            avg_time_spent=_mean([r.time_spent_minutes for r in rows]),
            total_upvotes=sum(r.upvotes for r in rows),
            total_views=sum(r.views for r in rows),
            avg_engagement=_mean([r.engagement_score for r in rows]),
        )
        for category, rows in by_category.items()
    ]

    total = len(records)
    source_distribution = [
        SourceShare(
            source=source,
            count=count,
            percentage=(count / total) * 100 if total > 0 else 0.0,
        )
        for source, count in by_source.items()
    ]

    # sorted() is stable, so ties keep the incoming dashboard order
    top_by_time_spent = sorted(records, key=lambda r: r.time_spent_minutes, reverse=True)[:TOP_N]
    top_by_upvotes = sorted(records, key=lambda r: r.upvotes, reverse=True)[:TOP_N]

    return ContentBreakdown(
        totals=compute_content_stats(records),
        category_stats=category_stats,
        source_distribution=source_distribution,
        top_by_time_spent=[to_content_item(r) for r in top_by_time_spent],
        top_by_upvotes=[to_content_item(r) for r in top_by_upvotes],
    )


def summarize_breakdown(session: DbSession, params: ContentQuery) -> ContentBreakdown:
    """Compute the chart breakdown for the rows matching the given filters.

    Pagination in params is honored, so callers normally pass a query
    without limit/offset.

    Args:
        session: Database session.
        params: Search/filter parameters.

    Returns:
        ContentBreakdown for the matching rows.
    """
    records = repo.query_content(session, params)
    categories = repo.get_categories(session)
    sources = repo.get_sources(session)
    return compute_breakdown(records, categories, sources)
