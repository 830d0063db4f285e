"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fashion_dashboard.db.schema import ContentRecord
from fashion_dashboard.models.domain import ContentEntity, ContentQuery
from fashion_dashboard.query.composer import ORDERING, apply_content_query

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["ContentStoreError", "DbSession"]

logger = logging.getLogger(__name__)


class ContentStoreError(RuntimeError):
    """The backing store could not be read or written."""


# ============================================================================
# Converters: SQLAlchemy <-> Domain
# ============================================================================


def _record_to_entity(record: ContentRecord) -> ContentEntity:
    """Convert SQLAlchemy ContentRecord to domain entity."""
    return ContentEntity(
        id=record.id,
        category=record.category,
        url=record.url,
        source=record.source,
        time_spent_minutes=record.time_spent_minutes,
        upvotes=record.upvotes,
        views=record.views,
        engagement_score=record.engagement_score,
        content_type=record.content_type,
        difficulty_level=record.difficulty_level,
        trending_score=record.trending_score,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _entity_to_record(entity: ContentEntity) -> ContentRecord:
    # id and timestamps are assigned by the database
    return ContentRecord(
        category=entity.category,
        url=entity.url,
        source=entity.source,
        time_spent_minutes=entity.time_spent_minutes,
        upvotes=entity.upvotes,
        views=entity.views,
        engagement_score=entity.engagement_score,
        content_type=entity.content_type,
        difficulty_level=entity.difficulty_level,
        trending_score=entity.trending_score,
    )


# ============================================================================
# Content Repository (read side)
# ============================================================================


def query_content(session: DbSession, params: ContentQuery) -> list[ContentEntity]:
    """Get content rows matching the search/filter/pagination parameters.

    Raises:
        ContentStoreError: If the database query fails.
    """
    try:
        records = apply_content_query(session.query(ContentRecord), params).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching content: {e}")
        raise ContentStoreError("Failed to fetch content data") from e
    return [_record_to_entity(r) for r in records]


def get_all_content(session: DbSession) -> list[ContentEntity]:
    """Get every content row in dashboard order.

    Raises:
        ContentStoreError: If the database query fails.
    """
    try:
        records = session.query(ContentRecord).order_by(*ORDERING).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching all content: {e}")
        raise ContentStoreError("Failed to fetch content data") from e
    return [_record_to_entity(r) for r in records]


def get_categories(session: DbSession) -> list[str]:
    """Get distinct categories, sorted.

    Raises:
        ContentStoreError: If the database query fails.
    """
    try:
        rows = (
            session.query(ContentRecord.category)
            .distinct()
            .order_by(ContentRecord.category)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error fetching categories: {e}")
        raise ContentStoreError("Failed to fetch categories") from e
    return [row.category for row in rows]


def get_sources(session: DbSession) -> list[str]:
    """Get distinct sources, sorted.

    Raises:
        ContentStoreError: If the database query fails.
    """
    try:
        rows = session.query(ContentRecord.source).distinct().order_by(ContentRecord.source).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching sources: {e}")
        raise ContentStoreError("Failed to fetch sources") from e
    return [row.source for row in rows]


def count_content(session: DbSession) -> int:
    """Count all content rows.

    Raises:
        ContentStoreError: If the database query fails.
    """
    try:
        return session.query(ContentRecord).count()
    except SQLAlchemyError as e:
        logger.error(f"Error counting content: {e}")
        raise ContentStoreError("Failed to count content") from e


# ============================================================================
# Bulk Operations
# ============================================================================


def replace_all_content(session: DbSession, entities: Iterable[ContentEntity]) -> int:
    """Delete every content row and insert the given entities.

    Runs inside the caller's transaction; nothing is visible to readers
    until the caller commits.

    Returns:
        Number of rows inserted.

    Raises:
        ContentStoreError: If the delete or insert fails.
    """
    records = [_entity_to_record(entity) for entity in entities]
    try:
        deleted = session.query(ContentRecord).delete()
        session.add_all(records)
        session.flush()
    except SQLAlchemyError as e:
        logger.error(f"Error replacing content: {e}")
        raise ContentStoreError("Failed to replace content data") from e

    logger.info(f"Replaced {deleted} content rows with {len(records)} new rows")
    return len(records)
