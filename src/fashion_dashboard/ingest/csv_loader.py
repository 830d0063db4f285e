"""Bulk import of content engagement CSVs.

Parses the exported CSV with pandas, cleans it into ContentEntity rows,
and replaces the whole content table in one transaction.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from fashion_dashboard.db import repo
from fashion_dashboard.db.session import get_db_session, init_db
from fashion_dashboard.models.domain import ContentEntity

logger = logging.getLogger(__name__)

# Lower-cased CSV headers, identical to the entity field names
REQUIRED_COLUMNS = (
    "category",
    "url",
    "source",
    "time_spent_minutes",
    "upvotes",
    "views",
    "engagement_score",
    "content_type",
    "difficulty_level",
    "trending_score",
)

TEXT_COLUMNS = ["category", "url", "source", "content_type", "difficulty_level"]
INT_COLUMNS = ["upvotes", "views"]
FLOAT_COLUMNS = ["time_spent_minutes"]
SCORE_COLUMNS = ["engagement_score", "trending_score"]

# Upper bound for upvotes/views; a float that converts exactly to int64
MAX_COUNT = 2**62


def read_content_frame(csv_path: Path) -> pd.DataFrame:
    """Load the CSV and normalize its column names.

    Headers are matched case-insensitively (e.g. "Time_Spent_Minutes").
    Columns outside REQUIRED_COLUMNS are dropped.

    Raises:
        FileNotFoundError: If the CSV does not exist.
        ValueError: If required columns are missing.
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, skipinitialspace=True)
    cols = {c.strip().lower(): c for c in df.columns}
    missing = [name for name in REQUIRED_COLUMNS if name not in cols]
    if missing:
        raise ValueError(f"CSV is missing required columns: {missing}. Found: {list(df.columns)}")

    return df[[cols[name] for name in REQUIRED_COLUMNS]].rename(
        columns={cols[name]: name for name in REQUIRED_COLUMNS}
    )


def clean_content_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce types and drop unusable rows.

    - text fields are stripped; rows without category or url are dropped
    - unparseable or infinite numbers become 0, negatives are clipped to 0
    - upvotes/views are capped at MAX_COUNT
    - engagement/trending scores are clipped to [0, 1]
    """
    out = df.copy()
    for col in TEXT_COLUMNS:
        out[col] = out[col].fillna("").astype(str).str.strip()

    keep = (out["category"] != "") & (out["url"] != "")
    dropped = int((~keep).sum())
    if dropped:
        logger.warning(f"Skipping {dropped} CSV rows without category or url")
    out = out.loc[keep].copy()

    for col in INT_COLUMNS + FLOAT_COLUMNS + SCORE_COLUMNS:
        values = pd.to_numeric(out[col], errors="coerce").astype(float)
        out[col] = values.replace([np.inf, -np.inf], np.nan).fillna(0).clip(lower=0)
    for col in SCORE_COLUMNS:
        out[col] = out[col].clip(upper=1)
    for col in INT_COLUMNS:
        out[col] = out[col].clip(upper=MAX_COUNT).astype("int64")

    return out.reset_index(drop=True)


def load_content_csv(csv_path: Path) -> list[ContentEntity]:
    """Parse a content CSV into domain entities.

    Args:
        csv_path: Path to the exported engagement CSV.

    Returns:
        Cleaned ContentEntity rows in file order.
    """
    df = clean_content_frame(read_content_frame(csv_path))
    entities = [
        ContentEntity(
            category=row["category"],
            url=row["url"],
            source=row["source"],
            time_spent_minutes=float(row["time_spent_minutes"]),
            upvotes=int(row["upvotes"]),
            views=int(row["views"]),
            engagement_score=float(row["engagement_score"]),
            content_type=row["content_type"],
            difficulty_level=row["difficulty_level"],
            trending_score=float(row["trending_score"]),
        )
        for row in df.to_dict(orient="records")
    ]
    logger.info(f"Parsed {len(entities)} records from {csv_path}")
    return entities


def migrate_csv(csv_path: Path, db_path: Path | None = None) -> int:
    """Replace the content table with the rows of a CSV file.

    Creates the schema if needed. The delete and inserts share one
    transaction, so a failed import leaves the previous rows in place.

    Args:
        csv_path: Path to the exported engagement CSV.
        db_path: SQLite database path. Defaults to the configured one.

    Returns:
        Number of rows now in the table.
    """
    entities = load_content_csv(csv_path)

    init_db(db_path)
    with get_db_session(db_path) as session:
        inserted = repo.replace_all_content(session, entities)

    logger.info(f"Loaded {inserted} content rows from {csv_path}")
    return inserted
