#!/usr/bin/env python3
"""Smoke test for a migrated dashboard database.

Validates that the content table was loaded and that filtered queries
and statistics behave on the real data.

Usage:
    python scripts/smoke_check.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from fashion_dashboard.aggregation.summary import summarize_content  # noqa: E402
from fashion_dashboard.core.config import Settings  # noqa: E402
from fashion_dashboard.db import repo  # noqa: E402
from fashion_dashboard.db.session import get_session  # noqa: E402
from fashion_dashboard.models.domain import ContentQuery  # noqa: E402


def check_database_exists(db_path: Path) -> bool:
    """Check that the database file exists."""
    if not db_path.exists():
        print(f"FAIL: Database not found: {db_path}")
        return False
    print(f"OK: Database exists: {db_path}")
    return True


def check_has_records(session) -> bool:
    """Check that the content table is not empty."""
    total = repo.count_content(session)
    if total == 0:
        print("FAIL: Content table is empty")
        return False
    print(f"OK: {total} content records")
    return True


def check_ordering(session) -> bool:
    """Check that results come back by engagement then trending score."""
    records = repo.query_content(session, ContentQuery())
    keys = [(r.engagement_score, r.trending_score) for r in records]
    if keys != sorted(keys, reverse=True):
        print("FAIL: Records not ordered by engagement/trending score")
        return False
    print("OK: Records ordered by engagement, then trending score")
    return True


def check_filters(session) -> bool:
    """Check every source filter returns only rows from that source."""
    for source in repo.get_sources(session):
        records = repo.query_content(session, ContentQuery.from_params(source=source))
        if not records or any(r.source != source for r in records):
            print(f"FAIL: Source filter broken for {source!r}")
            return False
    print("OK: Source filters return matching rows only")

    limited = repo.query_content(session, ContentQuery.from_params(limit=5))
    if len(limited) > 5:
        print(f"FAIL: limit=5 returned {len(limited)} rows")
        return False
    print(f"OK: limit=5 returned {len(limited)} rows")
    return True


def check_stats(session) -> bool:
    """Check statistics agree with the row count."""
    stats = summarize_content(session)
    total = repo.count_content(session)
    if stats.stats.total_content != total:
        print(f"FAIL: Stats count {stats.stats.total_content} != {total}")
        return False
    print(f"OK: Stats cover {total} rows, {len(stats.categories)} categories")
    print(f"    Sources: {', '.join(stats.sources)}")
    return True


def main() -> int:
    """Run all checks."""
    settings = Settings.from_env()

    print("=" * 60)
    print("Fashion Dashboard Smoke Check")
    print("=" * 60)

    if not check_database_exists(settings.db_path):
        print("Run 'python scripts/migrate_data.py' first!")
        return 1

    checks = [check_has_records, check_ordering, check_filters, check_stats]
    checks_failed = 0

    session = get_session(settings.db_path)
    try:
        for index, check in enumerate(checks, start=1):
            print(f"\n[{index}/{len(checks)}] {check.__doc__}")
            try:
                passed = check(session)
            except repo.ContentStoreError as e:
                print(f"FAIL: {e}")
                passed = False
            if not passed:
                checks_failed += 1
    finally:
        session.close()

    print("\n" + "=" * 60)
    if checks_failed == 0:
        print(f"RESULT: ALL PASSED ({len(checks)} checks)")
        print("=" * 60)
        return 0
    print(f"RESULT: {len(checks) - checks_failed} passed, {checks_failed} failed")
    print("=" * 60)
    return 1


if __name__ == "__main__":
    sys.exit(main())
