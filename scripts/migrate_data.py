#!/usr/bin/env python3
"""Replace the content table with the rows of an engagement CSV.

Usage:
    python scripts/migrate_data.py [csv_path]

csv_path defaults to FASHION_DASHBOARD_CSV_PATH
(default enhanced_fashion_data.csv). The schema is created if missing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from fashion_dashboard.core.config import Settings  # noqa: E402
from fashion_dashboard.db import repo  # noqa: E402
from fashion_dashboard.db.session import dispose_engines, get_session  # noqa: E402
from fashion_dashboard.ingest.csv_loader import migrate_csv  # noqa: E402


def print_sample(db_path: Path, count: int = 3) -> None:
    """Print the first rows in dashboard order."""
    session = get_session(db_path)
    try:
        total = repo.count_content(session)
        print(f"Total records in database: {total}")
        for entity in repo.get_all_content(session)[:count]:
            print(
                f"    {entity.category} | {entity.source} | "
                f"engagement={entity.engagement_score:.2f} trending={entity.trending_score:.2f}"
            )
    finally:
        session.close()


def main() -> int:
    """Main entry point."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_path", nargs="?", type=Path, default=settings.csv_path)
    args = parser.parse_args()

    print("=" * 60)
    print("Fashion Dashboard Data Migration")
    print("=" * 60)

    try:
        inserted = migrate_csv(args.csv_path, settings.db_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"FAIL: {e}")
        return 1
    except repo.ContentStoreError as e:
        print(f"FAIL: {e} ({e.__cause__})")
        return 1

    print(f"OK: Inserted {inserted} records")
    print_sample(settings.db_path)
    dispose_engines()

    print("=" * 60)
    print("Data migration complete!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
