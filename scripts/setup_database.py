#!/usr/bin/env python3
"""Create the dashboard database and its content table.

Usage:
    python scripts/setup_database.py

The database location comes from FASHION_DASHBOARD_DB_PATH
(default data/fashion_dashboard.db). Safe to run repeatedly.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from fashion_dashboard.core.config import Settings  # noqa: E402
from fashion_dashboard.db.schema import Base  # noqa: E402
from fashion_dashboard.db.session import init_db  # noqa: E402


def main() -> int:
    """Main entry point."""
    settings = Settings.from_env()

    print("=" * 60)
    print("Fashion Dashboard Database Setup")
    print("=" * 60)

    try:
        init_db(settings.db_path)
    except Exception as e:
        print(f"FAIL: Could not set up database: {e}")
        return 1

    print(f"OK: Created tables: {', '.join(Base.metadata.tables)}")
    print(f"OK: Database location: {settings.db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
