#!/usr/bin/env python3
"""Run the dashboard API with uvicorn.

Usage:
    python scripts/serve.py

Host, port, database and log level come from FASHION_DASHBOARD_* variables.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import uvicorn  # noqa: E402

from fashion_dashboard.api.app import create_app  # noqa: E402
from fashion_dashboard.core.config import Settings  # noqa: E402

logger = logging.getLogger("fashion_dashboard.serve")


def main() -> int:
    """Main entry point."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not settings.db_path.exists():
        logger.warning(f"Database not found at {settings.db_path}; requests will fail until it is migrated")

    logger.info(f"Starting API server on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
