"""FastAPI application factory.

API layer:
- Validates query parameters, reads the content table
- Returns payloads for the dashboard UI
- Forbidden: writes to the content table
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from fashion_dashboard.core.config import Settings
from fashion_dashboard.db.repo import DbSession
from fashion_dashboard.db.session import get_session


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def create_app(db_path: Path | None = None, settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Overrides settings.db_path.
        settings: Optional settings. Defaults to Settings.from_env().

    Returns:
        Configured FastAPI application.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Fashion Dashboard API",
        description="Fashion content engagement dashboard",
        version="0.1.0",
    )
    app.state.db_path = Path(db_path) if db_path is not None else settings.db_path

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include routes
    from fashion_dashboard.api.routes import content, stats

    app.include_router(content.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
