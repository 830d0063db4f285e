"""Environment-driven settings.

All knobs are read from FASHION_DASHBOARD_* environment variables so the
API, the maintenance scripts and the tests agree on where the store lives.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "FASHION_DASHBOARD_"

DEFAULT_DB_PATH = Path("data/fashion_dashboard.db")
DEFAULT_CSV_PATH = Path("enhanced_fashion_data.csv")
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",  # Next.js dev server
    "http://127.0.0.1:3000",
)


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the dashboard backend."""

    db_path: Path = DEFAULT_DB_PATH
    csv_path: Path = DEFAULT_CSV_PATH
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the process environment.

        Unset variables fall back to the dataclass defaults.

        Raises:
            ValueError: If FASHION_DASHBOARD_PORT is not an integer.
        """
        env = os.environ
        origins = env.get(f"{ENV_PREFIX}CORS_ORIGINS")
        port = env.get(f"{ENV_PREFIX}PORT")

        return cls(
            db_path=Path(env.get(f"{ENV_PREFIX}DB_PATH", str(DEFAULT_DB_PATH))),
            csv_path=Path(env.get(f"{ENV_PREFIX}CSV_PATH", str(DEFAULT_CSV_PATH))),
            cors_origins=_split_origins(origins) if origins else DEFAULT_CORS_ORIGINS,
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            host=env.get(f"{ENV_PREFIX}HOST", "127.0.0.1"),
            port=int(port) if port else 8000,
        )
