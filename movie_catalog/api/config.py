"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path
from typing import Optional

from movie_catalog.database.connection import get_database_url


def get_database_url_setting() -> str:
    """Get SQLAlchemy database URL from env or default SQLite file."""
    return os.getenv("DATABASE_URL", "") or get_database_url(
        str(Path(__file__).resolve().parents[2] / "data" / "movies.db")
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env, or None for console-only logging."""
    return os.getenv("LOG_FILE") or None


def get_sql_echo() -> bool:
    """Whether SQLAlchemy should echo every statement."""
    return os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "3000"))
