"""
Database connection management using SQLAlchemy.

This module handles engine creation and session management for the movie
catalog. A ``DatabaseManager`` is constructed explicitly by the application
at startup and handed to request handlers through dependency injection.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movie_catalog.database.models import Base

logger = logging.getLogger(__name__)


# Default database path
DEFAULT_DB_PATH = "data/movies.db"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL for a file path.
    
    Args:
        db_path: Path to SQLite database file
        
    Returns:
        SQLAlchemy database URL
    """
    # Ensure directory exists
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    
    abs_path = os.path.abspath(db_path)
    return f"sqlite:///{abs_path}"


def _engine_options(database_url: str) -> dict:
    """Engine keyword arguments appropriate for the target backend."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # Keep a single shared connection so the in-memory schema survives
        options["poolclass"] = StaticPool
    return options


class DatabaseManager:
    """
    Database connection manager.
    
    Owns the engine and the session factory for one database.
    """
    
    def __init__(self, database_url: str, echo: bool = False):
        """
        Initialize database manager.
        
        Args:
            database_url: SQLAlchemy database URL
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.database_url = database_url
        self.engine = create_engine(
            database_url,
            echo=echo,
            **_engine_options(database_url)
        )
        
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
    
    def connect(self):
        """
        Open a connection and make sure the schema exists.
        
        Raises whatever the driver raises when the database is unreachable,
        so a misconfigured application fails at startup rather than on the
        first request.
        """
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        self.create_tables()
        logger.info("Database connected")
    
    def create_tables(self):
        """
        Create all tables defined in the models.
        
        This creates tables if they don't exist. Existing tables are not modified.
        """
        Base.metadata.create_all(bind=self.engine)
    
    def drop_tables(self):
        """
        Drop all tables defined in the models.
        
        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)
    
    def reset_database(self):
        """
        Drop and recreate all tables.
        
        WARNING: This will delete all data in the database!
        """
        self.drop_tables()
        self.create_tables()
    
    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.
        
        Rolls back on failure and always closes the session. CRUD
        functions commit their own statements.
        
        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
    
    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()
