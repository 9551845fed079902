"""
Database initialization and schema creation.
"""

import logging

from sqlalchemy import inspect

from movie_catalog.database.connection import DatabaseManager

logger = logging.getLogger(__name__)


def init_database(database_url: str, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.
    
    Args:
        database_url: SQLAlchemy database URL
        reset: If True, drop existing tables before creating new ones
        
    Returns:
        DatabaseManager instance
    """
    db_manager = DatabaseManager(database_url)
    
    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
        logger.info("Database reset complete.")
    else:
        logger.info("Creating database tables...")
        db_manager.create_tables()
        logger.info("Database tables created.")
    
    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that the movies table exists with the expected columns.
    
    Args:
        db_manager: DatabaseManager instance
        
    Returns:
        True if the schema is complete, False otherwise
    """
    inspector = inspect(db_manager.engine)
    
    if 'movies' not in inspector.get_table_names():
        logger.error("Missing table: movies")
        return False
    
    columns = {column['name'] for column in inspector.get_columns('movies')}
    missing_columns = {'id', 'name', 'description', 'duration', 'price'} - columns
    if missing_columns:
        logger.error(f"Missing columns on movies: {missing_columns}")
        return False
    
    logger.info(f"Schema verified: movies({', '.join(sorted(columns))})")
    return True
