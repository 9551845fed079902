"""
Database module for the movie catalog.

This module provides the Movie model, connection management, and CRUD
operations using SQLAlchemy.
"""

from movie_catalog.database.models import Base, Movie
from movie_catalog.database.connection import DatabaseManager, get_database_url
from movie_catalog.database.init_db import init_database, verify_schema
from movie_catalog.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_database_url',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
