"""
FastAPI application entry point for the Movie Catalog API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from movie_catalog import __version__
from movie_catalog.api.config import get_database_url_setting, get_sql_echo
from movie_catalog.api.error_handlers import register_error_handlers
from movie_catalog.api.routers import movies, system
from movie_catalog.database.connection import DatabaseManager

logger = logging.getLogger(__name__)


def create_app(db_manager: Optional[DatabaseManager] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        db_manager: Store client to serve requests from. When omitted one is
            built from DATABASE_URL at startup.

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        manager = db_manager or DatabaseManager(
            get_database_url_setting(), echo=get_sql_echo()
        )
        # Fails startup when the database is unreachable
        manager.connect()
        app.state.db_manager = manager
        try:
            yield
        finally:
            manager.close()

    app = FastAPI(
        title="Movie Catalog API",
        description="CRUD API for a catalog of movies with paginated listing",
        version=__version__,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    app.include_router(movies.router)
    app.include_router(system.router)

    return app


app = create_app()
