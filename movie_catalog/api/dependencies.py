"""
FastAPI dependencies: database session, request payload, and the
pre-condition checks that run before a movie handler.
"""

import logging
from typing import Any, Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from movie_catalog.core.errors import ConflictError, NotFoundError, ValidationError
from movie_catalog.database import crud
from movie_catalog.database.connection import DatabaseManager
from movie_catalog.database.models import Movie

logger = logging.getLogger(__name__)


def get_db_manager(request: Request) -> DatabaseManager:
    """Return the DatabaseManager opened at application startup."""
    return request.app.state.db_manager


def get_db(
    db_manager: DatabaseManager = Depends(get_db_manager),
) -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    with db_manager.session_scope() as session:
        yield session


async def get_payload(request: Request) -> Any:
    """Decode the JSON request body without imposing a schema on it."""
    try:
        return await request.json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON")


def ensure_movie_exists(movie_id: int, db: Session = Depends(get_db)) -> Movie:
    """Pre-condition: 404 unless a movie with this id exists."""
    movie = crud.get_movie(db, movie_id)
    if movie is None:
        raise NotFoundError.for_movie(movie_id)
    return movie


def ensure_unique_name(
    payload: Any = Depends(get_payload),
    db: Session = Depends(get_db),
) -> None:
    """Pre-condition: 409 if the payload's name is already taken."""
    name = payload.get("name") if isinstance(payload, dict) else None
    if not isinstance(name, str):
        return
    if crud.get_movie_by_name(db, name) is not None:
        raise ConflictError.for_name(name)
