"""
Movie API endpoints.

Each handler runs its pre-conditions (declared as route dependencies), then
validates the body, issues one statement and shapes the response.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from movie_catalog.api.dependencies import (
    ensure_movie_exists,
    ensure_unique_name,
    get_db,
    get_payload,
)
from movie_catalog.api.models.movie import MovieResponse, MovieList
from movie_catalog.core.errors import NotFoundError
from movie_catalog.core.pagination import paginate
from movie_catalog.core.validation import (
    reject_client_id,
    validate_movie_create,
    validate_movie_update,
)
from movie_catalog.database import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_unique_name)],
)
def create_movie(payload: Any = Depends(get_payload), db: Session = Depends(get_db)):
    """Create a movie from name, duration, price and optional description."""
    fields = validate_movie_create(payload)
    reject_client_id(fields, "You can't choose an ID.")
    movie = crud.create_movie(db, fields)
    logger.info(f"Created movie {movie.id}")
    return movie


@router.get("", response_model=MovieList)
def list_movies(
    request: Request,
    page: str | None = Query(None),
    per_page: str | None = Query(None, alias="perPage"),
    sort: str | None = Query(None),
    order: str | None = Query(None),
    db: Session = Depends(get_db),
):
    """List movies one page at a time, optionally sorted by price or duration."""
    total = crud.get_movie_count(db)
    window = paginate(
        page,
        per_page,
        total,
        sort=sort,
        order=order,
        base_url=str(request.url_for("list_movies")),
    )
    movies = crud.get_movies(
        db,
        offset=window.offset,
        limit=window.limit,
        sort=window.sort,
        order=window.order,
    )
    return MovieList(
        prev_page=window.prev_page,
        next_page=window.next_page,
        count=len(movies),
        data=[MovieResponse.model_validate(m) for m in movies],
    )


@router.patch(
    "/{movie_id}",
    response_model=MovieResponse,
    dependencies=[Depends(ensure_movie_exists), Depends(ensure_unique_name)],
)
def update_movie(
    movie_id: int,
    payload: Any = Depends(get_payload),
    db: Session = Depends(get_db),
):
    """Update only the supplied fields of a movie."""
    fields = validate_movie_update(payload)
    reject_client_id(fields, "ID can't be changed")
    movie = crud.update_movie(db, movie_id, fields)
    if movie is None:
        raise NotFoundError.for_movie(movie_id)
    logger.info(f"Updated movie {movie_id}: {', '.join(fields) or 'no changes'}")
    return movie


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(ensure_movie_exists)],
)
def delete_movie(movie_id: int, db: Session = Depends(get_db)):
    """Delete a movie."""
    if not crud.delete_movie(db, movie_id):
        raise NotFoundError.for_movie(movie_id)
    logger.info(f"Deleted movie {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
