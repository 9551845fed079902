"""
CRUD operations for the Movie model.

Every function issues a single parameterized statement through the given
session. Column names are never taken from the caller verbatim: writes are
restricted to ``MOVIE_FIELDS`` and ordering to ``SORTABLE_COLUMNS``.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import Session

from movie_catalog.database.models import Movie


MOVIE_FIELDS = ("name", "description", "duration", "price")

SORTABLE_COLUMNS = {
    "price": Movie.price,
    "duration": Movie.duration,
}


def _movie_values(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Restrict a payload to writable movie columns.
    
    Raises:
        ValueError: If the payload names a column that is not writable
    """
    unknown = [key for key in fields if key not in MOVIE_FIELDS]
    if unknown:
        raise ValueError(f"Unknown movie column(s): {', '.join(unknown)}")
    return dict(fields)


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(session: Session, fields: Mapping[str, Any]) -> Movie:
    """
    Insert a new movie.
    
    Args:
        session: Database session
        fields: Validated movie fields (name, duration, price, description)
        
    Returns:
        Inserted Movie object, including its store-assigned id
    """
    stmt = insert(Movie).values(**_movie_values(fields)).returning(Movie)
    movie = session.scalars(stmt).one()
    session.commit()
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.
    
    Args:
        session: Database session
        movie_id: Movie ID
        
    Returns:
        Movie object or None if not found
    """
    return session.scalars(select(Movie).where(Movie.id == movie_id)).first()


def get_movie_by_name(session: Session, name: Any) -> Optional[Movie]:
    """Get a movie by exact name, or None."""
    if name is None:
        return None
    return session.scalars(select(Movie).where(Movie.name == name)).first()


def get_movies(
    session: Session,
    offset: int = 0,
    limit: int = 5,
    sort: Optional[str] = None,
    order: str = "ASC"
) -> List[Movie]:
    """
    Get one page of movies.
    
    Args:
        session: Database session
        offset: Number of records to skip
        limit: Maximum number of records to return
        sort: Column to order by, one of SORTABLE_COLUMNS, or None for
            insertion order
        order: "ASC" or "DESC"; only used together with sort
        
    Returns:
        List of Movie objects
    """
    stmt = select(Movie)
    column = SORTABLE_COLUMNS.get(sort) if sort else None
    if column is not None:
        stmt = stmt.order_by(column.desc() if order == "DESC" else column.asc())
    stmt = stmt.order_by(Movie.id)
    return list(session.scalars(stmt.offset(offset).limit(limit)).all())


def get_movie_count(session: Session) -> int:
    """
    Get total count of movies.
    
    Args:
        session: Database session
        
    Returns:
        Total number of movies
    """
    return session.scalar(select(func.count(Movie.id)))


def update_movie(
    session: Session,
    movie_id: int,
    fields: Mapping[str, Any]
) -> Optional[Movie]:
    """
    Update only the supplied columns of a movie.
    
    Args:
        session: Database session
        movie_id: Movie ID
        fields: Columns to change; anything not listed is left untouched
        
    Returns:
        Updated Movie object or None if no row has this id. An empty
        ``fields`` mapping returns the current row unchanged.
    """
    values = _movie_values(fields)
    if not values:
        return get_movie(session, movie_id)
    
    stmt = (
        update(Movie)
        .where(Movie.id == movie_id)
        .values(**values)
        .returning(Movie)
        .execution_options(synchronize_session="fetch", populate_existing=True)
    )
    movie = session.scalars(stmt).first()
    session.commit()
    return movie


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie.
    
    Args:
        session: Database session
        movie_id: Movie ID
        
    Returns:
        True if a row was deleted, False if not found
    """
    result = session.execute(delete(Movie).where(Movie.id == movie_id))
    session.commit()
    return result.rowcount > 0
