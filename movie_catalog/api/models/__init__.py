"""
Pydantic schemas for API responses.
"""

from movie_catalog.api.models.movie import MovieResponse, MovieList

__all__ = [
    "MovieResponse",
    "MovieList",
]
