"""
Error hierarchy for the movie catalog.

Each error carries the HTTP status it maps to; the API layer turns any
MovieCatalogError into a ``{"message": ...}`` response with that status.
"""

from fastapi import status


class MovieCatalogError(Exception):
    """Base class for errors that map onto a client-facing response."""

    http_status: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"message": self.message}


class ValidationError(MovieCatalogError):
    """Malformed or forbidden payload shape or type."""

    http_status = status.HTTP_400_BAD_REQUEST


class NotFoundError(MovieCatalogError):
    """No movie with the requested id."""

    http_status = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_movie(cls, movie_id: int) -> "NotFoundError":
        return cls(f"Movie with ID {movie_id} not found.")


class ConflictError(MovieCatalogError):
    """A movie with the requested name already exists."""

    http_status = status.HTTP_409_CONFLICT

    @classmethod
    def for_name(cls, name) -> "ConflictError":
        return cls(f"Movie with name {name} already exists.")
