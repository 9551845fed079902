"""
Pydantic schemas for Movie API.

Request bodies are validated structurally in movie_catalog.core.validation,
so only responses are modelled here.
"""

from pydantic import BaseModel, Field, field_validator


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    name: str | None
    description: str | None = None
    duration: float | None
    price: float | None

    class Config:
        from_attributes = True

    @field_validator("name", "description", mode="before")
    @classmethod
    def text_column(cls, value):
        # Falsy values skip type checks on write; read them back as text
        if value is None or isinstance(value, str):
            return value
        return str(value)


class MovieList(BaseModel):
    """Response model for one page of movies with navigation links."""

    prev_page: str | None = Field(None, serialization_alias="prevPage")
    next_page: str | None = Field(None, serialization_alias="nextPage")
    count: int
    data: list[MovieResponse]
