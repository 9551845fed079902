"""
Core request rules: error taxonomy, payload validation, and pagination.

Nothing in this package touches the database.
"""

from movie_catalog.core.errors import (
    MovieCatalogError,
    ValidationError,
    NotFoundError,
    ConflictError,
)
from movie_catalog.core.validation import (
    validate_movie_create,
    validate_movie_update,
    reject_client_id,
)
from movie_catalog.core.pagination import (
    Page,
    PageParams,
    resolve_page_params,
    build_page_links,
    paginate,
)

__all__ = [
    "MovieCatalogError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "validate_movie_create",
    "validate_movie_update",
    "reject_client_id",
    "Page",
    "PageParams",
    "resolve_page_params",
    "build_page_links",
    "paginate",
]
