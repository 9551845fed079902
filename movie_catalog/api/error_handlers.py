"""
Global exception handlers.

Every handled error is returned as ``{"message": "<text>"}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, StatementError

from movie_catalog.core.errors import MovieCatalogError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_request_validation_error_handler(app)
    _register_integrity_error_handler(app)
    _register_statement_error_handler(app)
    _register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MovieCatalogError)
    async def catalog_error_handler(request: Request, exc: MovieCatalogError):
        logger.warning(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}"
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_request_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """A path id that is not an integer names no movie: 404. Anything else: 400."""
        errors = exc.errors()
        bad_path = [e for e in errors if e["loc"] and e["loc"][0] == "path"]
        if bad_path:
            value = request.path_params.get(str(bad_path[0]["loc"][-1]))
            status_code = status.HTTP_404_NOT_FOUND
            message = f"Movie with ID {value} not found."
        else:
            status_code = status.HTTP_400_BAD_REQUEST
            message = "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in errors
            )
        logger.warning(f"Request validation error on {request.url.path}: {errors}")
        return JSONResponse(status_code=status_code, content={"message": message})


def _register_integrity_error_handler(app: FastAPI) -> None:

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        """Unique constraint hit after the duplicate-name check passed."""
        logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"message": "Movie with this name already exists."},
        )


def _register_statement_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StatementError)
    async def statement_error_handler(request: Request, exc: StatementError):
        """Store rejected a value; report the driver error without the SQL."""
        logger.error(
            f"Statement error on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc.orig)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)},
        )
