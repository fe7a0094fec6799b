"""
Global exception handlers for the movie API.

Every error response is ``{"message": ...}`` with a status chosen from
ERROR_RESPONSES, which has one entry per ErrorKind.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cinecritic.database.errors import ErrorKind, MovieStoreError

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION: (
        status.HTTP_400_BAD_REQUEST,
        "Validation failed: Invalid rating or year.",
    ),
    ErrorKind.DUPLICATE_TITLE: (
        status.HTTP_400_BAD_REQUEST,
        "Duplicate title not allowed.",
    ),
    ErrorKind.INVALID_ID: (status.HTTP_400_BAD_REQUEST, "Invalid ID format"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Movie not found"),
    ErrorKind.INTERNAL: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
    ),
}


def error_response(kind: ErrorKind) -> JSONResponse:
    """Build the JSON response for an error kind."""
    status_code, message = ERROR_RESPONSES[kind]
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(MovieStoreError)
    async def movie_store_error_handler(request: Request, exc: MovieStoreError):
        logger.warning(
            "%s %s failed: %s", request.method, request.url.path, exc,
        )
        return error_response(exc.kind)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            "Validation error on %s: %s", request.url.path, exc.errors(),
        )
        return error_response(ErrorKind.VALIDATION)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            exc_info=True,
        )
        return error_response(ErrorKind.INTERNAL)
