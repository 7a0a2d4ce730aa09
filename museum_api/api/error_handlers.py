"""Error Handlers: global exception handlers for the museum API.

Invariants:
    - MuseumError -> structured JSON with error code, message, severity
    - RequestValidationError (bad JSON, missing fields) -> 400 with field details
    - Router HTTPException (405 wrong method, 404 unknown path) -> same envelope
    - Exception (catch-all) -> 500, never leaks internal details; route
      failures already arrive as InternalError (see api/routes/__init__.py)

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Registered from main.py via register_error_handlers()
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from museum_api.api.responses import UTF8JSONResponse
from museum_api.core.errors import (
    ErrorContext, ErrorSeverity, MethodNotAllowedError, MuseumError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_museum_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_museum_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MuseumError)
    async def museum_error_handler(request: Request, exc: MuseumError):
        """Handle all museum domain/store errors."""
        exc.context.path = exc.context.path or request.url.path
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"MuseumError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return UTF8JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return UTF8JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for errors raised by the router itself."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        context = ErrorContext(path=request.url.path)
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            allowed = (exc.headers or {}).get("Allow", "")
            error = MethodNotAllowedError(
                request.method,
                [m.strip() for m in allowed.split(",") if m.strip()],
                context,
            )
            return UTF8JSONResponse(
                status_code=error.http_status,
                content=error.to_response(),
                headers=exc.headers,
            )
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            error = ResourceNotFoundError("Route", request.url.path, context)
            return UTF8JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return UTF8JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": "HTTP_ERROR",
                    "message": str(exc.detail),
                    "category": "internal",
                    "severity": ErrorSeverity.ERROR.value,
                },
            },
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return UTF8JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
