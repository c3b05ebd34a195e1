"""Error Handlers — global exception handlers for the session-titles API.

Invariants:
    - SessionTitlesError → structured JSON with error code, message, severity
    - Domain errors logged at WARNING with chat_id / schedule_id from ErrorContext
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (SessionTitlesError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so the app module stays a thin wiring file
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from session_titles.core.errors import SessionTitlesError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SessionTitlesError)
    async def domain_error_handler(request: Request, exc: SessionTitlesError):
        """Handle all session-titles domain errors."""
        logger.warning(
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra=_log_extra(exc, request),
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _log_extra(exc: SessionTitlesError, request: Request) -> dict:
    """Log fields for a domain error; chat/schedule ids only when the error carries them."""
    extra = {"error_code": exc.code, "path": request.url.path}
    if exc.context.chat_id is not None:
        extra["chat_id"] = exc.context.chat_id
    if exc.context.schedule_id is not None:
        extra["schedule_id"] = exc.context.schedule_id
    return extra


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
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
