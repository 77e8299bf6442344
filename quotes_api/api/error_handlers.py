"""Error Handlers — global exception handlers for the Quotes API.

Invariants:
    - QuotesError → its http_status + structured JSON envelope (logged once, here)
    - RequestValidationError → 400 INVALID_REQUEST_BODY
    - Exception (catch-all, e.g. response encoding) → 500, never leaks internal details

Design Decisions:
    - Malformed bodies are 400, not FastAPI's default 422: clients treat any
      undecodable body as a bad request
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from quotes_api.core.errors import QuotesError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(QuotesError)
    async def quotes_error_handler(request: Request, exc: QuotesError):
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"{exc.code}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.info(
            f"Invalid request body: {exc.errors()}",
            extra={"error_code": "INVALID_REQUEST_BODY", "path": request.url.path},
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST_BODY",
            "Invalid request body", ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
            "An unexpected error occurred", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL,
        )


def _error_response(
    http_status: int, code: str, message: str,
    category: ErrorCategory, severity: ErrorSeverity,
) -> JSONResponse:
    return JSONResponse(
        status_code=http_status,
        content={
            "error": {
                "code": code,
                "message": message,
                "category": category.value,
                "severity": severity.value,
            },
        },
    )
