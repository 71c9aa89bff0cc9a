"""Error Handlers — global exception handlers for the Ourzhop API.

Invariants:
    - Every error body is {"status": "error", "code", "message"} plus "errors" for violations
    - OurzhopError → its own http_status and to_response()
    - ErrorContext is logged with the error, never returned to the client
    - RequestValidationError (undecodable body) → 400 "Invalid request payload"
    - HTTPException (405 wrong method, 404 unknown route) → same envelope, generic message
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Registered from main.py via register_error_handlers (ADR: ExMA import fan-out < 10)
    - Decode failures carry no per-field details: field reports come only from the core
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ourzhop.core.errors import OurzhopError

logger = logging.getLogger(__name__)

_HTTP_MESSAGES: dict[int, str] = {
    status.HTTP_404_NOT_FOUND: "Resource not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_ourzhop_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def error_body(code: str, message: str) -> dict:
    return {"status": "error", "code": code, "message": message}


def _register_ourzhop_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(OurzhopError)
    async def ourzhop_error_handler(request: Request, exc: OurzhopError):
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"OurzhopError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "store_name": exc.context.store_name,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic decode error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Undecodable payload on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("INVALID_PAYLOAD", "Invalid request payload"),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"HTTP {exc.status_code} on {request.url.path}",
            extra={"method": request.method, "path": request.url.path},
        )
        message = _HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(f"HTTP_{exc.status_code}", message),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                "INTERNAL_ERROR",
                "An unexpected error occurred. Please try again later.",
            ),
        )
