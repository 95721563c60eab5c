"""
Centralized error handlers for FastAPI.

Maps redirect domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Middleware runs outside the exception handlers, so it builds its
error responses through ``error_response`` directly.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from scheme_redirect.domain.redirect.errors import (
    InvalidHostError,
    RedirectConfigError,
    RedirectDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def invalid_host_response(exc: InvalidHostError) -> JSONResponse:
    """Build the 400 response for a request whose host cannot be redirected."""
    logger.warning("Rejected redirect: %s", exc.message)
    return error_response(HTTP_400, "Invalid host header")


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidHostError)
    async def handle_invalid_host(
        _request: Request, exc: InvalidHostError
    ) -> JSONResponse:
        """Handle missing or malformed host errors."""
        return invalid_host_response(exc)

    @app.exception_handler(RedirectConfigError)
    async def handle_redirect_config(
        _request: Request, exc: RedirectConfigError
    ) -> JSONResponse:
        """Handle invalid redirect configuration."""
        logger.error("Invalid redirect configuration: %s", exc.message)
        return error_response(HTTP_500, "Internal server error")

    @app.exception_handler(RedirectDomainError)
    async def handle_redirect_domain(
        _request: Request, exc: RedirectDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled redirect domain errors."""
        logger.error("Unhandled redirect domain error: %s", exc.message)
        return error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, "Internal server error")
