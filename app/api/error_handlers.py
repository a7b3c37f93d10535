"""
Global exception handlers mapping the error taxonomy onto HTTP responses
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import ApiError, StoreError
from app.utils.responses import error_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_request_validation_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if isinstance(exc, StoreError):
            logger.error(
                "%s on %s %s: %s (code=%s)",
                type(exc).__name__, request.method, request.url.path, exc.message, exc.code,
            )
            content = exc.to_response(include_details=settings.is_development)
        else:
            logger.warning(
                "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message,
            )
            content = exc.to_response()
        return JSONResponse(status_code=exc.http_status, content=content)


def _register_request_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON bodies and unparseable path parameters"""
        logger.warning("Invalid request on %s: %s", request.url.path, exc.errors())
        return error_response(
            error="Invalid request",
            message="Request body or parameters could not be parsed",
            details=[
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                }
                for e in exc.errors()
            ],
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details"""
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return error_response(
            error="Internal Server Error",
            message="An unexpected error occurred while processing your request",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
