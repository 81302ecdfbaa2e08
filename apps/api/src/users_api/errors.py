"""Exception handlers rendering every failure as ``{"error": message}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from users_api.middleware import get_cors_headers
from users_common.errors import UserRegistryError, UserStoreError
from users_common.services.user_validator import first_violation

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    """Build the JSON error body shared by all handlers."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    """Attach the API's exception handlers to ``app``.

    Args:
        app: FastAPI application instance
        ui_url: URL of a browser client allowed to call the API
        environment: Environment name, used for CORS headers on 500 responses
    """

    @app.exception_handler(UserRegistryError)
    async def user_registry_error_handler(request: Request, exc: UserRegistryError) -> JSONResponse:
        if isinstance(exc, UserStoreError):
            logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
            return error_response(exc.status_code, SERVER_ERROR_MESSAGE)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = first_violation(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    # Exception handler to ensure CORS headers are present on unexpected errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        origin = request.headers.get("origin")
        cors_headers = get_cors_headers(origin, ui_url=ui_url, environment=environment)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE, headers=cors_headers)
