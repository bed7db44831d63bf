"""Domain errors and their HTTP mapping."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SilentSosError(Exception):
    """Base class for errors surfaced to the client as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None
    # Body text for 5xx responses; the detailed message goes to the log
    public_message: str = "Internal server error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SilentSosError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(SilentSosError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(SilentSosError):
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentialsError(AuthError):
    """Failed login. Not a 401: the SPA treats 401 as an expired session."""

    status_code = status.HTTP_400_BAD_REQUEST
    headers = None

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class NotFoundError(SilentSosError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreError(SilentSosError):
    """The JSON document could not be read or written.

    The message names the file problem and is only logged.
    """

    public_message = "Storage error"


def _error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc)
    if first.get("type") == "missing":
        return f"{field} is required" if field else "Request body is required"
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": ...}``, the shape the SPA reads."""

    @app.exception_handler(SilentSosError)
    async def handle_domain_error(request: Request, exc: SilentSosError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
            return _error_response(exc.status_code, exc.public_message)
        return _error_response(exc.status_code, exc.message, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = "Not found"
        return _error_response(exc.status_code, message, getattr(exc, "headers", None))
