"""
Error taxonomy and the handlers that render it.

Services raise these directly (they are HTTPExceptions); the handlers
installed by ``install_exception_handlers`` turn every error into the
``{"error": "..."}`` body the clients expect.
"""

from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging import get_logger

logger = get_logger("errors")


class AppError(HTTPException):
    """Base for domain errors with a fixed status code."""

    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR
    message_default = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        super().__init__(
            status_code=self.status_code_default, detail=message or self.message_default
        )
        self.details = details


class ValidationFailed(AppError):
    status_code_default = status.HTTP_400_BAD_REQUEST
    message_default = "Validation failed"


class ConflictError(AppError):
    status_code_default = status.HTTP_400_BAD_REQUEST
    message_default = "Resource already exists"


class AuthenticationError(AppError):
    status_code_default = status.HTTP_401_UNAUTHORIZED
    message_default = "Authentication required"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        super().__init__(message, details)
        self.headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(AppError):
    status_code_default = status.HTTP_403_FORBIDDEN
    message_default = "Not allowed"


class NotFoundError(AppError):
    status_code_default = status.HTTP_404_NOT_FOUND
    message_default = "Not found"


def error_body(message: str, details: Any = None) -> dict:
    body: dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return body


def _format_location(loc: tuple) -> str:
    # ("body", "title") -> "title"; ("query", "sort") -> "sort"
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    details = getattr(exc, "details", None)
    message = str(exc.detail)
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        # raised by the router itself, no handler matched
        message = "Route not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message, details),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {"field": _format_location(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    first = details[0] if details else {"field": "request", "message": "Invalid request"}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(f"{first['field']}: {first['message']}", details),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
