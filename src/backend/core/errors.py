"""
Gateway error types and their JSON rendering.

Every error body has the same shape: {"error": <message>, "code": <code>}.
Messages are written for API consumers; downstream exception text is never
copied into them.
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError


class GatewayError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, code: str | None = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code


class BadRequestError(GatewayError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_REQUEST"
    message = "Invalid request"


class NotFoundError(GatewayError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Resource not found"


class MethodNotAllowedError(GatewayError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    code = "METHOD_NOT_ALLOWED"
    message = "Method not allowed"


# Unexpected exception types -> (status, code, public message)
INTERNAL_ERROR_MAP: dict[type[Exception], tuple[int, str, str]] = {
    SQLAlchemyError: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "DATABASE_ERROR",
        "Database request failed",
    ),
}


def classify_exception(exc: Exception) -> tuple[int, str, str]:
    """Map an exception to the (status, code, message) sent to the client."""
    if isinstance(exc, GatewayError):
        return exc.status_code, exc.code, exc.message
    for exc_type, mapped in INTERNAL_ERROR_MAP.items():
        if isinstance(exc, exc_type):
            return mapped
    return (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        GatewayError.code,
        GatewayError.message,
    )


def error_response(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the standard JSON error response."""
    content: dict[str, Any] = {"error": message, "code": code}
    return JSONResponse(status_code=status_code, content=content, headers=headers)
