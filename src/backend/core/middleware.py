"""
Gateway middleware: CORS handling, security headers and the top-level
error boundary.

Registration order in main.py matters (middleware is processed in reverse):
CORS must wrap everything else so that error responses carry CORS headers too.
"""

from typing import Callable

import structlog
from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from core.errors import classify_exception, error_response

logger = structlog.get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Permissive CORS for browser clients of the gateway.

    - OPTIONS on any path is answered here with an empty 200, whether or not
      it is a well-formed preflight and whether or not the path exists.
    - Every other response gets the same static CORS headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add basic security headers to all responses.

    - X-Content-Type-Options: Prevents MIME type sniffing
    - X-Frame-Options: API responses are never framed
    - Cache-Control: API responses are not cached unless a route says so
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"

        if "Cache-Control" not in response.headers:
            response.headers["Cache-Control"] = "no-store"

        return response


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """
    Catch any exception that escaped the route handlers.

    The exception is logged once with its type and request context, then
    turned into a JSON error with an internal code. The exception message
    itself is only written to the log.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            status_code, code, message = classify_exception(exc)
            logger.exception(
                "unhandled_exception",
                error=str(exc),
                error_type=type(exc).__name__,
                error_code=code,
                path=request.url.path,
                method=request.method,
            )
            return error_response(status_code, code, message)
