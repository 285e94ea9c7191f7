"""
CamerPulse Poll API Gateway

Poll management, analytics, webhook registration and integrations for the
CamerPulse civic-engagement platform.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.v1 import router as api_v1_router
from api.v1.docs import build_api_documentation
from core.config import settings
from core.errors import GatewayError, MethodNotAllowedError, error_response
from core.events import create_start_app_handler, create_stop_app_handler
from core.middleware import (
    CORSHeadersMiddleware,
    ErrorBoundaryMiddleware,
    SecurityHeadersMiddleware,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    await create_start_app_handler(app)()
    yield
    # Shutdown
    await create_stop_app_handler(app)()


def _validation_message(exc: RequestValidationError) -> str:
    """Summarize the first validation error as 'field: problem'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(application: FastAPI) -> None:
    """Render every expected error as {"error": ..., "code": ...}."""

    @application.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
        logger.info(
            "request_rejected",
            status_code=exc.status_code,
            error_code=exc.code,
            path=request.url.path,
            method=request.method,
        )
        return error_response(exc.status_code, exc.code, exc.message)

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "INVALID_REQUEST",
            _validation_message(exc),
        )

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # No route for this path: serve the API documentation
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(status_code=status.HTTP_200_OK, content=build_api_documentation())

        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            error = MethodNotAllowedError()
            return error_response(error.status_code, error.code, error.message, headers=exc.headers)

        code = str(exc.detail).upper().replace(" ", "_")
        return error_response(exc.status_code, code, str(exc.detail), headers=exc.headers)


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title=settings.APP_NAME,
        description="Poll management, analytics, webhooks and integrations for CamerPulse",
        version=settings.API_VERSION,
        docs_url="/openapi/docs" if settings.DEBUG else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        # "/polls/" is not a route; it falls through to the documentation
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # Add middleware (order matters - processed in reverse)
    # 1. Error boundary - innermost, turns escaped exceptions into JSON errors
    application.add_middleware(ErrorBoundaryMiddleware)

    # 2. Security headers
    application.add_middleware(SecurityHeadersMiddleware)

    # 3. CORS - outermost, answers OPTIONS and stamps every response
    application.add_middleware(CORSHeadersMiddleware)

    register_exception_handlers(application)

    # Include routers
    application.include_router(api_v1_router, prefix=settings.API_PREFIX)

    return application


app = create_application()


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for load balancers and monitoring."""
    return {"status": "healthy", "service": "camerpulse-poll-api"}
