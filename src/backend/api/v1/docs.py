"""
Static API documentation.

Served for every path that matches no gateway route. Authentication and rate
limits are described here for API consumers; the gateway itself does not
enforce them.
"""

from typing import Any

from core.config import settings


def build_api_documentation() -> dict[str, Any]:
    """Build the documentation object."""
    return {
        "title": settings.APP_NAME,
        "version": settings.API_VERSION,
        "description": "Poll management, analytics, webhooks and integrations for CamerPulse",
        "base_path": settings.API_PREFIX or "/",
        "authentication": {
            "type": "bearer",
            "header": "Authorization",
            "format": "Bearer YOUR_API_KEY",
        },
        "rate_limits": {
            "requests_per_hour": settings.RATE_LIMIT_PER_HOUR,
            "description": (
                "API calls are limited based on your API key configuration. "
                f"Default: {settings.RATE_LIMIT_PER_HOUR} requests per hour."
            ),
        },
        "endpoints": {
            "polls": {
                "path": "/polls",
                "methods": ["GET", "POST"],
                "description": "List all polls or get a specific poll by ID; create a new poll",
                "parameters": {"id": "Poll ID", "limit": "Page size (default 10)", "offset": "Page offset (default 0)"},
            },
            "analytics": {
                "path": "/analytics",
                "methods": ["GET"],
                "description": "Get poll analytics and performance metrics",
                "parameters": {
                    "poll_id": "Poll ID (required)",
                    "start_date": "Start of the reporting window",
                    "end_date": "End of the reporting window",
                    "granularity": "Time bucket of the trend series",
                },
            },
            "webhooks": {
                "path": "/webhooks",
                "methods": ["GET", "POST", "DELETE"],
                "description": "Create and manage webhooks",
                "parameters": {"id": "Webhook ID (DELETE only)"},
            },
            "integrations": {
                "path": "/integrations",
                "methods": ["GET", "POST"],
                "description": "List supported integrations; configure a new integration",
            },
        },
    }
