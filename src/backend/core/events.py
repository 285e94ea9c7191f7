"""
Application lifecycle event handlers.

Manages startup and shutdown of the database engine.
"""

from typing import Callable

import structlog
from fastapi import FastAPI

from core.config import settings
from db.session import close_db, init_db

logger = structlog.get_logger(__name__)


def create_start_app_handler(app: FastAPI) -> Callable:
    """Create startup event handler."""

    async def start_app() -> None:
        logger.info("Starting CamerPulse Poll API...", env=settings.APP_ENV, prefix=settings.API_PREFIX)

        await init_db()
        logger.info("Database initialized")

        logger.info("CamerPulse Poll API started successfully")

    return start_app


def create_stop_app_handler(app: FastAPI) -> Callable:
    """Create shutdown event handler."""

    async def stop_app() -> None:
        logger.info("Shutting down CamerPulse Poll API...")

        await close_db()

        logger.info("CamerPulse Poll API shutdown complete")

    return stop_app
