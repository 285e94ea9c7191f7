"""
Async database session management.

The gateway talks to the hosted PostgreSQL database through one process-wide
async engine. Each request gets its own session from get_db().
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import settings

logger = logging.getLogger(__name__)

# Global engine and session factory (lazy-initialized)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """
    Get or create the async engine.

    Creating the engine does not open a connection; the pool connects on
    first use.
    """
    global _engine, _session_factory

    if _engine is None:
        _engine = create_async_engine(
            settings.POSTGRES_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            pool_pre_ping=True,
        )
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
        logger.info(f"Initialized database engine for {settings.POSTGRES_HOST}:{settings.POSTGRES_PORT}")

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory, creating the engine if needed."""
    if _session_factory is None:
        get_engine()
    assert _session_factory is not None
    return _session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a database session.

    Repositories commit their own writes; anything left open is rolled
    back if the request failed.
    """
    session = get_session_factory()()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def init_db() -> None:
    """Create the engine at startup."""
    get_engine()


async def close_db() -> None:
    """Dispose of the engine and its connection pool."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None
