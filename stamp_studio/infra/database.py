"""Async database configuration.

Provides:
- Async SQLAlchemy engine and session factory
- Transactional session scope (commit on success, rollback on error)
- Schema creation and connectivity checks
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stamp_studio.config import settings
from stamp_studio.infra.logging import get_logger

logger = get_logger(__name__)

# Global engine (initialized lazily on first use)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        # SQLite has no server-side pool to tune
        return {"echo": settings.debug}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_pool_max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 1800,
        "echo": settings.debug,
    }


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        url = settings.database_url
        logger.info(
            "Creating database engine",
            dialect=url.split(":", 1)[0],
            pool_size=settings.db_pool_size,
        )
        _engine = create_async_engine(url, **_engine_options(url))
        if url.startswith("sqlite"):
            event.listen(_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session wrapped in a single transaction.

    Every write made through the session is committed together when the
    block exits normally, and rolled back together when it raises.

    Example:
        async with get_db_session() as session:
            service = ReviewService(SqlReviewStore(session), SqlDesignStore(session))
            await service.approve_design(design_id=5, reviewer_id=9)
    """
    factory = get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()

    except Exception as e:
        await session.rollback()
        logger.warning("Database session rolled back", error=str(e), error_type=type(e).__name__)
        raise

    finally:
        await session.close()


async def create_tables() -> None:
    """Create all tables known to the model metadata."""
    from stamp_studio.models import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def close_db_engine() -> None:
    """Close the database engine and all connections.

    Call this during application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Verify database connectivity.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        return False
