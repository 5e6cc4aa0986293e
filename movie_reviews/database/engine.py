"""Database engine and session management."""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings
from ..config.settings import DatabaseSettings
from ..models.base import Base

logger = logging.getLogger(__name__)

# Process-wide engine, built from the settings handed to init_db
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(database_settings: DatabaseSettings) -> dict:
    options = {"echo": database_settings.echo, "pool_pre_ping": True}
    # SQLite pools take no size arguments
    if not database_settings.url.startswith("sqlite"):
        options.update(
            pool_size=database_settings.pool_size,
            max_overflow=database_settings.max_overflow,
            pool_recycle=3600,
        )
    return options


def get_engine(database_settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """Return the engine, creating it on first use.

    ``database_settings`` only matters for the call that creates the
    engine; later calls reuse it until ``close_db``.
    """
    global _engine

    if _engine is None:
        database_settings = database_settings or settings.database
        _engine = create_async_engine(
            database_settings.url, **_engine_options(database_settings)
        )
        logger.info("Database engine created for %s", _engine.url.drivername)

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )

    return _session_factory


async def init_db(database_settings: Optional[DatabaseSettings] = None) -> None:
    """Create the engine from ``database_settings`` and the tables."""
    engine = get_engine(database_settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables created")


async def close_db() -> None:
    """Dispose of the engine so the next ``init_db`` starts fresh."""
    global _engine, _session_factory

    if _engine:
        await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database connections closed")
