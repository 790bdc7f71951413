"""Async database engine and session management.

The engine and session factory are created once at startup by
``init_database`` and released by ``dispose_database``. Route handlers get
a session through the ``get_db_session`` FastAPI dependency, which commits
on success and rolls back on error.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from maturity_interpretation.observability import get_logger
from maturity_interpretation.settings import Settings

logger = get_logger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


class DatabaseNotInitialisedError(RuntimeError):
    """Raised when a session is requested before init_database ran."""


def init_database(settings: Settings) -> async_sessionmaker[AsyncSession]:
    """Create the async engine and session factory.

    Args:
        settings: Service settings providing the database URL.

    Returns:
        The session factory bound to the new engine.
    """
    global _engine, _session_factory

    _engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )
    _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    logger.info("Database engine initialised", echo=settings.database_echo)
    return _session_factory


async def dispose_database() -> None:
    """Dispose of the engine's connection pool, if one was created."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the session factory.

    Raises:
        DatabaseNotInitialisedError: If init_database has not been called.
    """
    if _session_factory is None:
        raise DatabaseNotInitialisedError("init_database() must run before sessions are used")
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a transactional session.

    Yields:
        AsyncSession committed when the request succeeds and rolled back
        when it raises.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
