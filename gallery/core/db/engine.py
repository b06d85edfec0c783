"""
Async database engine configuration for FastAPI.

SQLite (aiosqlite) is the default backend:
- WAL mode and busy_timeout for concurrent readers
- Foreign key enforcement, needed for ON DELETE CASCADE
Any other async SQLAlchemy URL (e.g. postgresql+asyncpg) is accepted as is.
"""

import logging
from pathlib import Path
from typing import AsyncGenerator
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from gallery.core.config import config as settings

logger = logging.getLogger(__name__)


def _get_engine_options(database_url: str) -> dict:
    """
    Get engine options based on database type.
    SQLite requires special handling for async and concurrency.
    """
    options = {
        "echo": settings.db_echo,
        "future": True,
    }

    if database_url.startswith("sqlite"):
        # aiosqlite does not pool; in-memory databases must share one connection
        if ":memory:" in database_url:
            options["poolclass"] = StaticPool
            options["connect_args"] = {"check_same_thread": False}
        else:
            options["poolclass"] = NullPool
    elif not settings.is_production:
        options["poolclass"] = NullPool

    return options


def _configure_sqlite_connection(dbapi_connection, connection_record):
    """
    Called on every new SQLite connection.

    - WAL mode: readers do not block writers
    - busy_timeout: wait up to 30s for locks instead of failing
    - foreign_keys: enforce referential integrity and cascades
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=30000")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


def _ensure_sqlite_directory(database_url: str) -> None:
    database = make_url(database_url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def build_engine(database_url: str) -> AsyncEngine:
    """Create an async engine, registering SQLite pragmas when needed."""
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        _ensure_sqlite_directory(database_url)

    new_engine = create_async_engine(database_url, **_get_engine_options(database_url))

    if is_sqlite:
        # aiosqlite connections are configured through the sync engine's pool events
        @event.listens_for(new_engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            _configure_sqlite_connection(dbapi_connection, connection_record)

    return new_engine


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,  # Manual control over flushing
    )


database_url = settings.database_url

engine = build_engine(database_url)

# Session factory
AsyncSessionLocal = build_sessionmaker(engine)


async def get_db_util() -> AsyncGenerator[AsyncSession, None]:
    """
    Database dependency for FastAPI.
    Injected into route handlers with Depends().

    Commits when the request handler returns, rolls back on any exception.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def check_database_connection(session_factory=None) -> bool:
    """
    Verify database connection is working.
    Used by the health endpoint.
    """
    factory = session_factory or AsyncSessionLocal
    try:
        async with factory() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.warning(f"Database connection check failed: {e}")
        return False
