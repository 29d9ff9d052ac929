"""
Database Infrastructure
=======================

Manages database connections, session lifecycle, and engine configuration.

Uses SQLAlchemy 2.0 with asyncpg for async PostgreSQL operations. Tests run
the same code against SQLite through aiosqlite.

Two declarative bases exist, one per schema variant:

- ``Base``: the linked layout, where owned rows reference ``users.id``
- ``DirectBase``: the direct layout, where owned rows carry ``firebase_uid``

Only one of them is created and queried by a running application.
"""

import ssl
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from sqlalchemy import MetaData, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from dbrowser.config import Settings, SchemaMode, get_settings
from dbrowser.core import ConfigurationException, RepositoryException


class Base(DeclarativeBase):
    """
    Base class for the linked schema models.

    SQLAlchemy 2.0 style using DeclarativeBase.
    """
    pass


class DirectBase(DeclarativeBase):
    """Base class for the direct (firebase_uid keyed) schema models."""
    pass


def utcnow() -> datetime:
    """Timezone-aware now, used for column defaults."""
    return datetime.now(timezone.utc)


# Global engine and session maker
_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None


def get_metadata(schema_mode: str) -> MetaData:
    """Return the table metadata for a schema variant."""
    if schema_mode == SchemaMode.LINKED:
        return Base.metadata
    if schema_mode == SchemaMode.DIRECT:
        return DirectBase.metadata
    raise ConfigurationException(f"Unknown schema mode: {schema_mode}")


def get_engine() -> AsyncEngine:
    """
    Get the database engine.

    Returns:
        AsyncEngine: SQLAlchemy async engine

    Raises:
        RuntimeError: If engine has not been initialized
    """
    global _engine
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call init_database() first.")
    return _engine


def ssl_connect_args(app_settings: Settings, database_url: str) -> dict:
    """
    asyncpg connect args for TLS without certificate verification.

    An explicit ``ssl=`` query parameter in the URL takes precedence.
    """
    if not app_settings.db_ssl or "ssl=" in database_url:
        return {}
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return {"ssl": context}


def init_database(app_settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Initialize the database engine and session maker.

    Should be called during application startup.

    Args:
        app_settings: Settings of the running application; defaults to the
            environment's

    Returns:
        AsyncEngine: The initialized engine
    """
    global _engine, _session_maker

    app_settings = app_settings or get_settings()

    # asyncpg takes ssl=, not libpq's sslmode=
    database_url = app_settings.database_url.replace("sslmode=", "ssl=")

    if database_url.startswith("sqlite"):
        # One shared connection so an in-memory database outlives a session
        _engine = create_async_engine(
            database_url,
            echo=app_settings.debug,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        _engine = create_async_engine(
            database_url,
            echo=app_settings.debug,
            pool_size=app_settings.db_pool_size,
            max_overflow=app_settings.db_max_overflow,
            pool_pre_ping=True,  # Verify connections before using
            connect_args=ssl_connect_args(app_settings, database_url),
        )

    _session_maker = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Prevent lazy loading after commit
        autocommit=False,
        autoflush=False,
    )

    return _engine


async def close_database() -> None:
    """
    Close the database engine and dispose of connections.

    Should be called during application shutdown.
    """
    global _engine, _session_maker

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_maker = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Async generator for database sessions.

    For use with FastAPI's Depends() - FastAPI handles the lifecycle.
    Handlers commit their own writes; anything left uncommitted is
    rolled back when the session closes.

    Usage in FastAPI:
        @router.get("/users/{firebase_uid}")
        async def get_user(session: AsyncSession = Depends(get_session)):
            ...

    Yields:
        AsyncSession: SQLAlchemy async session

    Raises:
        RepositoryException: If the database has not been initialized
    """
    global _session_maker

    if _session_maker is None:
        raise RepositoryException("Database not initialized. Call init_database() first.")

    async with _session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables(schema_mode: str) -> None:
    """
    Create the tables of one schema variant.

    This should only be used for development/testing.
    Production should use migrations.
    """
    metadata = get_metadata(schema_mode)
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


def dialect_insert(session: AsyncSession, model: type):
    """
    Build an INSERT that supports ``on_conflict_do_update``.

    PostgreSQL and SQLite share the ON CONFLICT syntax; SQLAlchemy exposes
    it through each dialect's own ``insert`` construct.
    """
    dialect = session.bind.dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise ConfigurationException(f"Upsert is not supported on dialect '{dialect}'")


async def fetch_database_time(session: AsyncSession):
    """Return the database server's current timestamp."""
    result = await session.execute(select(func.current_timestamp()))
    return result.scalar_one()
