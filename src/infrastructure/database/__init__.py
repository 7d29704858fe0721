"""
Database Infrastructure
=======================

Manages the database engine, connection pool and session lifecycle.

Uses SQLAlchemy 2.0 with asyncpg for async PostgreSQL operations. The
engine lives on an explicitly constructed `Database` object that the
application factory creates at startup and hands to repositories.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.config import Settings
from src.core import StartupException
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    SQLAlchemy 2.0 style using DeclarativeBase.
    """
    pass


class Database:
    """
    Owns one async engine (and therefore one connection pool).

    Safe for concurrent use by in-flight requests; each caller gets its
    own session from `session()`.
    """

    def __init__(self, url: str | URL, **engine_kwargs: Any):
        self._engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self._session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.sqlalchemy_url,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,  # Verify connections before using
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def connect(self) -> None:
        """Open a pooled connection and run a liveness query."""
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def ping(self) -> bool:
        try:
            await self.connect()
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.warning("Database ping failed", extra={"error": str(e)})
            return False
        return True

    async def create_tables(self) -> None:
        """Create all mapped tables that do not exist yet."""
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager for database sessions.

        Commits when the block exits normally, rolls back and re-raises
        otherwise.

        Usage:
            async with database.session() as session:
                result = await session.execute(stmt)
        """
        async with self._session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


async def init_database(settings: Settings) -> Database:
    """
    Run the database startup sequence: build the engine, verify
    connectivity, then create the schema.

    Raises:
        StartupException: If any step fails. The engine is disposed first.
    """
    # Importing the models registers their tables on Base.metadata
    import src.todos.infrastructure.models  # noqa: F401

    try:
        database = Database.from_settings(settings)
    except (SQLAlchemyError, ValueError) as e:
        logger.critical("Could not configure database engine", extra={"error": str(e)})
        raise StartupException("configure", str(e)) from e

    step = "connect"
    try:
        await database.connect()
        logger.info("Successfully connected to PostgreSQL")

        step = "create_tables"
        await database.create_tables()
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
        logger.critical(f"Database startup step '{step}' failed", extra={"error": str(e)})
        await database.close()
        raise StartupException(step, str(e)) from e

    return database
