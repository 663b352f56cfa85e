"""Database engine, session handling and FastAPI dependency."""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()

UNIQUE_VIOLATION = "23505"


class Database:
    """Explicitly constructed store handle: one engine plus its session factory."""

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine, expire_on_commit=False, autoflush=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle with the bounded connection pool from settings."""
        idle = settings.DB_MAX_IDLE_CONNS
        return cls(
            settings.database_url,
            pool_size=idle,
            max_overflow=max(settings.DB_MAX_OPEN_CONNS - idle, 0),
            pool_recycle=settings.DB_CONN_MAX_LIFETIME_SECONDS,
            echo=settings.DEBUG,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    async def ping(self) -> bool:
        """
        Run a trivial round-trip query against the store.

        Returns:
            True when the store answered, False otherwise. Never raises.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    async def create_all(self):
        """Create all tables known to the models."""
        from app import models  # noqa: F401  registers the tables

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def dispose(self):
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency returning the app's store handle."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Dependency that provides a session from the app's store handle."""
    async with get_database(request).session() as session:
        yield session


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a unique-constraint failure apart from other integrity errors."""
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        if getattr(orig, attr, None) == UNIQUE_VIOLATION:
            return True
    # sqlite raises without a SQLSTATE, so fall back to its message text
    return "UNIQUE constraint failed" in str(orig) or "duplicate key" in str(orig)
