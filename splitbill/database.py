"""Database handle and session dependency"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from splitbill.config import Settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


class Database:
    """
    Owns the async engine and session factory for one process.

    Built once in the application lifespan and handed to request handlers
    through ``get_db``; nothing in the package holds a module-level engine.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """
        Create a database handle for the configured URL.

        Args:
            settings: Application settings

        Returns:
            Database handle (not yet connected; connections are lazy)
        """
        url = settings.database_url
        if url.startswith("sqlite"):
            engine_kwargs = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live on a single connection
            if ":memory:" in url or url.endswith("://"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs = {
                "pool_size": 20,
                "max_overflow": 10,
                "pool_pre_ping": True,
            }
        engine = create_async_engine(url, echo=settings.debug, **engine_kwargs)
        return cls(engine)

    async def create_all(self) -> None:
        """Create any missing tables"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections"""
        await self.engine.dispose()
        logger.info("Database connections closed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting async database session.

    Yields:
        AsyncSession: Database session bound to the application's handle
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
