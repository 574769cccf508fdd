"""Database engine and session lifecycle."""

from typing import Any

import structlog
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from infrastructure.database.models import Base

logger = structlog.get_logger()


class Database:
    """Owns the async engine and session factory for one application instance.

    Constructed explicitly at startup and disposed at shutdown; nothing in
    the process caches a connection at module level.
    """

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        connect_args: dict[str, Any] = engine_kwargs.pop("connect_args", {})
        # Supabase uses Supavisor (connection pooler) in transaction mode.
        # asyncpg's prepared statement cache is incompatible with transaction-mode
        # pooling, so we disable it when connecting through the pooler.
        if "pooler.supabase.com" in url:
            connect_args.setdefault("statement_cache_size", 0)
        if not url.startswith("sqlite"):
            engine_kwargs.setdefault("pool_pre_ping", True)

        self.url = url
        self.engine = create_async_engine(
            url,
            echo=echo,
            connect_args=connect_args,
            **engine_kwargs,
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> None:
        """Round-trip a trivial query; raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("database_disposed")


def get_database(request: Request) -> Database:
    """Dependency returning the database opened by the application lifespan."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized. Is the application lifespan running?")
    return database
