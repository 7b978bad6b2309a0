"""Engine and session factory construction."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger("exemplum.persistence")

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


def create_engine(url: str = IN_MEMORY_URL, *, echo: bool = False) -> AsyncEngine:
    """Create the async engine.

    An in-memory SQLite database lives as long as its connection, so it is
    pinned to a single shared connection.
    """
    kwargs: dict[str, Any] = {"echo": echo}
    if url.startswith("sqlite") and ":memory:" in url:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_async_engine(url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured on %s", engine.url.render_as_string())


__all__ = [
    "IN_MEMORY_URL",
    "create_engine",
    "create_schema",
    "create_session_factory",
]
