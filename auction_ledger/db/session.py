"""
Async database session management.
Challenge: Connection pooling, scoped sessions, proper cleanup.
Design: Dependency injection for request-scoped sessions (no connection leaks).
Mutating requests run one at a time: the write lock is held until their commit.
"""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from auction_ledger.cache.redis_client import discard_invalidations, flush_invalidations
from auction_ledger.config import get_settings

settings = get_settings()

# Pool sizing applies to server databases; SQLite picks its own pool class
_pool_options = {}
if not settings.database_url.startswith("sqlite"):
    _pool_options = {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
    }

# Async engine with connection pool (scalability)
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,  # Verify connections before use
    **_pool_options,
)

# Session factory: one session per request
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

_write_lock = asyncio.Lock()


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession] = async_session_maker,
) -> AsyncGenerator[AsyncSession, None]:
    """Commit on success, rollback on error, close on exit. Stale cache keys go after the commit."""
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            discard_invalidations(session)
            await session.rollback()
            raise
        await flush_invalidations(session)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request."""
    async with session_scope() as session:
        yield session


async def get_write_db() -> AsyncGenerator[AsyncSession, None]:
    """Session for a mutating request. Serialized with every other writer through commit."""
    async with _write_lock:
        async with session_scope() as session:
            yield session


# Type aliases for FastAPI dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_write_db)]
