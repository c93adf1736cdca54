"""
BDD fixtures - a synchronous TestClient over a throwaway SQLite file.
Each request gets its own committed session, as in production.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from auction_ledger.db.base import Base
from auction_ledger.db.session import get_db, get_write_db, session_scope
from auction_ledger.main import app


async def _create_schema(url: str) -> None:
    engine = create_async_engine(url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


@pytest.fixture
def api(tmp_path):
    # NullPool: connections open inside the TestClient's own event loop
    url = f"sqlite+aiosqlite:///{tmp_path / 'bdd.db'}"
    asyncio.run(_create_schema(url))
    session_maker = async_sessionmaker(
        create_async_engine(url, poolclass=NullPool),
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with session_scope(session_maker) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_write_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def response():
    """Store last response for then steps."""
    return {}
