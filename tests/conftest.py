"""
Pytest fixtures - isolated in-memory DB per test, API client, users and tokens.
Environment is set before the app is imported: SQLite instead of PostgreSQL, no Redis.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ["CACHE_ENABLED"] = "false"

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from auction_ledger.core.security import hash_password
from auction_ledger.db.base import Base
from auction_ledger.db.models import User
from auction_ledger.db.repositories import CounterRepository, ItemRepository
from auction_ledger.db.session import get_db, get_write_db
from auction_ledger.main import app
from auction_ledger.services.auction_service import AuctionService
from auction_ledger.services.id_allocator import IdAllocator

from factories import bearer

# One shared connection so every session in a test sees the same in-memory database
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest.fixture
def item_repo(session: AsyncSession) -> ItemRepository:
    return ItemRepository(session)


@pytest.fixture
def service(session: AsyncSession, item_repo: ItemRepository) -> AuctionService:
    return AuctionService(item_repo, IdAllocator(CounterRepository(session), "item_id"))


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_write_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def make_user(session: AsyncSession) -> Callable[[str], Awaitable[User]]:
    """Factory: persist a user with password "password123"."""

    async def _make(email: str) -> User:
        user = User(
            email=email,
            hashed_password=hash_password("password123"),
            full_name=email.split("@")[0].title(),
        )
        session.add(user)
        await session.flush()
        await session.refresh(user)
        return user

    return _make


@pytest_asyncio.fixture
async def seller(make_user) -> User:
    return await make_user("seller@example.com")


@pytest_asyncio.fixture
async def bidder(make_user) -> User:
    return await make_user("bidder@example.com")


@pytest.fixture
def seller_headers(seller: User) -> dict:
    return bearer(seller.id)


@pytest.fixture
def bidder_headers(bidder: User) -> dict:
    return bearer(bidder.id)
