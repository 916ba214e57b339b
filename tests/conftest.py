"""Pytest fixtures and configuration"""

import os
from typing import AsyncGenerator, Dict, Optional
from uuid import uuid4

# Settings are read on import; point them at a throwaway database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from splitbill.api.deps import get_cache
from splitbill.core.security import hash_password
from splitbill.database import Base, Database, get_db
from splitbill.main import app
from splitbill.models.user import User

TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FakeCache:
    """In-memory stand-in for the Redis cache"""

    def __init__(self):
        self.store: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self.store.get(key)

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        self.store[key] = value
        return True

    async def health_check(self) -> bool:
        return True


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with all tables for each test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    db = Database(engine)
    await db.create_all()

    yield db

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Session shared by the fixtures and the requests of one test"""
    async with database.session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def cache() -> FakeCache:
    return FakeCache()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession, cache: FakeCache) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database session and cache overrides"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: cache

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_user(db_session: AsyncSession, username: str, email: str) -> User:
    user = User(
        id=uuid4(),
        username=username,
        email=email,
        full_name=username.title(),
        hashed_password=hash_password("testpassword123"),
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user"""
    return await _create_user(db_session, "testuser", "test@example.com")


@pytest_asyncio.fixture
async def test_user2(db_session: AsyncSession) -> User:
    """Create a second test user"""
    return await _create_user(db_session, "testuser2", "test2@example.com")


@pytest_asyncio.fixture
async def auth_token(client: AsyncClient, test_user: User) -> str:
    """Get authentication token for test user"""
    response = await client.post(
        "/api/v1/auth/login",
        data={
            "username": "testuser",
            "password": "testpassword123",
        },
    )
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest_asyncio.fixture
async def auth_headers(auth_token: str) -> dict:
    """Get authentication headers"""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest_asyncio.fixture
async def other_auth_headers(client: AsyncClient, test_user2: User) -> dict:
    """Authentication headers for the second test user"""
    response = await client.post(
        "/api/v1/auth/login",
        data={"username": "testuser2", "password": "testpassword123"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest_asyncio.fixture
async def bill(client: AsyncClient, auth_headers: dict) -> dict:
    """An empty bill owned by the test user"""
    response = await client.post(
        "/api/v1/bills", json={"title": "Dinner"}, headers=auth_headers
    )
    assert response.status_code == 201
    return response.json()
