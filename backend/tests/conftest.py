"""
Test Configuration Module
"""

from typing import AsyncGenerator

import fakeredis
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from redis_test_drive.api.deps import get_redis_databases
from redis_test_drive.db.redis import RedisDatabases
from redis_test_drive.main import app


@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    """In-memory Redis server shared by every database index of a test"""
    return fakeredis.FakeServer()


@pytest_asyncio.fixture
async def databases(redis_server) -> AsyncGenerator[RedisDatabases, None]:
    """Client registry backed by the fake server"""
    registry = RedisDatabases(
        lambda index: fakeredis.FakeAsyncRedis(server=redis_server, db=index, decode_responses=True)
    )

    yield registry

    await registry.aclose()


@pytest_asyncio.fixture
async def client(databases) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app with the fake registry injected"""
    app.dependency_overrides[get_redis_databases] = lambda: databases

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}
