"""
Redis Client Registry Unit Tests
"""

import warnings
from unittest.mock import AsyncMock, MagicMock

import pytest

from redis_test_drive.common.constants import Namespace
from redis_test_drive.config import Settings
from redis_test_drive.db.redis import RedisDatabases, close_redis, init_redis


def _mock_client() -> MagicMock:
    client = MagicMock()
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


class TestRedisDatabases:
    """Registry caching and lifecycle"""

    def setup_method(self):
        self.created: list[int] = []

        def factory(index: int) -> MagicMock:
            self.created.append(index)
            return _mock_client()

        self.databases = RedisDatabases(factory)

    def test_get_db_reuses_client(self):
        first = self.databases.get_db(Namespace.STRINGS)
        second = self.databases.get_db(Namespace.STRINGS)

        assert first is second
        assert self.created == [1]

    def test_each_namespace_gets_its_own_client(self):
        strings = self.databases.get_db(Namespace.STRINGS)
        geo = self.databases.get_db(Namespace.GEO)

        assert strings is not geo
        assert self.created == [1, 5]

    def test_plain_int_and_enum_share_client(self):
        assert self.databases.get_db(4) is self.databases.get_db(Namespace.SETS)

    @pytest.mark.asyncio
    async def test_ping_uses_global_database(self):
        assert await self.databases.ping() is True
        assert self.created == [0]

    @pytest.mark.asyncio
    async def test_aclose_closes_every_client(self):
        clients = [self.databases.get_db(index) for index in (1, 4, 5)]

        await self.databases.aclose()

        for client in clients:
            client.aclose.assert_awaited_once()

        # A fresh client is built after close
        assert self.databases.get_db(1) is not clients[0]


@pytest.mark.asyncio
async def test_from_url_binds_database_index():
    databases = RedisDatabases.from_url("redis://localhost:6379/9")

    client = databases.get_db(Namespace.GEO)
    assert client.connection_pool.connection_kwargs["db"] == 5

    await databases.aclose()


@pytest.mark.asyncio
async def test_init_redis_pings_and_returns_registry():
    client = _mock_client()
    databases = RedisDatabases(lambda index: client)

    result = await init_redis(Settings(REDIS_URL="redis://localhost:6379"), databases)

    assert result is databases
    client.ping.assert_awaited_once()


@pytest.mark.asyncio
async def test_init_redis_fails_fast_when_unreachable():
    client = _mock_client()
    client.ping.side_effect = ConnectionError("Connection refused")
    databases = RedisDatabases(lambda index: client)

    with pytest.raises(ConnectionError):
        await init_redis(Settings(REDIS_URL="redis://localhost:6379"), databases)


@pytest.mark.asyncio
async def test_init_redis_warns_on_remote_url_without_password():
    databases = RedisDatabases(lambda index: _mock_client())

    with pytest.warns(UserWarning, match="SECURITY WARNING"):
        await init_redis(Settings(REDIS_URL="redis://cache.example.com:6379"), databases)


@pytest.mark.asyncio
async def test_init_redis_no_warning_with_password():
    databases = RedisDatabases(lambda index: _mock_client())

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        await init_redis(Settings(REDIS_URL="redis://:secret@cache.example.com:6379"), databases)


@pytest.mark.asyncio
async def test_close_redis_handles_missing_registry():
    await close_redis(None)


@pytest.mark.asyncio
async def test_from_url_keeps_unix_socket_path():
    databases = RedisDatabases.from_url("unix:///tmp/redis.sock")

    client = databases.get_db(Namespace.SETS)
    kwargs = client.connection_pool.connection_kwargs
    assert kwargs["path"] == "/tmp/redis.sock"
    assert kwargs["db"] == 4

    await databases.aclose()
