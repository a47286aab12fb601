"""
Store Repository Redis Implementation

Provides concrete Redis operations for one namespace. The namespace is fixed by the
database index the client was created with.
"""

import json
from typing import Any, Optional

from redis.asyncio import Redis

from redis_test_drive.repositories.store_repo import StoreRepository


class RedisStoreRepository(StoreRepository):
    """
    Store Repository Redis Implementation

    Every operation targets the database the client is bound to, so FLUSHDB never
    touches another namespace.
    """

    def __init__(self, client: Redis):
        """
        Initialize Repository

        Args:
            client: Async Redis client bound to a namespace database
        """
        self.client = client

    async def search_keys(self, pattern: str = "*") -> list[str]:
        """List keys using SCAN rather than the blocking KEYS command"""
        return [key async for key in self.client.scan_iter(match=pattern)]

    async def exists(self, key: str) -> bool:
        return await self.client.exists(key) > 0

    async def get_string(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set_string(self, key: str, value: str) -> bool:
        return bool(await self.client.set(key, value))

    async def get_object(self, key: str) -> Optional[dict[str, Any]]:
        raw = await self.client.get(key)
        if raw is None:
            return None
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Value at {key} is not a JSON object")
        return data

    async def set_object(self, key: str, value: dict[str, Any]) -> bool:
        return bool(await self.client.set(key, json.dumps(value)))

    async def remove(self, key: str) -> bool:
        deleted_count = await self.client.delete(key)
        return deleted_count > 0

    async def flush(self) -> None:
        await self.client.flushdb()

    async def geo_add(self, name: str, longitude: float, latitude: float, member: str) -> int:
        return await self.client.geoadd(name, [longitude, latitude, member])
