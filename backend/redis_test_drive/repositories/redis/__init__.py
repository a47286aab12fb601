"""
Redis Repository Implementation Module Initialization
"""

from redis_test_drive.repositories.redis.store_repo import RedisStoreRepository

__all__ = [
    "RedisStoreRepository",
]
