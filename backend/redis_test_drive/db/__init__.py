"""
Database Module Initialization
"""

from redis_test_drive.db.redis import RedisDatabases, close_redis, init_redis

__all__ = [
    "RedisDatabases",
    "init_redis",
    "close_redis",
]
