"""
Redis Connection Management Module

Provides one Redis client per namespace (database index) and manages their lifecycle.
"""

import logging
import warnings
from typing import Callable, Optional
from urllib.parse import urlparse

from redis.asyncio import Redis

from redis_test_drive.common.constants import Namespace
from redis_test_drive.config import Settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[int], Redis]


def _check_redis_security(redis_url: str) -> None:
    """
    Check Redis connection security.

    Warns if Redis URL has no password and is not a localhost connection.
    """
    parsed = urlparse(redis_url)

    has_password = bool(parsed.password)
    is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")

    if not has_password and not is_localhost:
        warnings.warn(
            "SECURITY WARNING: Redis connection has no password and is not connecting to localhost. "
            "This is insecure for production environments. "
            "Please set a password in REDIS_URL using the format: redis://:password@host:port",
            UserWarning,
            stacklevel=3,
        )
        logger.warning(
            "Redis connection without password to non-localhost host detected. "
            "Consider adding password authentication for production."
        )


def _strip_database(redis_url: str) -> str:
    """Drop the /<db> path component of a redis:// or rediss:// URL"""
    parsed = urlparse(redis_url)
    if parsed.scheme not in ("redis", "rediss"):
        return redis_url
    return parsed._replace(path="").geturl()


class RedisDatabases:
    """
    Registry of Redis clients keyed by database index

    Redis selects the logical database per connection, so each namespace gets its
    own client (and connection pool). Clients are created on first use.
    """

    def __init__(self, client_factory: ClientFactory):
        """
        Initialize Registry

        Args:
            client_factory: Callable building a client bound to the given database index
        """
        self._client_factory = client_factory
        self._clients: dict[int, Redis] = {}

    @classmethod
    def from_url(cls, redis_url: str) -> "RedisDatabases":
        """Build a registry whose clients connect to redis_url"""
        # Options parsed from the URL take precedence over keyword arguments
        server_url = _strip_database(redis_url)

        def factory(index: int) -> Redis:
            return Redis.from_url(server_url, db=index, decode_responses=True)

        return cls(factory)

    def get_db(self, namespace: int) -> Redis:
        """
        Get the client bound to a namespace

        Args:
            namespace: Database index

        Returns:
            Redis: The async Redis client for that database
        """
        index = int(namespace)
        client = self._clients.get(index)
        if client is None:
            client = self._client_factory(index)
            self._clients[index] = client
            logger.debug("Created Redis client for database %d", index)
        return client

    async def ping(self) -> bool:
        """Verify connectivity using the global database"""
        return await self.get_db(Namespace.GLOBAL).ping()

    async def aclose(self) -> None:
        """Close every client created so far"""
        clients = list(self._clients.values())
        self._clients.clear()
        for client in clients:
            await client.aclose()


async def init_redis(settings: Settings, databases: Optional[RedisDatabases] = None) -> RedisDatabases:
    """
    Initialize Redis Connections

    Should be called during application startup. Fails fast when Redis is unreachable.

    Args:
        settings: Application settings providing REDIS_URL
        databases: Pre-built registry (tests), built from REDIS_URL when omitted

    Returns:
        RedisDatabases: The connected registry
    """
    _check_redis_security(settings.REDIS_URL)

    if databases is None:
        databases = RedisDatabases.from_url(settings.REDIS_URL)

    await databases.ping()
    logger.info(f"Redis connection established: {settings.REDIS_URL}")
    return databases


async def close_redis(databases: Optional[RedisDatabases]) -> None:
    """
    Close Redis Connections

    Should be called during application shutdown.
    """
    if databases is None:
        return

    await databases.aclose()
    logger.info("Redis connection closed")
