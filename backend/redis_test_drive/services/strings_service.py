"""
Strings Service Module

Provides business logic for string and JSON-object values.
"""

import logging
from typing import Any

from redis_test_drive.common.errors import NotFoundError, WriteFailedError
from redis_test_drive.domain.strings import SetStringObjectRequest, SetStringRequest, SimpleObject
from redis_test_drive.services.namespace_service import NamespaceService

logger = logging.getLogger(__name__)


class StringsService(NamespaceService):
    """
    Strings Service

    An empty stored string is reported as missing, the same as an absent key.
    """

    async def list_keys(self) -> list[str]:
        """List every key in the namespace"""
        return await self.repo.search_keys("*")

    async def get_value(self, key: str) -> str:
        """
        Get the string cached at a key

        Raises:
            NotFoundError: Key is absent or holds an empty string
        """
        value = await self.repo.get_string(key)
        if not value:
            raise NotFoundError(key)
        return value

    async def upsert(self, request: SetStringRequest) -> str:
        """
        Create or update a string value

        Args:
            request: Key/value pair

        Returns:
            str: The stored value

        Raises:
            WriteFailedError: The store did not acknowledge the write
        """
        if not await self.repo.set_string(request.key, request.value):
            raise WriteFailedError(f"There was an error adding {request.key} to the cache")

        logger.debug("Cached string value at %s", request.key)
        return request.value

    async def update(self, key: str, value: str) -> str:
        """
        Update (or create) the string at a key, the path/query counterpart of upsert()

        Raises:
            WriteFailedError: The store did not acknowledge the write
        """
        if not await self.repo.set_string(key, value):
            raise WriteFailedError(f"There was an error updating {key} to {value} in the cache")

        logger.debug("Updated string value at %s", key)
        return value

    async def set_object(self, request: SetStringObjectRequest) -> dict[str, Any]:
        """
        Serialize and cache an object

        Returns:
            dict: The stored object

        Raises:
            WriteFailedError: The store did not acknowledge the write
        """
        value = request.value.model_dump()
        if not await self.repo.set_object(request.key, value):
            raise WriteFailedError(
                f"There was an error serializing and adding {request.key} to the cache"
            )

        logger.debug("Cached object value at %s", request.key)
        return value

    async def get_object(self, key: str) -> SimpleObject:
        """
        Get and deserialize the object cached at a key

        Raises:
            NotFoundError: Key does not exist
            ValueError: Stored value is not a JSON object
        """
        data = await self.repo.get_object(key)
        if data is None:
            raise NotFoundError(key)
        return SimpleObject.model_validate(data)
