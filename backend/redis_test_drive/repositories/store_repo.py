"""
Store Repository Interface

Defines the data access interface for a single namespace of the key-value store.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class StoreRepository(ABC):
    """Namespace-scoped Store Repository Interface"""

    @abstractmethod
    async def search_keys(self, pattern: str = "*") -> list[str]:
        """
        List keys matching a glob-style pattern

        Args:
            pattern: Glob-style pattern, defaults to every key

        Returns:
            Matching keys (possibly empty)
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether a key exists"""
        pass

    @abstractmethod
    async def get_string(self, key: str) -> Optional[str]:
        """
        Get the raw string stored at a key

        Returns:
            The stored string, None if the key doesn't exist
        """
        pass

    @abstractmethod
    async def set_string(self, key: str, value: str) -> bool:
        """
        Create or update a string value

        Returns:
            True if the store acknowledged the write
        """
        pass

    @abstractmethod
    async def get_object(self, key: str) -> Optional[dict[str, Any]]:
        """
        Get and deserialize a JSON object stored at a key

        Returns:
            The decoded object, None if the key doesn't exist

        Raises:
            ValueError: If the stored value is not a JSON object
        """
        pass

    @abstractmethod
    async def set_object(self, key: str, value: dict[str, Any]) -> bool:
        """
        Serialize an object as JSON and store it at a key

        Returns:
            True if the store acknowledged the write
        """
        pass

    @abstractmethod
    async def remove(self, key: str) -> bool:
        """
        Delete a key

        Returns:
            True if deleted, False if key didn't exist
        """
        pass

    @abstractmethod
    async def flush(self) -> None:
        """Delete every key in the namespace"""
        pass

    @abstractmethod
    async def geo_add(self, name: str, longitude: float, latitude: float, member: str) -> int:
        """
        Add or update a member of a geospatial set

        Returns:
            Number of newly added members (0 when an existing member was updated)
        """
        pass
