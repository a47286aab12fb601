"""
Namespace Service Module

Key lifecycle operations shared by every namespace controller.
"""

from redis_test_drive.common.errors import NotFoundError
from redis_test_drive.repositories.store_repo import StoreRepository


class NamespaceService:
    """
    Namespace Service

    Handles key removal and flushing within a single namespace.
    """

    def __init__(self, repo: StoreRepository):
        """
        Initialize Service

        Args:
            repo: Store Repository bound to the namespace
        """
        self.repo = repo

    async def delete(self, key: str) -> None:
        """
        Delete a key

        Args:
            key: Key to remove

        Raises:
            NotFoundError: Key does not exist in the namespace
        """
        if not await self.repo.exists(key):
            raise NotFoundError(key)

        await self.repo.remove(key)

    async def flush(self) -> None:
        """Remove every key in the namespace"""
        await self.repo.flush()
