"""
Namespace Service Unit Tests
"""

from unittest.mock import AsyncMock

import pytest

from redis_test_drive.common.errors import NotFoundError
from redis_test_drive.repositories.store_repo import StoreRepository
from redis_test_drive.services import NamespaceService


@pytest.mark.asyncio
async def test_delete_checks_existence_first():
    """Absent keys are reported, never silently removed"""
    repo = AsyncMock(spec=StoreRepository)
    repo.exists.return_value = False
    service = NamespaceService(repo)

    with pytest.raises(NotFoundError):
        await service.delete("missing")

    repo.exists.assert_awaited_once_with("missing")
    repo.remove.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_removes_present_key():
    repo = AsyncMock(spec=StoreRepository)
    repo.exists.return_value = True
    service = NamespaceService(repo)

    await service.delete("present")

    repo.remove.assert_awaited_once_with("present")


@pytest.mark.asyncio
async def test_flush_is_unconditional():
    repo = AsyncMock(spec=StoreRepository)
    service = NamespaceService(repo)

    await service.flush()
    await service.flush()

    assert repo.flush.await_count == 2


@pytest.mark.asyncio
async def test_store_errors_propagate():
    """Connectivity failures are left for the controller to report"""
    repo = AsyncMock(spec=StoreRepository)
    repo.exists.side_effect = ConnectionError("Connection refused")
    service = NamespaceService(repo)

    with pytest.raises(ConnectionError, match="Connection refused"):
        await service.delete("any")
