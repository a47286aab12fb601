"""
Repository Module Initialization
"""

from redis_test_drive.repositories.store_repo import StoreRepository

__all__ = [
    "StoreRepository",
]
