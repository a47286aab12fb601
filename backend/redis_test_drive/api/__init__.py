"""
API Router Module Initialization
"""

from redis_test_drive.api.geo import router as geo_router
from redis_test_drive.api.sets import router as set_router
from redis_test_drive.api.strings import router as strings_router

__all__ = [
    "strings_router",
    "set_router",
    "geo_router",
]
