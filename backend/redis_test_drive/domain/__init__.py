"""
Domain Model Module Initialization
"""

from redis_test_drive.domain.geo import SEED_POINTS, GeoPoint
from redis_test_drive.domain.strings import (
    SetStringObjectRequest,
    SetStringRequest,
    SimpleObject,
)

__all__ = [
    "GeoPoint",
    "SEED_POINTS",
    "SetStringRequest",
    "SetStringObjectRequest",
    "SimpleObject",
]
