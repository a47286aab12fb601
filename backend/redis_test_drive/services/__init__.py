"""
Service Module Initialization
"""

from redis_test_drive.services.geo_service import GeoService
from redis_test_drive.services.namespace_service import NamespaceService
from redis_test_drive.services.strings_service import StringsService

__all__ = [
    "NamespaceService",
    "StringsService",
    "GeoService",
]
