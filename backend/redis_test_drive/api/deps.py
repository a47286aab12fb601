"""
API Dependency Injection Module

Provides the dependencies FastAPI routes need. Each service is bound to its
namespace's Redis database per request.
"""

from typing import Annotated

from fastapi import Depends, Request

from redis_test_drive.common.constants import Namespace
from redis_test_drive.db.redis import RedisDatabases
from redis_test_drive.repositories.redis import RedisStoreRepository
from redis_test_drive.services import GeoService, NamespaceService, StringsService


def get_redis_databases(request: Request) -> RedisDatabases:
    """
    Get the Redis client registry opened by the application lifespan

    Returns:
        RedisDatabases: Registry stored on app.state
    """
    return request.app.state.redis


RedisDatabasesDep = Annotated[RedisDatabases, Depends(get_redis_databases)]


# ============ Service Dependencies ============

def get_strings_service(databases: RedisDatabasesDep) -> StringsService:
    """Get strings service bound to the strings database"""
    return StringsService(RedisStoreRepository(databases.get_db(Namespace.STRINGS)))


def get_set_service(databases: RedisDatabasesDep) -> NamespaceService:
    """Get namespace service bound to the sets database"""
    return NamespaceService(RedisStoreRepository(databases.get_db(Namespace.SETS)))


def get_geo_service(databases: RedisDatabasesDep) -> GeoService:
    """Get geo service bound to the geo database"""
    return GeoService(RedisStoreRepository(databases.get_db(Namespace.GEO)))


# Dependency type aliases
StringsServiceDep = Annotated[StringsService, Depends(get_strings_service)]
SetServiceDep = Annotated[NamespaceService, Depends(get_set_service)]
GeoServiceDep = Annotated[GeoService, Depends(get_geo_service)]
