"""
Geo API

Seeds and manages the geospatial database.
"""

import logging

from fastapi import APIRouter, status

from redis_test_drive.api.deps import GeoServiceDep
from redis_test_drive.api.responses import NOT_FOUND, SERVER_ERROR, error_response, responses
from redis_test_drive.common.errors import AppError, UnexpectedError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Geo", tags=["Geo"])


@router.get(
    "/Seed",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=SERVER_ERROR,
)
async def seed_db(service: GeoServiceDep):
    """
    Seed a set of geographic points.
    """
    try:
        await service.seed()
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error seeding geo database: {e}"))


@router.delete(
    "/Flush",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=SERVER_ERROR,
)
async def flush_db(service: GeoServiceDep):
    """
    Clear all cached Geo data.
    """
    try:
        await service.flush()
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error flushing database: {e}"))


@router.delete(
    "/{key}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=responses(NOT_FOUND, SERVER_ERROR),
)
async def delete_geo(key: str, service: GeoServiceDep):
    """
    Delete a top-level key of the Geo database.

    Seeded points are members of the points.of.interest set, so only that whole
    set (key "points.of.interest") can be removed here.
    """
    try:
        await service.delete(key)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error removing cached Geo set: {e}"))
