"""
Set API

Key lifecycle management for the sets database.
"""

import logging

from fastapi import APIRouter, status

from redis_test_drive.api.deps import SetServiceDep
from redis_test_drive.api.responses import NOT_FOUND, SERVER_ERROR, error_response, responses
from redis_test_drive.common.errors import AppError, UnexpectedError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Set", tags=["Set"])


@router.get("", response_model=str)
async def get_set():
    """Placeholder until set values are exposed"""
    return "Hello"


@router.delete(
    "/Flush",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=SERVER_ERROR,
)
async def flush_db(service: SetServiceDep):
    """
    Clear all cached Set data.
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
async def delete_set(key: str, service: SetServiceDep):
    """
    Delete the set stored at the specified key.
    """
    try:
        await service.delete(key)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error removing cached set: {e}"))
