"""
Strings API

Caches string and JSON-object values in the strings database.
"""

import logging

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from redis_test_drive.api.deps import StringsServiceDep
from redis_test_drive.api.responses import (
    NOT_CACHED,
    NOT_FOUND,
    SERVER_ERROR,
    error_response,
    responses,
)
from redis_test_drive.common.errors import AppError, UnexpectedError
from redis_test_drive.domain.strings import SetStringObjectRequest, SetStringRequest, SimpleObject
from redis_test_drive.domain.types import NOT_BLANK_PATTERN

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Strings", tags=["Strings"])


@router.get("", response_model=list[str], responses=SERVER_ERROR)
async def get_keys(service: StringsServiceDep):
    """
    List of keys currently stored in the Strings db.
    """
    try:
        return await service.list_keys()
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error retrieving keys: {e}"))


@router.delete(
    "/Flush",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=SERVER_ERROR,
)
async def flush_db(service: StringsServiceDep):
    """
    Clear all cached String data.
    """
    try:
        await service.flush()
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error flushing database: {e}"))


@router.post(
    "/Object",
    status_code=status.HTTP_201_CREATED,
    response_model=SimpleObject,
    responses=responses(NOT_CACHED, SERVER_ERROR),
)
async def set_object(data: SetStringObjectRequest, request: Request, service: StringsServiceDep):
    """
    Caches/updates an object value serialized as a JSON string at the specified key.
    """
    try:
        value = await service.set_object(data)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error caching object value: {e}"))

    return JSONResponse(
        content=value,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(request.url_for("get_object", key=data.key))},
    )


@router.get(
    "/Object/{key}",
    name="get_object",
    response_model=SimpleObject,
    responses=responses(NOT_FOUND, SERVER_ERROR),
)
async def get_object(key: str, service: StringsServiceDep):
    """
    Retrieves an object value cached at the specified key.

    A key holding a plain string rather than a JSON object yields a server error.
    """
    try:
        return await service.get_object(key)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error retrieving key: {e}"))


@router.get(
    "/{key}",
    name="get_value",
    response_model=str,
    responses=responses(NOT_FOUND, SERVER_ERROR),
)
async def get_value(key: str, service: StringsServiceDep):
    """
    Retrieves a string value cached at the specified key.

    Objects are returned as their serialized JSON string.
    """
    try:
        return await service.get_value(key)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error retrieving key: {e}"))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=str,
    responses=responses(NOT_CACHED, SERVER_ERROR),
)
async def set_value(data: SetStringRequest, request: Request, service: StringsServiceDep):
    """
    Caches/updates a string value at the specified key.
    """
    try:
        value = await service.upsert(data)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error caching string value: {e}"))

    return JSONResponse(
        content=value,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(request.url_for("get_value", key=data.key))},
    )


@router.put(
    "/{key}",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=str,
    responses=responses(NOT_CACHED, SERVER_ERROR),
)
async def update_value(
    key: str,
    service: StringsServiceDep,
    value: str = Query(..., min_length=1, pattern=NOT_BLANK_PATTERN, description="Value to be stored at the key"),
):
    """
    Updates a string value at the specified key.

    Same storage effect as POST, acknowledged with 202 instead of 201.
    """
    try:
        stored = await service.update(key, value)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error updating cached string value: {e}"))

    return JSONResponse(content=stored, status_code=status.HTTP_202_ACCEPTED)


@router.delete(
    "/{key}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=responses(NOT_FOUND, SERVER_ERROR),
)
async def delete_value(key: str, service: StringsServiceDep):
    """
    Delete a string or object value at the specified key.
    """
    try:
        await service.delete(key)
    except AppError as e:
        return error_response(e)
    except Exception as e:
        logger.error(str(e))
        return error_response(UnexpectedError(f"Unexpected error removing cached string value: {e}"))
