"""
Shared response helpers for the namespace controllers.
"""

from typing import Any

from fastapi.responses import JSONResponse

from redis_test_drive.common.errors import PROBLEM_MEDIA_TYPE, AppError

# OpenAPI descriptions of the error responses every controller may return
SERVER_ERROR = {500: {"description": "Server error"}}
NOT_FOUND = {404: {"description": "Key not found in database"}}
NOT_CACHED = {400: {"description": "Value not cached"}}


def error_response(exc: AppError) -> JSONResponse:
    """Render an application error as a problem-details response"""
    return JSONResponse(
        content=exc.to_dict(),
        status_code=exc.status_code,
        media_type=PROBLEM_MEDIA_TYPE,
    )


def responses(*groups: dict[int, dict[str, Any]]) -> dict[int, dict[str, Any]]:
    """Merge OpenAPI response descriptions"""
    merged: dict[int, dict[str, Any]] = {}
    for group in groups:
        merged.update(group)
    return merged
