"""
Problem Details Error Tests
"""

from redis_test_drive.common.errors import (
    AppError,
    NotFoundError,
    RequestValidationFailed,
    UnexpectedError,
    WriteFailedError,
)


def test_not_found_problem():
    error = NotFoundError("a")

    assert error.status_code == 404
    assert error.to_dict() == {
        "type": "https://tools.ietf.org/html/rfc7231#section-6.5.4",
        "title": "Not Found",
        "status": 404,
        "detail": "Key a not found in cache",
    }


def test_write_failed_is_bad_request():
    error = WriteFailedError("There was an error adding a to the cache")

    assert error.status_code == 400
    assert error.to_dict()["detail"] == "There was an error adding a to the cache"


def test_unexpected_error_keeps_raw_message():
    error = UnexpectedError("Unexpected error retrieving key: Connection refused")

    problem = error.to_dict()
    assert problem["status"] == 500
    assert problem["detail"] == "Unexpected error retrieving key: Connection refused"


def test_validation_errors_listed():
    error = RequestValidationFailed(errors={"key": ["Field required"]})

    problem = error.to_dict()
    assert problem["status"] == 400
    assert problem["errors"] == {"key": ["Field required"]}


def test_unknown_status_uses_blank_type():
    assert AppError("teapot", status_code=418).to_dict()["type"] == "about:blank"
