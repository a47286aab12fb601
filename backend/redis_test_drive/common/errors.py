"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
Every error renders as an RFC 7807 problem-details body.
"""

from typing import Any, Optional

PROBLEM_MEDIA_TYPE = "application/problem+json"

# Reference links for the problem "type" member, keyed by status code
_PROBLEM_TYPES = {
    400: "https://tools.ietf.org/html/rfc7231#section-6.5.1",
    404: "https://tools.ietf.org/html/rfc7231#section-6.5.4",
    500: "https://tools.ietf.org/html/rfc7231#section-6.6.1",
}


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing message, title and HTTP status code.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        title: str = "An error occurred while processing your request.",
        errors: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize exception

        Args:
            message: Error message, rendered as the problem "detail"
            status_code: HTTP status code
            title: Short human-readable summary of the problem type
            errors: Extra per-field error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.title = title
        self.errors = errors or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to problem-details format (for API response)

        Returns:
            dict: Problem details dictionary
        """
        result: dict[str, Any] = {
            "type": _PROBLEM_TYPES.get(self.status_code, "about:blank"),
            "title": self.title,
            "status": self.status_code,
            "detail": self.message,
        }
        if self.errors:
            result["errors"] = self.errors
        return result


class NotFoundError(AppError):
    """
    Key Not Found Error

    Raised when the requested key does not exist in the namespace.
    """

    def __init__(self, key: str):
        super().__init__(
            message=f"Key {key} not found in cache",
            status_code=404,
            title="Not Found",
        )
        self.key = key


class WriteFailedError(AppError):
    """
    Write Failure Error

    Raised when the store reports that a set did not succeed.
    """

    def __init__(self, message: str):
        super().__init__(message=message, status_code=400, title="Bad Request")


class RequestValidationFailed(AppError):
    """
    Request Validation Error

    Raised when the request body, path or query does not match the model.
    """

    def __init__(
        self,
        message: str = "One or more validation errors occurred.",
        errors: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            title="One or more validation errors occurred.",
            errors=errors,
        )


class UnexpectedError(AppError):
    """
    Unexpected Error

    Wraps any other failure (including store connectivity). The raw message is kept verbatim.
    """

    def __init__(self, message: str):
        super().__init__(message=message, status_code=500)
