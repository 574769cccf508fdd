"""Custom exceptions and error codes."""

import functools
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any, ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    ARTWORK_NOT_FOUND = "ARTWORK_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_SORT_FIELD = "INVALID_SORT_FIELD"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """A required identity field is missing or malformed."""


class InvalidEmailError(ValidationError):
    """Email is empty or not shaped like an address."""

    def __init__(self, email: str | None) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_EMAIL,
            message="Invalid email format",
            status_code=400,
            details={"email": email},
        )


class InvalidSortFieldError(ValidationError):
    """Requested sort field is not in the allowlist."""

    def __init__(self, field: str, allowed: list[str]) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_SORT_FIELD,
            message=f"Cannot sort by '{field}'",
            status_code=400,
            details={"field": field, "allowed": allowed},
        )


class ArtworkNotFoundError(AppException):
    """Artwork not found."""

    def __init__(self, artwork_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ARTWORK_NOT_FOUND,
            message=f"Artwork not found: {artwork_id}",
            status_code=404,
            details={"artwork_id": artwork_id},
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {email}",
            status_code=404,
            details={"email": email},
        )


class StoreFailureError(AppException):
    """The persistent store rejected or failed a call.

    The message never carries driver detail; the original error is kept as
    ``__cause__`` for logging only.
    """

    def __init__(self, operation: str = "access the data store") -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=f"Failed to {operation}",
            status_code=500,
        )
        self.operation = operation


def store_operation(
    operation: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Relabel store failures raised by a service method with its operation name."""

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except StoreFailureError as exc:
                raise StoreFailureError(operation) from (exc.__cause__ or exc)

        return wrapper

    return decorator
