"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class InvariantViolationError(AppException):
    """Store invariant broken, e.g. a duplicate id was generated."""

    status_code = 500

    def __init__(self, message: str, **details: Any):
        super().__init__(
            message,
            error_code="INVARIANT_VIOLATION",
            details=details,
        )
