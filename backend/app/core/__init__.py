"""Core utilities."""
from app.core.exceptions import (
    AppException,
    InvariantViolationError,
    NotFoundError,
)
from app.core.logging import get_logger, setup_logging
from app.core.utils import IDGenerator

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Ids
    "IDGenerator",
    # Exceptions
    "AppException",
    "NotFoundError",
    "InvariantViolationError",
]
