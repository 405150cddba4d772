"""
Application errors.

Every failure a workflow can report is a ``VendorAPIError``. The API layer
turns them into the uniform ``{"status": "error", "message": ...}`` body, so
handlers never build error responses themselves.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

logger = logging.getLogger(__name__)


class ErrorCategory:
    """Error categories for structured error handling"""
    VALIDATION = "validation_error"
    STORAGE = "storage_error"
    NOT_FOUND = "not_found_error"
    DATABASE = "database_error"
    CONSTRAINT = "constraint_violation"
    TRANSIENT = "transient_error"
    INTERNAL = "internal_error"


class VendorAPIError(Exception):
    """Base application error with structured information"""

    def __init__(
        self,
        message: str,
        category: str = ErrorCategory.INTERNAL,
        status_code: int = 500,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.category = category
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"status": "error", "message": self.message}


class ValidationError(VendorAPIError):
    """A required field is missing or malformed."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            status_code=400,
        )
        self.errors = errors or [message]

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["errors"] = self.errors
        return body


class StorageError(VendorAPIError):
    """Writing to the blob store failed."""

    def __init__(self, message: str = "Failed to upload file"):
        super().__init__(
            message=message,
            category=ErrorCategory.STORAGE,
            status_code=500,
        )


class NotFoundError(VendorAPIError):
    def __init__(self, message: str):
        super().__init__(
            message=message,
            category=ErrorCategory.NOT_FOUND,
            status_code=404,
        )


class DatabaseError(VendorAPIError):
    """Database-related errors"""

    def __init__(
        self,
        message: str = "Database error",
        category: str = ErrorCategory.DATABASE,
        status_code: int = 500,
    ):
        super().__init__(message=message, category=category, status_code=status_code)


class ConstraintViolationError(DatabaseError):
    def __init__(self, message: str = "Database constraint violated"):
        super().__init__(
            message=message,
            category=ErrorCategory.CONSTRAINT,
            status_code=409,
        )


class TransientDatabaseError(DatabaseError):
    def __init__(self, message: str = "Database temporarily unavailable"):
        super().__init__(
            message=message,
            category=ErrorCategory.TRANSIENT,
            status_code=503,
        )


def classify_database_error(exc: SQLAlchemyError) -> DatabaseError:
    """
    Map a SQLAlchemy exception onto the application taxonomy.

    The driver message is logged here and never returned to the caller.
    """
    logger.error(f"Database failure: {exc}", exc_info=exc)

    if isinstance(exc, IntegrityError):
        return ConstraintViolationError()
    if isinstance(exc, (OperationalError, DisconnectionError, PoolTimeoutError)):
        return TransientDatabaseError()
    return DatabaseError()
