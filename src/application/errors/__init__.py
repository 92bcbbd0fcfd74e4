"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    already_exists: Unique-value conflict factory
    forbidden: Generic 403 error factory
    invalid_reference: Missing referenced record factory
    not_found: Missing-record error factory
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    already_exists,
    forbidden,
    invalid_reference,
    not_found,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "already_exists",
    "forbidden",
    "invalid_reference",
    "not_found",
]
