"""Application layer error types.

Application services return these inside ``Failure`` so the presentation
layer can map them to problem-details responses.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="Access denied",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Goal not found",
        ...     details={"goal_id": "42"},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    details: dict[str, str] | None = None


def forbidden() -> ApplicationError:
    """Generic access-denied error.

    Deliberately carries no detail about which rule failed.
    """
    return ApplicationError(code=ApplicationErrorCode.FORBIDDEN, message="Access denied")


def not_found(resource: str, resource_id: int) -> ApplicationError:
    """Missing-record error for a resource id."""
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message=f"{_label(resource)} not found",
        details={f"{resource}_id": str(resource_id)},
    )


def invalid_reference(resource: str, field: str, value: int) -> ApplicationError:
    """Validation error for a field pointing at a record that does not exist.

    Example:
        >>> invalid_reference("manager", "manager_id", 42).message
        'Manager does not exist'
    """
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        message=f"{_label(resource)} does not exist",
        details={field: str(value)},
    )


def already_exists(resource: str, field: str, value: str) -> ApplicationError:
    """Conflict error for a value that must be unique."""
    return ApplicationError(
        code=ApplicationErrorCode.CONFLICT,
        message=f"{_label(resource)} with this {field} already exists",
        details={field: value},
    )


def _label(resource: str) -> str:
    # "review_cycle" -> "Review cycle"
    return resource.replace("_", " ").capitalize()
