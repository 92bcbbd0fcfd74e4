"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Token validation and request-level authorization
checks return Results so callers decide how a failure is surfaced.

Usage:
    def parse_employee_id(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="employee_id must be numeric")
        return Success(value=int(raw))

    match parse_employee_id("42"):
        case Success(value=employee_id):
            print(f"Employee: {employee_id}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
