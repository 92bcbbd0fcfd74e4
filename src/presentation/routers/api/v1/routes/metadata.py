"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all v1 routes. Each entry
describes the method, path, handler, response model, auth policy and
OpenAPI documentation of one endpoint.

Core types:
    RouteMetadata: Complete route specification
    HTTPMethod: HTTP method enum (GET, POST, PATCH, PUT, DELETE)
    AuthPolicy: Authentication policy (PUBLIC, AUTHENTICATED, PERMISSION)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/employees",
        handler=create_employee,
        resource="employees",
        tags=["Employees"],
        summary="Create employee",
        response_model=EmployeeResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.PERMISSION,
            resource=Resource.EMPLOYEES,
            action=Action.CREATE,
        ),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from src.domain.enums import Action, Resource


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# Authentication Policy
# =============================================================================


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required
        AUTHENTICATED: Requires valid JWT (AuthenticatedUser dependency)
        PERMISSION: Requires valid JWT and a role permission
            (resource:action) checked against the caller's current role
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    PERMISSION = "permission"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level.
        resource: Protected resource (PERMISSION level only).
        action: Required action (PERMISSION level only).

    Examples:
        >>> AuthPolicy(level=AuthLevel.AUTHENTICATED)
        >>> AuthPolicy(
        ...     level=AuthLevel.PERMISSION,
        ...     resource=Resource.GOALS,
        ...     action=Action.DELETE,
        ... )
    """

    level: AuthLevel
    resource: Resource | None = None
    action: Action | None = None


# =============================================================================
# Idempotency Level
# =============================================================================


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification (RFC 7231 Section 4.2).

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE)
        NON_IDEMPOTENT: Side effects, not repeatable (POST)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 403, 404)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix (e.g., "/goals/{goal_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "goals")
        tags: OpenAPI tags
        version: API version

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (e.g., 200, 201, 204)
        errors: Possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
        auth_policy: Authentication policy

    Deprecation:
        deprecated: Whether endpoint is deprecated
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    # Deprecation
    deprecated: bool = False
