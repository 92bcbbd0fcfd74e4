"""Route generator for the API Route Registry.

Converts RouteMetadata entries into FastAPI routes at application startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from auth policy
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    v1_router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_permission,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        dependencies = _build_dependencies(metadata.auth_policy)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
            deprecated=metadata.deprecated,
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from auth policy.

    Auth policy mapping:
        PUBLIC: No dependencies
        AUTHENTICATED: Depends(get_current_user)
        PERMISSION: Depends(get_current_user) +
            Depends(require_permission(resource, action))

    Args:
        auth_policy: Authentication policy from RouteMetadata

    Returns:
        List of FastAPI dependencies to inject

    Raises:
        ValueError: If a PERMISSION policy lacks resource or action, or the
            level is unknown.
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []

        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]

        case AuthLevel.PERMISSION:
            if auth_policy.resource is None or auth_policy.action is None:
                msg = "PERMISSION auth policy requires resource and action"
                raise ValueError(msg)
            return [
                Depends(get_current_user),
                Depends(require_permission(auth_policy.resource, auth_policy.action)),
            ]

        case _:
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Goal not found")])
        {404: {"description": "Goal not found"}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        entry: dict[str, Any] = {"description": error.description}
        if error.model is not None:
            entry["model"] = error.model
        responses[error.status] = entry
    return responses
