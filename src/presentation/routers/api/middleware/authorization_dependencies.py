"""Authorization dependencies.

FastAPI dependencies that gate whole routes on a coarse role permission
(e.g. ``employees:create``). Per-record rules (which employees a Manager
may edit) are enforced inside the application services.

Architecture:
    - JWT Authentication (auth_dependencies.py): Verifies user identity
    - Role permissions (this file): Verifies the user's current role grants
      the resource:action pair

Usage:
    @router.post("/employees")
    async def create_employee(
        current_user: AuthenticatedUser,
        _: None = Depends(require_permission(Resource.EMPLOYEES, Action.CREATE)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status

from src.core.container import get_authorization_engine
from src.domain.enums import Action, Resource
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


def require_permission(
    resource: Resource,
    action: Action,
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires a role permission.

    The role is re-read from the user store, so a role change applies on
    the next request even with an older token.

    Args:
        resource: Protected resource.
        action: Required action.

    Returns:
        Dependency function that raises 403 when the permission is missing.
    """

    async def permission_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_authorization_engine)],
    ) -> None:
        allowed = await authorization.has_permission(
            user_id=current_user.user_id,
            resource=resource,
            action=action,
        )

        if not allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied",
            )

    return permission_checker
