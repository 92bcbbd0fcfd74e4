"""Authorization dependency factories.

- Casbin enforcer for the role permission matrix (app-scoped, loaded from
  model.conf + policy.csv at startup)
- AuthorizationEngine (request-scoped, over the request's repositories)
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_employee_repository,
    get_review_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from casbin import Enforcer

    from src.domain.protocols.authorization_protocol import AuthorizationProtocol
    from src.domain.protocols.role_permissions_protocol import RolePermissionsProtocol
    from src.infrastructure.persistence.repositories import (
        EmployeeRepository,
        ReviewRepository,
        UserRepository,
    )


# Module-level state for enforcer singleton
_enforcer: "Enforcer | None" = None


# ============================================================================
# Role permissions (Casbin)
# ============================================================================


def init_enforcer() -> "Enforcer":
    """Load the Casbin enforcer at application startup.

    Idempotent: returns the existing enforcer if already loaded.

    Returns:
        Loaded Enforcer instance.
    """
    global _enforcer

    if _enforcer is not None:
        return _enforcer

    from src.infrastructure.authorization.casbin_adapter import (
        DEFAULT_MODEL_PATH,
        create_enforcer,
    )

    _enforcer = create_enforcer()
    get_logger().info(
        "casbin_enforcer_initialized",
        model_path=str(DEFAULT_MODEL_PATH),
        policy_count=len(_enforcer.get_policy()),
    )
    return _enforcer


def get_enforcer() -> "Enforcer":
    """Get Casbin enforcer singleton, loading it on first use.

    Returns:
        The loaded enforcer.
    """
    return _enforcer if _enforcer is not None else init_enforcer()


def get_role_permissions() -> "RolePermissionsProtocol":
    """Get the role permission matrix (app-scoped enforcer).

    Returns:
        CasbinRolePermissions implementing RolePermissionsProtocol.
    """
    from src.infrastructure.authorization.casbin_adapter import CasbinRolePermissions

    return CasbinRolePermissions(enforcer=get_enforcer(), logger=get_logger())


# ============================================================================
# Authorization engine (request-scoped)
# ============================================================================


async def get_authorization_engine(
    users: "UserRepository" = Depends(get_user_repository),
    employees: "EmployeeRepository" = Depends(get_employee_repository),
    reviews: "ReviewRepository" = Depends(get_review_repository),
) -> "AuthorizationProtocol":
    """Get authorization engine (request-scoped).

    Every decision re-reads users and employees through the request's
    session, so org-chart changes apply on the next request.

    Usage:
        @router.get("/employees/{employee_id}")
        async def get_employee(
            authz: AuthorizationProtocol = Depends(get_authorization_engine),
        ):
            ...

    Returns:
        AuthorizationEngine implementing AuthorizationProtocol.
    """
    from src.application.services.authorization_engine import AuthorizationEngine

    return AuthorizationEngine(
        users=users,
        employees=employees,
        reviews=reviews,
        role_permissions=get_role_permissions(),
        logger=get_logger(),
    )
