"""Authorization protocol (port) for hierarchy-aware access control.

Route handlers depend on this protocol rather than on the concrete engine,
so API tests can substitute a stub.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Application provides the implementation (AuthorizationEngine)
- Presentation depends on the protocol via the container

Usage:
    from src.domain.protocols import AuthorizationProtocol

    authz: AuthorizationProtocol = Depends(get_authorization_engine)

    if not await authz.can_access_employee(user_id, employee_id):
        raise HTTPException(status_code=403)
"""

from typing import TYPE_CHECKING, Protocol

from src.domain.entities.principal import Principal
from src.domain.entities.review import Review
from src.domain.enums.permission import Action, Resource

if TYPE_CHECKING:
    from src.application.services.access_scope import AccessScope


class AuthorizationProtocol(Protocol):
    """Protocol for role and hierarchy based authorization.

    Error Handling:
        Never raises for unresolved users, missing employees or unknown
        roles. Every such case degrades to False or an empty set.
    """

    async def resolve_principal(self, user_id: int) -> Principal | None:
        """Resolve the caller's role and linked employee.

        Args:
            user_id: Authenticated user id.

        Returns:
            Principal, or None if the user or its employee is missing.
        """
        ...

    async def can_access_employee(self, user_id: int, target_employee_id: int) -> bool:
        """Check if the user may read an employee's records."""
        ...

    async def can_manage_employee(self, user_id: int, target_employee_id: int) -> bool:
        """Check if the user may modify an employee's records."""
        ...

    async def get_accessible_employee_ids(self, user_id: int) -> frozenset[int]:
        """Ids of employees the user may read."""
        ...

    async def get_manageable_employee_ids(self, user_id: int) -> frozenset[int]:
        """Ids of employees the user may modify."""
        ...

    async def can_view_review(
        self,
        user_id: int,
        review_id: int | None = None,
        *,
        review: Review | None = None,
    ) -> bool:
        """Check if the user may view a review (advisory when no id given)."""
        ...

    async def can_create_reviews(self, user_id: int) -> bool:
        """Check if the user may create reviews."""
        ...

    async def can_manage_departments(self, user_id: int) -> bool:
        """Check if the user may create, edit or delete departments."""
        ...

    async def can_view_analytics(self, user_id: int) -> bool:
        """Check if the user may view analytics."""
        ...

    async def can_view_advanced_analytics(self, user_id: int) -> bool:
        """Check if the user may view advanced analytics."""
        ...

    async def has_permission(
        self, user_id: int, resource: Resource, action: Action
    ) -> bool:
        """Check a coarse role permission for the user."""
        ...

    async def get_permissions(self, user_id: int) -> list[str]:
        """Sorted "resource:action" permissions of the user's role."""
        ...

    async def get_access_scope(self, user_id: int) -> "AccessScope":
        """Snapshot of the user's accessible employees for list filtering."""
        ...
