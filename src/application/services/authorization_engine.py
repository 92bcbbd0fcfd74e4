"""Hierarchy-aware authorization engine.

Decides which employees, goals and reviews a user may see or change,
based on the user's role and the single-level manager hierarchy.

Rules:
    - HR Admin: every employee, every review.
    - Any role: read access to the caller's own employee record.
    - Manager: read and manage direct subordinates (manager_id equals the
      manager's employee id). Reports-of-reports are not followed.
    - Employee: self only, never manage.
    - Unrecognized role strings: nothing, not even self.

Failure Semantics:
    Unknown users, users whose linked employee is missing, and unknown
    role strings all yield False or an empty set. Nothing is raised.

Architecture:
    - Application service over read-only ports (UserStore, EmployeeDirectory)
    - Stateless; every call re-reads current role and manager data
    - Constructed per request by the container

Usage:
    engine = AuthorizationEngine(
        users=user_repo,
        employees=employee_repo,
        role_permissions=get_role_permissions(),
        logger=get_logger(),
    )

    if await engine.can_access_employee(user_id, 5):
        ...
"""

from src.application.services.access_scope import AccessScope
from src.domain.entities import Principal, Review
from src.domain.enums import MANAGEMENT_ROLES, Action, Resource, Role
from src.domain.protocols.employee_directory import EmployeeDirectory
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.review_repository import ReviewRepository
from src.domain.protocols.role_permissions_protocol import RolePermissionsProtocol
from src.domain.protocols.user_store import UserStore


class AuthorizationEngine:
    """Answers allow/deny questions and computes visibility scopes.

    Implements AuthorizationProtocol.

    Dependencies (injected via constructor):
        - UserStore: user id to role and linked employee
        - EmployeeDirectory: employee records and manager links
        - RolePermissionsProtocol: coarse role permission matrix
        - LoggerProtocol: structured logging
        - ReviewRepository (optional): review lookup for can_view_review
    """

    def __init__(
        self,
        *,
        users: UserStore,
        employees: EmployeeDirectory,
        role_permissions: RolePermissionsProtocol,
        logger: LoggerProtocol,
        reviews: ReviewRepository | None = None,
    ) -> None:
        self._users = users
        self._employees = employees
        self._role_permissions = role_permissions
        self._logger = logger
        self._reviews = reviews

    # =========================================================================
    # Identity resolution
    # =========================================================================

    async def resolve_principal(self, user_id: int) -> Principal | None:
        """Resolve the caller's role and linked employee.

        Both the user and its linked employee must exist. The role is parsed
        but an unrecognized role still resolves (with role=None) so callers
        can report it; every decision treats role=None as deny.

        Args:
            user_id: Authenticated user id.

        Returns:
            Principal, or None if the user or its employee is missing.
        """
        user = await self._users.find_by_id(user_id)
        if user is None:
            self._logger.warning("authorization_user_not_found", user_id=user_id)
            return None

        employee = await self._employees.find_by_id(user.employee_id)
        if employee is None:
            self._logger.warning(
                "authorization_employee_not_found",
                user_id=user_id,
                employee_id=user.employee_id,
            )
            return None

        role = user.access_role
        if role is None:
            self._logger.warning(
                "authorization_unknown_role",
                user_id=user_id,
                role=user.role,
            )
        return Principal(user_id=user.id, role=role, employee_id=employee.id)

    async def _resolve_role(self, user_id: int) -> Role | None:
        # Role-only checks need the user record but not the linked employee
        user = await self._users.find_by_id(user_id)
        if user is None:
            self._logger.warning("authorization_user_not_found", user_id=user_id)
            return None
        return user.access_role

    async def _is_direct_report(self, manager_employee_id: int, target_id: int) -> bool:
        target = await self._employees.find_by_id(target_id)
        return target is not None and target.reports_to(manager_employee_id)

    def _deny(self, check: str, user_id: int, target: int | None, role: Role | None) -> bool:
        self._logger.debug(
            "authorization_denied",
            check=check,
            user_id=user_id,
            target=target,
            role=role.value if role else None,
        )
        return False

    # =========================================================================
    # Employee access
    # =========================================================================

    async def can_access_employee(self, user_id: int, target_employee_id: int) -> bool:
        """Check if the user may read an employee's records.

        Args:
            user_id: Authenticated user id.
            target_employee_id: Employee being read.

        Returns:
            bool: True for HR Admins, for the caller's own record (any known
            role) and for a Manager's direct subordinates.
        """
        principal = await self.resolve_principal(user_id)
        if principal is None:
            return False

        match principal.role:
            case Role.HR_ADMIN:
                return True
            case Role.MANAGER:
                if target_employee_id == principal.employee_id:
                    return True
                if await self._is_direct_report(principal.employee_id, target_employee_id):
                    return True
            case Role.EMPLOYEE:
                if target_employee_id == principal.employee_id:
                    return True
            case _:
                pass
        return self._deny("access_employee", user_id, target_employee_id, principal.role)

    async def can_manage_employee(self, user_id: int, target_employee_id: int) -> bool:
        """Check if the user may modify an employee's records.

        Self-access for reading does not extend to managing: a Manager can
        only manage direct subordinates, and an Employee manages nobody.

        Args:
            user_id: Authenticated user id.
            target_employee_id: Employee being modified.

        Returns:
            bool: True for HR Admins and for a Manager's direct subordinates.
        """
        principal = await self.resolve_principal(user_id)
        if principal is None:
            return False

        match principal.role:
            case Role.HR_ADMIN:
                return True
            case Role.MANAGER:
                if await self._is_direct_report(principal.employee_id, target_employee_id):
                    return True
            case _:
                pass
        return self._deny("manage_employee", user_id, target_employee_id, principal.role)

    async def get_accessible_employee_ids(self, user_id: int) -> frozenset[int]:
        """Ids of employees the user may read.

        Returns:
            frozenset[int]: All ids for HR Admins, self plus direct reports
            for Managers, self for Employees, empty otherwise.
        """
        principal = await self.resolve_principal(user_id)
        if principal is None:
            return frozenset()

        match principal.role:
            case Role.HR_ADMIN:
                return frozenset(await self._employees.list_all_ids())
            case Role.MANAGER:
                reports = await self._employees.list_direct_report_ids(principal.employee_id)
                return frozenset(reports) | {principal.employee_id}
            case Role.EMPLOYEE:
                return frozenset({principal.employee_id})
            case _:
                return frozenset()

    async def get_manageable_employee_ids(self, user_id: int) -> frozenset[int]:
        """Ids of employees the user may modify.

        Returns:
            frozenset[int]: All ids for HR Admins, direct reports (self
            excluded) for Managers, empty otherwise.
        """
        principal = await self.resolve_principal(user_id)
        if principal is None:
            return frozenset()

        match principal.role:
            case Role.HR_ADMIN:
                return frozenset(await self._employees.list_all_ids())
            case Role.MANAGER:
                reports = await self._employees.list_direct_report_ids(principal.employee_id)
                return frozenset(reports) - {principal.employee_id}
            case _:
                return frozenset()

    async def get_access_scope(self, user_id: int) -> AccessScope:
        """Snapshot of the user's accessible employees for list filtering.

        Args:
            user_id: Authenticated user id.

        Returns:
            AccessScope: Unrestricted for HR Admins, empty when unresolved.
        """
        principal = await self.resolve_principal(user_id)
        if principal is None:
            return AccessScope.empty()

        match principal.role:
            case Role.HR_ADMIN:
                ids = frozenset(await self._employees.list_all_ids())
                return AccessScope(principal=principal, employee_ids=ids, unrestricted=True)
            case Role.MANAGER:
                reports = await self._employees.list_direct_report_ids(principal.employee_id)
                ids = frozenset(reports) | {principal.employee_id}
            case Role.EMPLOYEE:
                ids = frozenset({principal.employee_id})
            case _:
                ids = frozenset()
        return AccessScope(principal=principal, employee_ids=ids)

    # =========================================================================
    # Reviews
    # =========================================================================

    async def can_view_review(
        self,
        user_id: int,
        review_id: int | None = None,
        *,
        review: Review | None = None,
    ) -> bool:
        """Check if the user may view a review.

        Without a review (neither id nor instance) this is advisory and
        returns True for any known role; list endpoints must still filter
        through AccessScope.

        Args:
            user_id: Authenticated user id.
            review_id: Review to look up through the review repository.
            review: Already-loaded review (skips the lookup).

        Returns:
            bool: True for HR Admins, the reviewer, the reviewee, and the
            reviewee's direct manager.
        """
        principal = await self.resolve_principal(user_id)
        if principal is None or principal.role is None:
            return False
        if principal.role is Role.HR_ADMIN:
            return True
        if review is None and review_id is None:
            return True

        if review is None and self._reviews is not None:
            review = await self._reviews.find_by_id(review_id)
        if review is None:
            return self._deny("view_review", user_id, review_id, principal.role)

        if review.involves(principal.employee_id):
            return True
        if principal.role is Role.MANAGER and review.reviewee_id is not None:
            if await self._is_direct_report(principal.employee_id, review.reviewee_id):
                return True
        return self._deny("view_review", user_id, review.id, principal.role)

    # =========================================================================
    # Role-only capabilities
    # =========================================================================

    async def can_create_reviews(self, user_id: int) -> bool:
        """True iff the user is a Manager or HR Admin."""
        return await self._resolve_role(user_id) in MANAGEMENT_ROLES

    async def can_manage_departments(self, user_id: int) -> bool:
        """True iff the user is an HR Admin."""
        return await self._resolve_role(user_id) is Role.HR_ADMIN

    async def can_view_analytics(self, user_id: int) -> bool:
        """True iff the user is a Manager or HR Admin."""
        return await self._resolve_role(user_id) in MANAGEMENT_ROLES

    async def can_view_advanced_analytics(self, user_id: int) -> bool:
        """True iff the user is an HR Admin."""
        return await self._resolve_role(user_id) is Role.HR_ADMIN

    async def has_permission(
        self, user_id: int, resource: Resource, action: Action
    ) -> bool:
        """Check a coarse role permission (e.g. goals:create).

        Args:
            user_id: Authenticated user id.
            resource: Resource type.
            action: Action on the resource.

        Returns:
            bool: True if the user's current role grants the permission.
        """
        role = await self._resolve_role(user_id)
        if role is None:
            return False
        if self._role_permissions.is_allowed(role, resource, action):
            return True
        self._logger.debug(
            "permission_denied",
            user_id=user_id,
            role=role.value,
            resource=resource.value,
            action=action.value,
        )
        return False

    async def get_permissions(self, user_id: int) -> list[str]:
        """List the "resource:action" permissions of the user's current role.

        Args:
            user_id: Authenticated user id.

        Returns:
            list[str]: Sorted permissions (empty for unknown users or roles).
        """
        return self._role_permissions.permissions_for(await self._resolve_role(user_id))
