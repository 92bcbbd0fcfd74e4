"""Caller's own access summary (role, scopes, capabilities).

Backs the "what can I do" endpoint the web client uses to decide which
screens and buttons to show. Server-side checks still run on every
request regardless of what the client displays.
"""

from dataclasses import dataclass

from src.domain.entities import Principal
from src.domain.protocols.authorization_protocol import AuthorizationProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessSummary:
    """Snapshot of a principal's permissions.

    Attributes:
        principal: Resolved caller.
        accessible_employee_ids: Employees the caller may read.
        manageable_employee_ids: Employees the caller may modify.
        can_create_reviews: Manager or HR Admin.
        can_manage_departments: HR Admin.
        can_view_analytics: Manager or HR Admin.
        can_view_advanced_analytics: HR Admin.
        permissions: Sorted "resource:action" strings for the role.
    """

    principal: Principal
    accessible_employee_ids: frozenset[int]
    manageable_employee_ids: frozenset[int]
    can_create_reviews: bool
    can_manage_departments: bool
    can_view_analytics: bool
    can_view_advanced_analytics: bool
    permissions: list[str]


async def summarize_access(
    authorization: AuthorizationProtocol, user_id: int
) -> AccessSummary | None:
    """Build the access summary for a user.

    Args:
        authorization: Access decisions.
        user_id: Authenticated user id.

    Returns:
        AccessSummary, or None if the user cannot be resolved.
    """
    principal = await authorization.resolve_principal(user_id)
    if principal is None:
        return None

    return AccessSummary(
        principal=principal,
        accessible_employee_ids=await authorization.get_accessible_employee_ids(user_id),
        manageable_employee_ids=await authorization.get_manageable_employee_ids(user_id),
        can_create_reviews=await authorization.can_create_reviews(user_id),
        can_manage_departments=await authorization.can_manage_departments(user_id),
        can_view_analytics=await authorization.can_view_analytics(user_id),
        can_view_advanced_analytics=await authorization.can_view_advanced_analytics(user_id),
        permissions=await authorization.get_permissions(user_id),
    )
