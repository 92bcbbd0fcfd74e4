"""Caller permission summary schema."""

from pydantic import BaseModel, Field

from src.application.services.access_summary import AccessSummary


class PermissionSummaryResponse(BaseModel):
    """What the authenticated caller may see and do.

    Attributes:
        user_id: Caller's user id.
        role: Current role string (None if unrecognized).
        employee_id: Linked employee id.
        accessible_employee_ids: Employees the caller may read (sorted).
        manageable_employee_ids: Employees the caller may modify (sorted).
        can_create_reviews: Manager or HR Admin.
        can_manage_departments: HR Admin.
        can_view_analytics: Manager or HR Admin.
        can_view_advanced_analytics: HR Admin.
        permissions: "resource:action" strings granted to the role.
    """

    user_id: int
    role: str | None = None
    employee_id: int
    accessible_employee_ids: list[int] = Field(default_factory=list)
    manageable_employee_ids: list[int] = Field(default_factory=list)
    can_create_reviews: bool
    can_manage_departments: bool
    can_view_analytics: bool
    can_view_advanced_analytics: bool
    permissions: list[str] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: AccessSummary) -> "PermissionSummaryResponse":
        principal = summary.principal
        return cls(
            user_id=principal.user_id,
            role=principal.role.value if principal.role else None,
            employee_id=principal.employee_id,
            accessible_employee_ids=sorted(summary.accessible_employee_ids),
            manageable_employee_ids=sorted(summary.manageable_employee_ids),
            can_create_reviews=summary.can_create_reviews,
            can_manage_departments=summary.can_manage_departments,
            can_view_analytics=summary.can_view_analytics,
            can_view_advanced_analytics=summary.can_view_advanced_analytics,
            permissions=summary.permissions,
        )
