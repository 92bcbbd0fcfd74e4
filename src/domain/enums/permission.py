"""Permission components for role-based checks.

Permissions are resource:action pairs (e.g. "goals:create") granted to a
role by the role permission policy. They are coarse-grained: whether a
Manager may edit *a particular* employee is decided by the hierarchy rules
in AuthorizationEngine, not here.

Usage:
    from src.domain.enums import Action, Resource

    allowed = await engine.has_permission(
        user_id=principal.user_id,
        resource=Resource.GOALS,
        action=Action.CREATE,
    )
"""

from enum import Enum


class Resource(str, Enum):
    """Resources that can be protected by authorization."""

    EMPLOYEES = "employees"
    GOALS = "goals"
    REVIEWS = "reviews"
    SKILLS = "skills"
    REVIEW_CYCLES = "review_cycles"
    DEPARTMENTS = "departments"
    ANALYTICS = "analytics"

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource values as strings."""
        return [resource.value for resource in cls]


class Action(str, Enum):
    """Actions that can be performed on resources.

    Action Semantics:
        VIEW: Read/list operations
        CREATE: Create new records
        EDIT: Update existing records
        DELETE: Remove records
        MANAGE: Full control of org-wide catalogs (skills, departments,
            review cycles)
        ADVANCED: Extended analytics views
    """

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    MANAGE = "manage"
    ADVANCED = "advanced"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings."""
        return [action.value for action in cls]
