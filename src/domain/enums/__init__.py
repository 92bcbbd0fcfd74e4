"""Domain enums for business logic.

Available Enums:
    - Role: Organizational roles (Employee, Manager, HR Admin)
    - Resource: Protected resources for authorization
    - Action: Actions on resources
    - GoalStatus: Goal lifecycle status
"""

from src.domain.enums.goal_status import GoalStatus
from src.domain.enums.permission import Action, Resource
from src.domain.enums.role import MANAGEMENT_ROLES, Role

__all__ = [
    "Action",
    "GoalStatus",
    "MANAGEMENT_ROLES",
    "Resource",
    "Role",
]
