"""Application services.

Exports:
    AccessScope: Per-request accessible-employee snapshot
    AccessSummary / summarize_access: Caller's own permission summary
    AuthorizationEngine: Role and hierarchy based access decisions
    EmployeeService, GoalService, ReviewService: Resource use cases
    EmployeeSkillService: Employee/skill links
    DepartmentService, SkillService, ReviewCycleService: Catalog use cases
"""

from src.application.services.access_scope import AccessScope
from src.application.services.access_summary import AccessSummary, summarize_access
from src.application.services.authorization_engine import AuthorizationEngine
from src.application.services.catalog_service import (
    DepartmentService,
    ReviewCycleService,
    SkillService,
)
from src.application.services.employee_service import EmployeeService
from src.application.services.employee_skill_service import EmployeeSkillService
from src.application.services.goal_service import GoalService
from src.application.services.review_service import ReviewService

__all__ = [
    "AccessScope",
    "AccessSummary",
    "AuthorizationEngine",
    "DepartmentService",
    "EmployeeService",
    "EmployeeSkillService",
    "GoalService",
    "ReviewCycleService",
    "ReviewService",
    "SkillService",
    "summarize_access",
]
