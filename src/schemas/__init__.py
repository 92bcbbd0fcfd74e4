"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import EmployeeRequest, EmployeeResponse
"""

from src.schemas.access_schemas import PermissionSummaryResponse
from src.schemas.catalog_schemas import (
    DepartmentListResponse,
    DepartmentRequest,
    DepartmentResponse,
    EmployeeSkillListResponse,
    EmployeeSkillRequest,
    EmployeeSkillResponse,
    ReviewCycleListResponse,
    ReviewCycleRequest,
    ReviewCycleResponse,
    SkillListResponse,
    SkillRequest,
    SkillResponse,
)
from src.schemas.employee_schemas import (
    EmployeeListResponse,
    EmployeeRequest,
    EmployeeResponse,
)
from src.schemas.goal_schemas import GoalListResponse, GoalRequest, GoalResponse
from src.schemas.review_schemas import (
    ReviewListResponse,
    ReviewRequest,
    ReviewResponse,
)

__all__ = [
    "DepartmentListResponse",
    "DepartmentRequest",
    "DepartmentResponse",
    "EmployeeListResponse",
    "EmployeeRequest",
    "EmployeeResponse",
    "EmployeeSkillListResponse",
    "EmployeeSkillRequest",
    "EmployeeSkillResponse",
    "GoalListResponse",
    "GoalRequest",
    "GoalResponse",
    "PermissionSummaryResponse",
    "ReviewListResponse",
    "ReviewRequest",
    "ReviewCycleListResponse",
    "ReviewCycleRequest",
    "ReviewCycleResponse",
    "ReviewResponse",
    "SkillListResponse",
    "SkillRequest",
    "SkillResponse",
]
