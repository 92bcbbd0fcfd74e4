"""API Route Registry - Single Source of Truth for all v1 routes.

Registry structure:
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference actual functions from router modules
    - Auth policies explicitly declared (AUTHENTICATED, PERMISSION)

Coarse role gates (PERMISSION) are used only where the permission check
comes first anyway. Routes that must answer 404 before 403 (updates,
locks) stay AUTHENTICATED and let the service order the checks.

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.domain.enums import Action, Resource
from src.presentation.routers.api.v1.departments import (
    create_department,
    delete_department,
    get_department,
    list_department_employees,
    list_departments,
    update_department,
)
from src.presentation.routers.api.v1.employees import (
    assign_employee_skill,
    create_employee,
    delete_employee,
    get_employee,
    list_employee_goals,
    list_employee_skills,
    list_employees,
    remove_employee_skill,
    update_employee,
)
from src.presentation.routers.api.v1.goals import (
    create_goal,
    delete_goal,
    get_goal,
    list_goals,
    update_goal,
)
from src.presentation.routers.api.v1.me import get_my_permissions
from src.presentation.routers.api.v1.review_cycles import (
    create_review_cycle,
    delete_review_cycle,
    get_review_cycle,
    list_review_cycles,
    update_review_cycle,
)
from src.presentation.routers.api.v1.reviews import (
    create_review,
    delete_review,
    get_review,
    list_cycle_reviews,
    list_reviewee_reviews,
    list_reviewer_reviews,
    list_reviews,
    lock_review,
    unlock_review,
    update_review,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.presentation.routers.api.v1.skills import (
    create_skill,
    delete_skill,
    get_skill,
    list_skill_employees,
    list_skills,
    update_skill,
)
from src.schemas.access_schemas import PermissionSummaryResponse
from src.schemas.catalog_schemas import (
    DepartmentListResponse,
    DepartmentResponse,
    EmployeeSkillListResponse,
    EmployeeSkillResponse,
    ReviewCycleListResponse,
    ReviewCycleResponse,
    SkillListResponse,
    SkillResponse,
)
from src.schemas.employee_schemas import EmployeeListResponse, EmployeeResponse
from src.schemas.goal_schemas import GoalListResponse, GoalResponse
from src.schemas.review_schemas import ReviewListResponse, ReviewResponse

AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)


def _permission(resource: Resource, action: Action) -> AuthPolicy:
    return AuthPolicy(level=AuthLevel.PERMISSION, resource=resource, action=action)


_FORBIDDEN = ErrorSpec(status=403, description="Access denied")
_VALIDATION = ErrorSpec(status=400, description="Validation error")


def _not_found(name: str) -> ErrorSpec:
    return ErrorSpec(status=404, description=f"{name} not found")


def _conflict(description: str) -> ErrorSpec:
    return ErrorSpec(status=409, description=description)


# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Employees Resource (9 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/employees",
        handler=list_employees,
        resource="employees",
        tags=["Employees"],
        summary="List employees",
        description="List employees visible to the caller.",
        operation_id="list_employees",
        response_model=EmployeeListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/employees/{employee_id}",
        handler=get_employee,
        resource="employees",
        tags=["Employees"],
        summary="Get employee",
        operation_id="get_employee",
        response_model=EmployeeResponse,
        errors=[_FORBIDDEN, _not_found("Employee")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/employees/{employee_id}/goals",
        handler=list_employee_goals,
        resource="employees",
        tags=["Employees"],
        summary="List employee goals",
        operation_id="list_employee_goals",
        response_model=GoalListResponse,
        errors=[_FORBIDDEN],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/employees",
        handler=create_employee,
        resource="employees",
        tags=["Employees"],
        summary="Create employee",
        operation_id="create_employee",
        response_model=EmployeeResponse,
        status_code=201,
        errors=[_VALIDATION, _FORBIDDEN, _conflict("Email already in use")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_permission(Resource.EMPLOYEES, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/employees/{employee_id}",
        handler=update_employee,
        resource="employees",
        tags=["Employees"],
        summary="Update employee",
        description="HR Admins may update anyone; Managers only direct reports.",
        operation_id="update_employee",
        response_model=EmployeeResponse,
        errors=[
            _VALIDATION,
            _FORBIDDEN,
            _not_found("Employee"),
            _conflict("Email already in use"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/employees/{employee_id}",
        handler=delete_employee,
        resource="employees",
        tags=["Employees"],
        summary="Delete employee",
        operation_id="delete_employee",
        response_model=None,
        status_code=204,
        errors=[_FORBIDDEN, _not_found("Employee")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.EMPLOYEES, Action.DELETE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/employees/{employee_id}/skills",
        handler=list_employee_skills,
        resource="employees",
        tags=["Employees"],
        summary="List employee skills",
        operation_id="list_employee_skills",
        response_model=EmployeeSkillListResponse,
        errors=[_FORBIDDEN],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/employees/{employee_id}/skills",
        handler=assign_employee_skill,
        resource="employees",
        tags=["Employees"],
        summary="Assign employee skill",
        description="HR Admins may assign to anyone; Managers only to direct reports.",
        operation_id="assign_employee_skill",
        response_model=EmployeeSkillResponse,
        status_code=201,
        errors=[
            _VALIDATION,
            _FORBIDDEN,
            _not_found("Employee"),
            _conflict("Employee already holds this skill"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/employees/{employee_id}/skills/{skill_id}",
        handler=remove_employee_skill,
        resource="employees",
        tags=["Employees"],
        summary="Remove employee skill",
        operation_id="remove_employee_skill",
        response_model=None,
        status_code=204,
        errors=[_FORBIDDEN, _not_found("Employee skill")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Goals Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/goals",
        handler=list_goals,
        resource="goals",
        tags=["Goals"],
        summary="List goals",
        operation_id="list_goals",
        response_model=GoalListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/goals/{goal_id}",
        handler=get_goal,
        resource="goals",
        tags=["Goals"],
        summary="Get goal",
        operation_id="get_goal",
        response_model=GoalResponse,
        errors=[_FORBIDDEN, _not_found("Goal")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/goals",
        handler=create_goal,
        resource="goals",
        tags=["Goals"],
        summary="Create goal",
        operation_id="create_goal",
        response_model=GoalResponse,
        status_code=201,
        errors=[_VALIDATION, _FORBIDDEN],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_permission(Resource.GOALS, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/goals/{goal_id}",
        handler=update_goal,
        resource="goals",
        tags=["Goals"],
        summary="Update goal",
        operation_id="update_goal",
        response_model=GoalResponse,
        errors=[_VALIDATION, _FORBIDDEN, _not_found("Goal")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/goals/{goal_id}",
        handler=delete_goal,
        resource="goals",
        tags=["Goals"],
        summary="Delete goal",
        operation_id="delete_goal",
        response_model=None,
        status_code=204,
        errors=[_FORBIDDEN, _not_found("Goal")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.GOALS, Action.DELETE),
    ),
    # =========================================================================
    # Reviews Resource (10 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews",
        handler=list_reviews,
        resource="reviews",
        tags=["Reviews"],
        summary="List reviews",
        operation_id="list_reviews",
        response_model=ReviewListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews/cycle/{cycle_id}",
        handler=list_cycle_reviews,
        resource="reviews",
        tags=["Reviews"],
        summary="List cycle reviews",
        description="Reviews of one cycle filtered to the caller's access scope.",
        operation_id="list_cycle_reviews",
        response_model=ReviewListResponse,
        errors=[_not_found("Review cycle")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews/reviewee/{employee_id}",
        handler=list_reviewee_reviews,
        resource="reviews",
        tags=["Reviews"],
        summary="List reviews by reviewee",
        operation_id="list_reviewee_reviews",
        response_model=ReviewListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews/reviewer/{employee_id}",
        handler=list_reviewer_reviews,
        resource="reviews",
        tags=["Reviews"],
        summary="List reviews by reviewer",
        operation_id="list_reviewer_reviews",
        response_model=ReviewListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews/{review_id}",
        handler=get_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Get review",
        operation_id="get_review",
        response_model=ReviewResponse,
        errors=[_FORBIDDEN, _not_found("Review")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reviews",
        handler=create_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Create review",
        operation_id="create_review",
        response_model=ReviewResponse,
        status_code=201,
        errors=[_VALIDATION, _FORBIDDEN],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_permission(Resource.REVIEWS, Action.CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/reviews/{review_id}",
        handler=update_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Update review",
        operation_id="update_review",
        response_model=ReviewResponse,
        errors=[
            _VALIDATION,
            _FORBIDDEN,
            _not_found("Review"),
            ErrorSpec(status=409, description="Review is locked"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/reviews/{review_id}/lock",
        handler=lock_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Lock review",
        operation_id="lock_review",
        response_model=ReviewResponse,
        errors=[_FORBIDDEN, _not_found("Review")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/reviews/{review_id}/unlock",
        handler=unlock_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Unlock review",
        operation_id="unlock_review",
        response_model=ReviewResponse,
        errors=[_FORBIDDEN, _not_found("Review")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/reviews/{review_id}",
        handler=delete_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Delete review",
        operation_id="delete_review",
        response_model=None,
        status_code=204,
        errors=[_FORBIDDEN, _not_found("Review")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.REVIEWS, Action.DELETE),
    ),
    # =========================================================================
    # Departments Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/departments",
        handler=list_departments,
        resource="departments",
        tags=["Departments"],
        summary="List departments",
        operation_id="list_departments",
        response_model=DepartmentListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/departments/{department_id}",
        handler=get_department,
        resource="departments",
        tags=["Departments"],
        summary="Get department",
        operation_id="get_department",
        response_model=DepartmentResponse,
        errors=[_not_found("Department")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/departments/{department_id}/employees",
        handler=list_department_employees,
        resource="departments",
        tags=["Departments"],
        summary="List department employees",
        description="Department members filtered to the caller's access scope.",
        operation_id="list_department_employees",
        response_model=EmployeeListResponse,
        errors=[_not_found("Department")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/departments",
        handler=create_department,
        resource="departments",
        tags=["Departments"],
        summary="Create department",
        operation_id="create_department",
        response_model=DepartmentResponse,
        status_code=201,
        errors=[_VALIDATION, _FORBIDDEN, _conflict("Name already in use")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_permission(Resource.DEPARTMENTS, Action.MANAGE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/departments/{department_id}",
        handler=update_department,
        resource="departments",
        tags=["Departments"],
        summary="Update department",
        operation_id="update_department",
        response_model=DepartmentResponse,
        errors=[
            _VALIDATION,
            _FORBIDDEN,
            _not_found("Department"),
            _conflict("Name already in use"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.DEPARTMENTS, Action.MANAGE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/departments/{department_id}",
        handler=delete_department,
        resource="departments",
        tags=["Departments"],
        summary="Delete department",
        operation_id="delete_department",
        response_model=None,
        status_code=204,
        errors=[_FORBIDDEN, _not_found("Department")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.DEPARTMENTS, Action.MANAGE),
    ),
    # =========================================================================
    # Skills Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/skills",
        handler=list_skills,
        resource="skills",
        tags=["Skills"],
        summary="List skills",
        operation_id="list_skills",
        response_model=SkillListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/skills/{skill_id}",
        handler=get_skill,
        resource="skills",
        tags=["Skills"],
        summary="Get skill",
        operation_id="get_skill",
        response_model=SkillResponse,
        errors=[_not_found("Skill")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/skills/{skill_id}/employees",
        handler=list_skill_employees,
        resource="skills",
        tags=["Skills"],
        summary="List skill holders",
        description="Holders of a skill filtered to the caller's access scope.",
        operation_id="list_skill_employees",
        response_model=EmployeeSkillListResponse,
        errors=[_not_found("Skill")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/skills",
        handler=create_skill,
        resource="skills",
        tags=["Skills"],
        summary="Create skill",
        operation_id="create_skill",
        response_model=SkillResponse,
        status_code=201,
        errors=[_VALIDATION, _FORBIDDEN, _conflict("Name already in use")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_permission(Resource.SKILLS, Action.MANAGE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/skills/{skill_id}",
        handler=update_skill,
        resource="skills",
        tags=["Skills"],
        summary="Update skill",
        operation_id="update_skill",
        response_model=SkillResponse,
        errors=[
            _VALIDATION,
            _FORBIDDEN,
            _not_found("Skill"),
            _conflict("Name already in use"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.SKILLS, Action.MANAGE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/skills/{skill_id}",
        handler=delete_skill,
        resource="skills",
        tags=["Skills"],
        summary="Delete skill",
        operation_id="delete_skill",
        response_model=None,
        status_code=204,
        errors=[_FORBIDDEN, _not_found("Skill")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.SKILLS, Action.MANAGE),
    ),
    # =========================================================================
    # Review Cycles Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/review-cycles",
        handler=list_review_cycles,
        resource="review_cycles",
        tags=["Review Cycles"],
        summary="List review cycles",
        operation_id="list_review_cycles",
        response_model=ReviewCycleListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/review-cycles/{cycle_id}",
        handler=get_review_cycle,
        resource="review_cycles",
        tags=["Review Cycles"],
        summary="Get review cycle",
        operation_id="get_review_cycle",
        response_model=ReviewCycleResponse,
        errors=[_not_found("Review cycle")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/review-cycles",
        handler=create_review_cycle,
        resource="review_cycles",
        tags=["Review Cycles"],
        summary="Create review cycle",
        operation_id="create_review_cycle",
        response_model=ReviewCycleResponse,
        status_code=201,
        errors=[_VALIDATION, _FORBIDDEN, _conflict("Name already in use")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_permission(Resource.REVIEW_CYCLES, Action.MANAGE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/review-cycles/{cycle_id}",
        handler=update_review_cycle,
        resource="review_cycles",
        tags=["Review Cycles"],
        summary="Update review cycle",
        operation_id="update_review_cycle",
        response_model=ReviewCycleResponse,
        errors=[
            _VALIDATION,
            _FORBIDDEN,
            _not_found("Review cycle"),
            _conflict("Name already in use"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.REVIEW_CYCLES, Action.MANAGE),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/review-cycles/{cycle_id}",
        handler=delete_review_cycle,
        resource="review_cycles",
        tags=["Review Cycles"],
        summary="Delete review cycle",
        operation_id="delete_review_cycle",
        response_model=None,
        status_code=204,
        errors=[
            _FORBIDDEN,
            _not_found("Review cycle"),
            _conflict("Review cycle still has reviews"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_permission(Resource.REVIEW_CYCLES, Action.MANAGE),
    ),
    # =========================================================================
    # Me Resource (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/me/permissions",
        handler=get_my_permissions,
        resource="me",
        tags=["Me"],
        summary="Get my permissions",
        description="Role, access scopes and capability flags of the caller.",
        operation_id="get_my_permissions",
        response_model=PermissionSummaryResponse,
        errors=[ErrorSpec(status=401, description="Not authenticated")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
]
