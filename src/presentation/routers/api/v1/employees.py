"""Employees resource handlers.

Handler functions for employee endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_employees        - List employees visible to the caller
    get_employee          - Get one employee
    list_employee_goals   - List one employee's goals
    create_employee       - Create an employee (HR Admin)
    update_employee       - Replace an employee the caller manages
    delete_employee       - Delete an employee (HR Admin)
    list_employee_skills  - List one employee's skills
    assign_employee_skill - Record a skill for an employee the caller manages
    remove_employee_skill - Remove a skill from an employee the caller manages
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import EmployeeService, EmployeeSkillService
from src.core.container import get_employee_service, get_employee_skill_service
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.employee_schemas import (
    EmployeeListResponse,
    EmployeeRequest,
    EmployeeResponse,
)
from src.schemas.catalog_schemas import (
    EmployeeSkillListResponse,
    EmployeeSkillRequest,
    EmployeeSkillResponse,
)
from src.schemas.goal_schemas import GoalListResponse


async def list_employees(
    current_user: AuthenticatedUser,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeListResponse:
    """List employees the caller may see.

    GET /api/v1/employees → 200 OK

    HR Admins see everyone, Managers see themselves and their direct
    reports, Employees see only themselves.
    """
    employees = await service.list_employees(current_user.user_id)
    return EmployeeListResponse.from_entities(employees)


async def get_employee(
    request: Request,
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Employee id")],
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse | JSONResponse:
    """Get a specific employee.

    GET /api/v1/employees/{id} → 200 OK

    Args:
        request: FastAPI request object.
        current_user: Authenticated user (from JWT).
        employee_id: Employee id.
        service: Employee service (injected).

    Returns:
        EmployeeResponse, or JSONResponse with RFC 9457 error (403/404).
    """
    result = await service.get_employee(current_user.user_id, employee_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EmployeeResponse.from_entity(result.value)


async def list_employee_goals(
    request: Request,
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Employee id")],
    service: EmployeeService = Depends(get_employee_service),
) -> GoalListResponse | JSONResponse:
    """List goals owned by one employee.

    GET /api/v1/employees/{id}/goals → 200 OK
    """
    result = await service.list_employee_goals(current_user.user_id, employee_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return GoalListResponse.from_entities(result.value)


async def create_employee(
    request: Request,
    current_user: AuthenticatedUser,
    data: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse | JSONResponse:
    """Create an employee.

    POST /api/v1/employees → 201 Created

    Args:
        request: FastAPI request object.
        current_user: Authenticated user (from JWT).
        data: New employee fields.
        service: Employee service (injected).

    Returns:
        EmployeeResponse, or JSONResponse with RFC 9457 error (400/403).
    """
    result = await service.create_employee(current_user.user_id, data.to_entity())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EmployeeResponse.from_entity(result.value)


async def update_employee(
    request: Request,
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Employee id")],
    data: EmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse | JSONResponse:
    """Replace an employee record.

    PUT /api/v1/employees/{id} → 200 OK

    HR Admins may update anyone; Managers only their direct reports.
    """
    result = await service.update_employee(
        current_user.user_id, data.to_entity(employee_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EmployeeResponse.from_entity(result.value)


async def delete_employee(
    request: Request,
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Employee id")],
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    """Delete an employee.

    DELETE /api/v1/employees/{id} → 204 No Content
    """
    result = await service.delete_employee(current_user.user_id, employee_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_employee_skills(
    request: Request,
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Employee id")],
    service: EmployeeSkillService = Depends(get_employee_skill_service),
) -> EmployeeSkillListResponse | JSONResponse:
    """List the skills held by one employee.

    GET /api/v1/employees/{id}/skills → 200 OK
    """
    result = await service.list_employee_skills(current_user.user_id, employee_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EmployeeSkillListResponse.from_entities(result.value)


async def assign_employee_skill(
    request: Request,
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Employee id")],
    data: EmployeeSkillRequest,
    service: EmployeeSkillService = Depends(get_employee_skill_service),
) -> EmployeeSkillResponse | JSONResponse:
    """Record a skill for an employee.

    POST /api/v1/employees/{id}/skills → 201 Created

    Returns 400 for an unknown skill and 409 if the employee already
    holds it.
    """
    result = await service.assign_skill(current_user.user_id, data.to_entity(employee_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EmployeeSkillResponse.from_entity(result.value)


async def remove_employee_skill(
    request: Request,
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Employee id")],
    skill_id: Annotated[int, Path(description="Skill id")],
    service: EmployeeSkillService = Depends(get_employee_skill_service),
) -> Response:
    """Remove a skill from an employee.

    DELETE /api/v1/employees/{id}/skills/{skill_id} → 204 No Content
    """
    result = await service.remove_skill(current_user.user_id, employee_id, skill_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
