"""Departments resource handlers.

Reads are open to every role; writes require HR Admin.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import DepartmentService
from src.core.container import get_department_service
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.catalog_schemas import (
    DepartmentListResponse,
    DepartmentRequest,
    DepartmentResponse,
)
from src.schemas.employee_schemas import EmployeeListResponse


async def list_departments(
    request: Request,
    current_user: AuthenticatedUser,
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentListResponse | JSONResponse:
    """List departments.

    GET /api/v1/departments → 200 OK
    """
    result = await service.list_items(current_user.user_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DepartmentListResponse.from_entities(result.value)


async def get_department(
    request: Request,
    current_user: AuthenticatedUser,
    department_id: Annotated[int, Path(description="Department id")],
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentResponse | JSONResponse:
    """Get a specific department.

    GET /api/v1/departments/{id} → 200 OK
    """
    result = await service.get_item(current_user.user_id, department_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DepartmentResponse.from_entity(result.value)


async def list_department_employees(
    request: Request,
    current_user: AuthenticatedUser,
    department_id: Annotated[int, Path(description="Department id")],
    service: DepartmentService = Depends(get_department_service),
) -> EmployeeListResponse | JSONResponse:
    """List a department's members visible to the caller.

    GET /api/v1/departments/{id}/employees → 200 OK
    """
    result = await service.list_members(current_user.user_id, department_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EmployeeListResponse.from_entities(result.value)


async def create_department(
    request: Request,
    current_user: AuthenticatedUser,
    data: DepartmentRequest,
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentResponse | JSONResponse:
    """Create a department.

    POST /api/v1/departments → 201 Created
    """
    result = await service.create_item(current_user.user_id, data.to_entity())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DepartmentResponse.from_entity(result.value)


async def update_department(
    request: Request,
    current_user: AuthenticatedUser,
    department_id: Annotated[int, Path(description="Department id")],
    data: DepartmentRequest,
    service: DepartmentService = Depends(get_department_service),
) -> DepartmentResponse | JSONResponse:
    """Rename a department.

    PUT /api/v1/departments/{id} → 200 OK
    """
    result = await service.update_item(
        current_user.user_id, data.to_entity(department_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DepartmentResponse.from_entity(result.value)


async def delete_department(
    request: Request,
    current_user: AuthenticatedUser,
    department_id: Annotated[int, Path(description="Department id")],
    service: DepartmentService = Depends(get_department_service),
) -> Response:
    """Delete a department.

    DELETE /api/v1/departments/{id} → 204 No Content
    """
    result = await service.delete_item(current_user.user_id, department_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
