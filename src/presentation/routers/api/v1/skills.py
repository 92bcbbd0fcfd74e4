"""Skills resource handlers.

Reads are open to every role; writes require skills:manage. The holder
listing only shows employees in the caller's scope.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import EmployeeSkillService, SkillService
from src.core.container import get_employee_skill_service, get_skill_service
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.catalog_schemas import (
    EmployeeSkillListResponse,
    SkillListResponse,
    SkillRequest,
    SkillResponse,
)


async def list_skills(
    request: Request,
    current_user: AuthenticatedUser,
    service: SkillService = Depends(get_skill_service),
) -> SkillListResponse | JSONResponse:
    """List skills.

    GET /api/v1/skills → 200 OK
    """
    result = await service.list_items(current_user.user_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SkillListResponse.from_entities(result.value)


async def get_skill(
    request: Request,
    current_user: AuthenticatedUser,
    skill_id: Annotated[int, Path(description="Skill id")],
    service: SkillService = Depends(get_skill_service),
) -> SkillResponse | JSONResponse:
    """Get a specific skill.

    GET /api/v1/skills/{id} → 200 OK
    """
    result = await service.get_item(current_user.user_id, skill_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SkillResponse.from_entity(result.value)


async def create_skill(
    request: Request,
    current_user: AuthenticatedUser,
    data: SkillRequest,
    service: SkillService = Depends(get_skill_service),
) -> SkillResponse | JSONResponse:
    """Create a skill.

    POST /api/v1/skills → 201 Created
    """
    result = await service.create_item(current_user.user_id, data.to_entity())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SkillResponse.from_entity(result.value)


async def update_skill(
    request: Request,
    current_user: AuthenticatedUser,
    skill_id: Annotated[int, Path(description="Skill id")],
    data: SkillRequest,
    service: SkillService = Depends(get_skill_service),
) -> SkillResponse | JSONResponse:
    """Replace a skill.

    PUT /api/v1/skills/{id} → 200 OK
    """
    result = await service.update_item(
        current_user.user_id, data.to_entity(skill_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SkillResponse.from_entity(result.value)


async def delete_skill(
    request: Request,
    current_user: AuthenticatedUser,
    skill_id: Annotated[int, Path(description="Skill id")],
    service: SkillService = Depends(get_skill_service),
) -> Response:
    """Delete a skill.

    DELETE /api/v1/skills/{id} → 204 No Content
    """
    result = await service.delete_item(current_user.user_id, skill_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_skill_employees(
    request: Request,
    current_user: AuthenticatedUser,
    skill_id: Annotated[int, Path(description="Skill id")],
    service: EmployeeSkillService = Depends(get_employee_skill_service),
) -> EmployeeSkillListResponse | JSONResponse:
    """List the visible holders of a skill.

    GET /api/v1/skills/{id}/employees → 200 OK
    """
    result = await service.list_skill_holders(current_user.user_id, skill_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EmployeeSkillListResponse.from_entities(result.value)
