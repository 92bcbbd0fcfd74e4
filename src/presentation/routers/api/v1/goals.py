"""Goals resource handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import GoalService
from src.core.container import get_goal_service
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.goal_schemas import GoalListResponse, GoalRequest, GoalResponse


async def list_goals(
    current_user: AuthenticatedUser,
    service: GoalService = Depends(get_goal_service),
) -> GoalListResponse:
    """List goals whose owner is in the caller's scope.

    GET /api/v1/goals → 200 OK
    """
    goals = await service.list_goals(current_user.user_id)
    return GoalListResponse.from_entities(goals)


async def get_goal(
    request: Request,
    current_user: AuthenticatedUser,
    goal_id: Annotated[int, Path(description="Goal id")],
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse | JSONResponse:
    """Get a specific goal.

    GET /api/v1/goals/{id} → 200 OK
    """
    result = await service.get_goal(current_user.user_id, goal_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return GoalResponse.from_entity(result.value)


async def create_goal(
    request: Request,
    current_user: AuthenticatedUser,
    data: GoalRequest,
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse | JSONResponse:
    """Create a goal.

    POST /api/v1/goals → 201 Created

    Managers may create goals for themselves and their direct reports.
    """
    result = await service.create_goal(current_user.user_id, data.to_entity())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return GoalResponse.from_entity(result.value)


async def update_goal(
    request: Request,
    current_user: AuthenticatedUser,
    goal_id: Annotated[int, Path(description="Goal id")],
    data: GoalRequest,
    service: GoalService = Depends(get_goal_service),
) -> GoalResponse | JSONResponse:
    """Replace a goal.

    PUT /api/v1/goals/{id} → 200 OK

    Both the current and the requested owner must be in the caller's scope.
    """
    result = await service.update_goal(current_user.user_id, data.to_entity(goal_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return GoalResponse.from_entity(result.value)


async def delete_goal(
    request: Request,
    current_user: AuthenticatedUser,
    goal_id: Annotated[int, Path(description="Goal id")],
    service: GoalService = Depends(get_goal_service),
) -> Response:
    """Delete a goal.

    DELETE /api/v1/goals/{id} → 204 No Content
    """
    result = await service.delete_goal(current_user.user_id, goal_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
