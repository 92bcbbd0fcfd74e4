"""Review cycle resource handlers.

Reads are open to every role; writes require review_cycles:manage. A cycle
that still holds reviews cannot be deleted (409).
Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import ReviewCycleService
from src.core.container import get_review_cycle_service
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.catalog_schemas import (
    ReviewCycleListResponse,
    ReviewCycleRequest,
    ReviewCycleResponse,
)


async def list_review_cycles(
    request: Request,
    current_user: AuthenticatedUser,
    service: ReviewCycleService = Depends(get_review_cycle_service),
) -> ReviewCycleListResponse | JSONResponse:
    """List review cycles.

    GET /api/v1/review-cycles → 200 OK
    """
    result = await service.list_items(current_user.user_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewCycleListResponse.from_entities(result.value)


async def get_review_cycle(
    request: Request,
    current_user: AuthenticatedUser,
    cycle_id: Annotated[int, Path(description="Review cycle id")],
    service: ReviewCycleService = Depends(get_review_cycle_service),
) -> ReviewCycleResponse | JSONResponse:
    """Get a specific review cycle.

    GET /api/v1/review-cycles/{id} → 200 OK
    """
    result = await service.get_item(current_user.user_id, cycle_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewCycleResponse.from_entity(result.value)


async def create_review_cycle(
    request: Request,
    current_user: AuthenticatedUser,
    data: ReviewCycleRequest,
    service: ReviewCycleService = Depends(get_review_cycle_service),
) -> ReviewCycleResponse | JSONResponse:
    """Create a review cycle.

    POST /api/v1/review-cycles → 201 Created
    """
    result = await service.create_item(current_user.user_id, data.to_entity())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewCycleResponse.from_entity(result.value)


async def update_review_cycle(
    request: Request,
    current_user: AuthenticatedUser,
    cycle_id: Annotated[int, Path(description="Review cycle id")],
    data: ReviewCycleRequest,
    service: ReviewCycleService = Depends(get_review_cycle_service),
) -> ReviewCycleResponse | JSONResponse:
    """Replace a review cycle.

    PUT /api/v1/review-cycles/{id} → 200 OK
    """
    result = await service.update_item(
        current_user.user_id, data.to_entity(cycle_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewCycleResponse.from_entity(result.value)


async def delete_review_cycle(
    request: Request,
    current_user: AuthenticatedUser,
    cycle_id: Annotated[int, Path(description="Review cycle id")],
    service: ReviewCycleService = Depends(get_review_cycle_service),
) -> Response:
    """Delete a review cycle.

    DELETE /api/v1/review-cycles/{id} → 204 No Content
    """
    result = await service.delete_item(current_user.user_id, cycle_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
