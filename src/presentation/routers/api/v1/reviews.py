"""Reviews resource handlers.

Handler functions for performance review endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_reviews              - List reviews in the caller's scope
    list_cycle_reviews        - List one cycle's visible reviews
    list_reviewee_reviews     - List visible reviews about one employee
    list_reviewer_reviews     - List visible reviews written by one employee
    get_review                - Get one review
    create_review             - Create a review (Manager, HR Admin)
    update_review             - Replace an unlocked review
    lock_review               - Lock a review against edits
    unlock_review             - Unlock a review
    delete_review             - Delete a review (HR Admin)
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import ReviewService
from src.core.container import get_review_service
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.review_schemas import (
    ReviewListResponse,
    ReviewRequest,
    ReviewResponse,
)


async def list_reviews(
    current_user: AuthenticatedUser,
    service: ReviewService = Depends(get_review_service),
) -> ReviewListResponse:
    """List reviews where the reviewer or reviewee is in scope.

    GET /api/v1/reviews → 200 OK
    """
    reviews = await service.list_reviews(current_user.user_id)
    return ReviewListResponse.from_entities(reviews)


async def list_cycle_reviews(
    request: Request,
    current_user: AuthenticatedUser,
    cycle_id: Annotated[int, Path(description="Review cycle id")],
    service: ReviewService = Depends(get_review_service),
) -> ReviewListResponse | JSONResponse:
    """List the reviews of one cycle that the caller may see.

    GET /api/v1/reviews/cycle/{cycle_id} → 200 OK
    """
    result = await service.list_reviews_by_cycle(current_user.user_id, cycle_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewListResponse.from_entities(result.value)


async def list_reviewee_reviews(
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Reviewee employee id")],
    service: ReviewService = Depends(get_review_service),
) -> ReviewListResponse:
    """GET /api/v1/reviews/reviewee/{employee_id} → 200 OK"""
    reviews = await service.list_reviews_by_reviewee(current_user.user_id, employee_id)
    return ReviewListResponse.from_entities(reviews)


async def list_reviewer_reviews(
    current_user: AuthenticatedUser,
    employee_id: Annotated[int, Path(description="Reviewer employee id")],
    service: ReviewService = Depends(get_review_service),
) -> ReviewListResponse:
    """GET /api/v1/reviews/reviewer/{employee_id} → 200 OK"""
    reviews = await service.list_reviews_by_reviewer(current_user.user_id, employee_id)
    return ReviewListResponse.from_entities(reviews)


async def get_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: Annotated[int, Path(description="Review id")],
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse | JSONResponse:
    """Get a specific review.

    GET /api/v1/reviews/{id} → 200 OK
    """
    result = await service.get_review(current_user.user_id, review_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewResponse.from_entity(result.value)


async def create_review(
    request: Request,
    current_user: AuthenticatedUser,
    data: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse | JSONResponse:
    """Create a review.

    POST /api/v1/reviews → 201 Created

    Args:
        request: FastAPI request object.
        current_user: Authenticated user (from JWT).
        data: Review fields.
        service: Review service (injected).

    Returns:
        ReviewResponse, or JSONResponse with RFC 9457 error (403).
    """
    result = await service.create_review(current_user.user_id, data.to_entity())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewResponse.from_entity(result.value)


async def update_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: Annotated[int, Path(description="Review id")],
    data: ReviewRequest,
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse | JSONResponse:
    """Replace a review.

    PUT /api/v1/reviews/{id} → 200 OK

    Returns 409 while the review is locked.
    """
    result = await service.update_review(
        current_user.user_id, data.to_entity(review_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewResponse.from_entity(result.value)


async def _set_locked(
    request: Request,
    user_id: int,
    review_id: int,
    locked: bool,
    service: ReviewService,
) -> ReviewResponse | JSONResponse:
    result = await service.set_locked(user_id, review_id, locked)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewResponse.from_entity(result.value)


async def lock_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: Annotated[int, Path(description="Review id")],
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse | JSONResponse:
    """Lock a review.

    PATCH /api/v1/reviews/{id}/lock → 200 OK
    """
    return await _set_locked(request, current_user.user_id, review_id, True, service)


async def unlock_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: Annotated[int, Path(description="Review id")],
    service: ReviewService = Depends(get_review_service),
) -> ReviewResponse | JSONResponse:
    """Unlock a review.

    PATCH /api/v1/reviews/{id}/unlock → 200 OK
    """
    return await _set_locked(request, current_user.user_id, review_id, False, service)


async def delete_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: Annotated[int, Path(description="Review id")],
    service: ReviewService = Depends(get_review_service),
) -> Response:
    """Delete a review.

    DELETE /api/v1/reviews/{id} → 204 No Content
    """
    result = await service.delete_review(current_user.user_id, review_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
