"""Review use cases with access checks.

A review is visible iff its reviewer or its reviewee is in the caller's
AccessScope (HR Admins see all, including reviews with neither side set).
Locked reviews reject edits until unlocked. Writes must point at an
existing review cycle and at existing employees.

The per-cycle, per-reviewee and per-reviewer listings apply the same
visibility rule as the full list.
"""

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    forbidden,
    invalid_reference,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import Review
from src.domain.enums import Action, Resource
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.catalog_repositories import ReviewCycleRepository
from src.domain.protocols.employee_directory import EmployeeDirectory
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.review_repository import ReviewRepository


class ReviewService:
    """Review reads and writes gated by the authorization engine."""

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        reviews: ReviewRepository,
        employees: EmployeeDirectory,
        cycles: ReviewCycleRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._authz = authorization
        self._reviews = reviews
        self._employees = employees
        self._cycles = cycles
        self._logger = logger

    async def list_reviews(self, user_id: int) -> list[Review]:
        scope = await self._authz.get_access_scope(user_id)
        return scope.filter_reviews(await self._reviews.list_all())

    async def get_review(self, user_id: int, review_id: int) -> Result[Review, ApplicationError]:
        review = await self._reviews.find_by_id(review_id)
        if review is None:
            return Failure(error=not_found("review", review_id))

        scope = await self._authz.get_access_scope(user_id)
        if not scope.includes_review(review):
            return Failure(error=forbidden())
        return Success(value=review)

    async def list_reviews_by_cycle(
        self, user_id: int, cycle_id: int
    ) -> Result[list[Review], ApplicationError]:
        """List the visible reviews of one cycle.

        Args:
            user_id: Authenticated user id.
            cycle_id: Review cycle to list.

        Returns:
            Success(list[Review]) filtered by AccessScope, or
            Failure(NOT_FOUND) for an unknown cycle.
        """
        if await self._cycles.find_by_id(cycle_id) is None:
            return Failure(error=not_found("review_cycle", cycle_id))

        scope = await self._authz.get_access_scope(user_id)
        return Success(value=scope.filter_reviews(await self._reviews.list_by_cycle(cycle_id)))

    async def list_reviews_by_reviewee(self, user_id: int, employee_id: int) -> list[Review]:
        scope = await self._authz.get_access_scope(user_id)
        return scope.filter_reviews(await self._reviews.list_by_reviewee(employee_id))

    async def list_reviews_by_reviewer(self, user_id: int, employee_id: int) -> list[Review]:
        scope = await self._authz.get_access_scope(user_id)
        return scope.filter_reviews(await self._reviews.list_by_reviewer(employee_id))

    async def create_review(
        self, user_id: int, review: Review
    ) -> Result[Review, ApplicationError]:
        """Create a review (Manager or HR Admin).

        The new review must itself be visible to the caller.

        Args:
            user_id: Authenticated user id.
            review: New review (id ignored).

        Returns:
            Success(Review) with assigned id, or Failure with FORBIDDEN /
            COMMAND_VALIDATION_FAILED (unknown cycle or employee).
        """
        if not await self._authz.can_create_reviews(user_id):
            return Failure(error=forbidden())

        scope = await self._authz.get_access_scope(user_id)
        if not scope.includes_review(review):
            return Failure(error=forbidden())

        invalid = await self._validate_references(review)
        if invalid is not None:
            return Failure(error=invalid)

        created = await self._reviews.add(review)
        self._logger.info("review_created", review_id=created.id, user_id=user_id)
        return Success(value=created)

    async def update_review(
        self, user_id: int, review: Review
    ) -> Result[Review, ApplicationError]:
        """Update a review.

        Checks, in order: exists, reviews:edit, current review in scope,
        not locked, proposed review in scope, cycle and employees exist.

        Args:
            user_id: Authenticated user id.
            review: Review carrying the id to update and the new fields.
                Its is_locked value is ignored; use set_locked.

        Returns:
            Success(Review), or Failure with NOT_FOUND / FORBIDDEN / CONFLICT /
            COMMAND_VALIDATION_FAILED.
        """
        existing = await self._reviews.find_by_id(review.id)
        if existing is None:
            return Failure(error=not_found("review", review.id))

        if not await self._authz.has_permission(user_id, Resource.REVIEWS, Action.EDIT):
            return Failure(error=forbidden())

        scope = await self._authz.get_access_scope(user_id)
        if not scope.includes_review(existing):
            return Failure(error=forbidden())

        if existing.is_locked:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message="Review is locked",
                    details={"review_id": str(review.id)},
                )
            )

        if not scope.includes_review(review):
            return Failure(error=forbidden())

        invalid = await self._validate_references(review)
        if invalid is not None:
            return Failure(error=invalid)

        review.is_locked = existing.is_locked
        updated = await self._reviews.update(review)
        if updated is None:
            return Failure(error=not_found("review", review.id))

        self._logger.info("review_updated", review_id=updated.id, user_id=user_id)
        return Success(value=updated)

    async def set_locked(
        self, user_id: int, review_id: int, locked: bool
    ) -> Result[Review, ApplicationError]:
        """Lock or unlock a review the caller may edit."""
        existing = await self._reviews.find_by_id(review_id)
        if existing is None:
            return Failure(error=not_found("review", review_id))

        if not await self._authz.has_permission(user_id, Resource.REVIEWS, Action.EDIT):
            return Failure(error=forbidden())

        scope = await self._authz.get_access_scope(user_id)
        if not scope.includes_review(existing):
            return Failure(error=forbidden())

        updated = await self._reviews.set_locked(review_id, locked)
        if updated is None:
            return Failure(error=not_found("review", review_id))

        self._logger.info(
            "review_locked" if locked else "review_unlocked",
            review_id=review_id,
            user_id=user_id,
        )
        return Success(value=updated)

    async def delete_review(self, user_id: int, review_id: int) -> Result[None, ApplicationError]:
        if not await self._authz.has_permission(user_id, Resource.REVIEWS, Action.DELETE):
            return Failure(error=forbidden())

        if not await self._reviews.delete(review_id):
            return Failure(error=not_found("review", review_id))

        self._logger.info("review_deleted", review_id=review_id, user_id=user_id)
        return Success(value=None)

    async def _validate_references(self, review: Review) -> ApplicationError | None:
        if await self._cycles.find_by_id(review.cycle_id) is None:
            return invalid_reference("review_cycle", "cycle_id", review.cycle_id)
        for field, employee_id in (
            ("reviewer_id", review.reviewer_id),
            ("reviewee_id", review.reviewee_id),
        ):
            if employee_id is not None and await self._employees.find_by_id(employee_id) is None:
                return invalid_reference("employee", field, employee_id)
        return None
