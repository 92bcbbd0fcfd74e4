"""Unit tests for ReviewService.

Reviews from conftest:
    1: reviewer 2 -> reviewee 1      2: reviewer 2 -> reviewee 4
    3: reviewer 3 -> reviewee 2      4: neither side set
    5: reviewer 3 -> reviewee 1 (locked)
"""

import pytest

from src.application.errors import ApplicationErrorCode
from src.application.services.review_service import ReviewService
from src.core.result import Failure, Success
from src.domain.entities import Review
from tests.conftest import EMPLOYEE_USER, HR_USER, MANAGER_USER


@pytest.fixture
def service(engine, review_repo, employee_repo, cycle_repo, mock_logger) -> ReviewService:
    return ReviewService(
        authorization=engine,
        reviews=review_repo,
        employees=employee_repo,
        cycles=cycle_repo,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestReviewReads:
    async def test_employee_sees_reviews_about_self(self, service):
        reviews = await service.list_reviews(EMPLOYEE_USER)

        assert [r.id for r in reviews] == [1, 5]

    async def test_manager_sees_reviews_touching_team(self, service):
        reviews = await service.list_reviews(MANAGER_USER)

        assert [r.id for r in reviews] == [1, 2, 3, 5]

    async def test_hr_admin_sees_unassigned_reviews(self, service):
        reviews = await service.list_reviews(HR_USER)

        assert [r.id for r in reviews] == [1, 2, 3, 4, 5]

    async def test_unassigned_review_forbidden_for_manager(self, service):
        result = await service.get_review(MANAGER_USER, 4)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_missing_review_not_found(self, service):
        result = await service.get_review(HR_USER, 99)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestReviewListings:
    async def test_manager_lists_cycle_within_scope(self, service):
        result = await service.list_reviews_by_cycle(MANAGER_USER, 1)

        assert isinstance(result, Success)
        assert [r.id for r in result.value] == [1, 2, 3, 5]

    async def test_empty_cycle_lists_nothing(self, service):
        result = await service.list_reviews_by_cycle(HR_USER, 2)

        assert result == Success(value=[])

    async def test_unknown_cycle_not_found(self, service):
        result = await service.list_reviews_by_cycle(HR_USER, 9)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.message == "Review cycle not found"

    async def test_employee_lists_reviews_about_self(self, service):
        reviews = await service.list_reviews_by_reviewee(EMPLOYEE_USER, 1)

        assert [r.id for r in reviews] == [1, 5]

    async def test_reviewee_listing_outside_scope_is_empty(self, service):
        assert await service.list_reviews_by_reviewee(EMPLOYEE_USER, 2) == []

    async def test_manager_lists_hr_reviews_touching_team(self, service):
        reviews = await service.list_reviews_by_reviewer(MANAGER_USER, 3)

        # Review 3 is about the manager, review 5 about a direct report
        assert [r.id for r in reviews] == [3, 5]

    async def test_hr_admin_lists_by_reviewer(self, service):
        reviews = await service.list_reviews_by_reviewer(HR_USER, 2)

        assert [r.id for r in reviews] == [1, 2]


@pytest.mark.unit
class TestReviewCreate:
    async def test_employee_cannot_create(self, service):
        result = await service.create_review(
            EMPLOYEE_USER, Review(id=0, cycle_id=2, reviewer_id=1, reviewee_id=1)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_manager_creates_review_for_report(self, service):
        result = await service.create_review(
            MANAGER_USER, Review(id=0, cycle_id=2, reviewer_id=2, reviewee_id=4, rating=4)
        )

        assert isinstance(result, Success)
        assert result.value.id == 6
        assert result.value.is_locked is False

    async def test_manager_cannot_create_review_outside_team(self, service):
        result = await service.create_review(
            MANAGER_USER, Review(id=0, cycle_id=2, reviewer_id=3, reviewee_id=3)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN


    async def test_unknown_cycle_rejected(self, service, review_repo):
        result = await service.create_review(
            HR_USER, Review(id=0, cycle_id=9, reviewer_id=3, reviewee_id=2)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == "Review cycle does not exist"
        assert result.error.details == {"cycle_id": "9"}
        assert len(await review_repo.list_all()) == 5

    async def test_unknown_reviewer_rejected(self, service):
        result = await service.create_review(
            HR_USER, Review(id=0, cycle_id=2, reviewer_id=99, reviewee_id=1)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"reviewer_id": "99"}

    async def test_manager_unknown_reviewee_rejected(self, service):
        result = await service.create_review(
            MANAGER_USER, Review(id=0, cycle_id=2, reviewer_id=2, reviewee_id=99)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"reviewee_id": "99"}


@pytest.mark.unit
class TestReviewUpdate:
    async def test_manager_updates_team_review(self, service, review_repo):
        result = await service.update_review(
            MANAGER_USER,
            Review(id=1, cycle_id=1, reviewer_id=2, reviewee_id=1, rating=5, is_locked=True),
        )

        assert isinstance(result, Success)
        stored = await review_repo.find_by_id(1)
        assert stored.rating == 5
        assert stored.is_locked is False

    async def test_employee_cannot_edit(self, service):
        result = await service.update_review(
            EMPLOYEE_USER, Review(id=1, cycle_id=1, reviewer_id=2, reviewee_id=1, rating=5)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_locked_review_conflicts(self, service):
        result = await service.update_review(
            HR_USER, Review(id=5, cycle_id=1, reviewer_id=3, reviewee_id=1, rating=2)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == "Review is locked"

    async def test_cannot_reassign_review_outside_scope(self, service):
        result = await service.update_review(
            MANAGER_USER, Review(id=1, cycle_id=1, reviewer_id=3, reviewee_id=3)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN


    async def test_update_to_unknown_reviewee_rejected(self, service, review_repo):
        result = await service.update_review(
            HR_USER, Review(id=4, cycle_id=1, reviewee_id=99)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"reviewee_id": "99"}
        assert (await review_repo.find_by_id(4)).reviewee_id is None

    async def test_update_to_unknown_cycle_rejected(self, service):
        result = await service.update_review(
            MANAGER_USER, Review(id=1, cycle_id=7, reviewer_id=2, reviewee_id=1)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"cycle_id": "7"}


@pytest.mark.unit
class TestReviewLocking:
    async def test_lock_then_edit_conflicts(self, service):
        locked = await service.set_locked(MANAGER_USER, 1, True)
        edit = await service.update_review(
            MANAGER_USER, Review(id=1, cycle_id=1, reviewer_id=2, reviewee_id=1, rating=1)
        )

        assert isinstance(locked, Success)
        assert locked.value.is_locked is True
        assert isinstance(edit, Failure)
        assert edit.error.code == ApplicationErrorCode.CONFLICT

    async def test_unlock_allows_edit(self, service):
        unlocked = await service.set_locked(HR_USER, 5, False)
        edit = await service.update_review(
            HR_USER, Review(id=5, cycle_id=1, reviewer_id=3, reviewee_id=1, rating=3)
        )

        assert isinstance(unlocked, Success)
        assert isinstance(edit, Success)
        assert edit.value.rating == 3

    async def test_employee_cannot_lock(self, service):
        result = await service.set_locked(EMPLOYEE_USER, 1, True)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_lock_logs_event(self, service, mock_logger):
        await service.set_locked(MANAGER_USER, 2, True)

        mock_logger.info.assert_called_once_with("review_locked", review_id=2, user_id=MANAGER_USER)


@pytest.mark.unit
class TestReviewDelete:
    async def test_manager_cannot_delete(self, service):
        result = await service.delete_review(MANAGER_USER, 1)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_hr_admin_deletes(self, service, review_repo):
        assert await service.delete_review(HR_USER, 4) == Success(value=None)
        assert await review_repo.find_by_id(4) is None
