"""Unit tests for GoalService (visibility follows the goal owner)."""

import pytest

from src.application.errors import ApplicationErrorCode
from src.application.services.goal_service import GoalService
from src.core.result import Failure, Success
from src.domain.entities import Goal
from src.domain.enums import GoalStatus
from tests.conftest import EMPLOYEE_USER, HR_USER, MANAGER_USER, UNKNOWN_ROLE_USER


@pytest.fixture
def service(engine, goal_repo, employee_repo, mock_logger) -> GoalService:
    return GoalService(
        authorization=engine,
        goals=goal_repo,
        employees=employee_repo,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestGoalReads:
    async def test_employee_lists_own_goals(self, service):
        goals = await service.list_goals(EMPLOYEE_USER)

        assert [g.id for g in goals] == [1]

    async def test_manager_lists_team_goals(self, service):
        goals = await service.list_goals(MANAGER_USER)

        assert [g.id for g in goals] == [1, 2, 4]

    async def test_hr_admin_lists_all_goals(self, service):
        goals = await service.list_goals(HR_USER)

        assert len(goals) == 4

    async def test_unknown_role_lists_nothing(self, service):
        assert await service.list_goals(UNKNOWN_ROLE_USER) == []

    async def test_get_goal_outside_scope_forbidden(self, service):
        result = await service.get_goal(MANAGER_USER, 3)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_get_missing_goal_not_found(self, service):
        result = await service.get_goal(EMPLOYEE_USER, 99)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    async def test_get_own_goal(self, service):
        result = await service.get_goal(EMPLOYEE_USER, 1)

        assert isinstance(result, Success)
        assert result.value.status == GoalStatus.IN_PROGRESS


@pytest.mark.unit
class TestGoalWrites:
    async def test_employee_cannot_create(self, service):
        result = await service.create_goal(EMPLOYEE_USER, Goal(id=0, employee_id=1, title="Mine"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_manager_creates_for_direct_report(self, service, mock_logger):
        result = await service.create_goal(MANAGER_USER, Goal(id=0, employee_id=4, title="Ship v2"))

        assert isinstance(result, Success)
        assert result.value.id == 5
        mock_logger.info.assert_called_once_with(
            "goal_created", goal_id=5, employee_id=4, user_id=MANAGER_USER
        )

    async def test_manager_cannot_create_for_outsider(self, service):
        result = await service.create_goal(MANAGER_USER, Goal(id=0, employee_id=3, title="Nope"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_hr_admin_cannot_create_for_unknown_employee(self, service, goal_repo):
        result = await service.create_goal(HR_USER, Goal(id=0, employee_id=99, title="Ghost"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == "Employee does not exist"
        assert result.error.details == {"employee_id": "99"}
        assert len(await goal_repo.list_all()) == 4

    async def test_manager_gets_forbidden_for_unknown_employee(self, service):
        result = await service.create_goal(MANAGER_USER, Goal(id=0, employee_id=99, title="Ghost"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_employee_edits_own_goal(self, service, goal_repo):
        result = await service.update_goal(
            EMPLOYEE_USER, Goal(id=1, employee_id=1, title="Ship onboarding flow", progress=80)
        )

        assert isinstance(result, Success)
        assert (await goal_repo.find_by_id(1)).progress == 80

    async def test_cannot_move_goal_out_of_scope(self, service):
        result = await service.update_goal(
            EMPLOYEE_USER, Goal(id=1, employee_id=2, title="Ship onboarding flow")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_manager_cannot_edit_outsider_goal(self, service):
        result = await service.update_goal(
            MANAGER_USER, Goal(id=3, employee_id=3, title="Run review cycle")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_cannot_move_goal_to_unknown_employee(self, service):
        result = await service.update_goal(HR_USER, Goal(id=3, employee_id=99, title="Run review cycle"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"employee_id": "99"}

    async def test_update_missing_goal_not_found(self, service):
        result = await service.update_goal(HR_USER, Goal(id=42, employee_id=1, title="Ghost"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    async def test_only_hr_admin_deletes(self, service, goal_repo):
        denied = await service.delete_goal(MANAGER_USER, 1)
        allowed = await service.delete_goal(HR_USER, 1)

        assert isinstance(denied, Failure)
        assert allowed == Success(value=None)
        assert await goal_repo.find_by_id(1) is None
