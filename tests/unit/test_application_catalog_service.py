"""Unit tests for the department, skill and review cycle catalogs."""

from datetime import date

import pytest

from src.application.errors import ApplicationErrorCode
from src.application.services.catalog_service import (
    DepartmentService,
    ReviewCycleService,
    SkillService,
)
from src.core.result import Failure, Success
from src.domain.entities import Department, ReviewCycle, Skill
from tests.conftest import EMPLOYEE_USER, HR_USER, MANAGER_USER, UNKNOWN_ROLE_USER


@pytest.fixture
def departments(engine, department_repo, employee_repo, mock_logger) -> DepartmentService:
    return DepartmentService(
        authorization=engine,
        departments=department_repo,
        employees=employee_repo,
        logger=mock_logger,
    )


@pytest.fixture
def skills(engine, skill_repo, mock_logger) -> SkillService:
    return SkillService(authorization=engine, skills=skill_repo, logger=mock_logger)


@pytest.fixture
def cycles(engine, cycle_repo, review_repo, mock_logger) -> ReviewCycleService:
    return ReviewCycleService(
        authorization=engine,
        cycles=cycle_repo,
        reviews=review_repo,
        logger=mock_logger,
    )


def _cycle(**overrides) -> ReviewCycle:
    fields = {
        "id": 0,
        "name": "Q2 2024",
        "start_date": date(2024, 4, 1),
        "end_date": date(2024, 6, 30),
        "cycle_type": "Quarterly",
    }
    fields.update(overrides)
    return ReviewCycle(**fields)


@pytest.mark.unit
class TestDepartmentService:
    async def test_any_known_role_lists_departments(self, departments):
        result = await departments.list_items(EMPLOYEE_USER)

        assert isinstance(result, Success)
        assert [d.name for d in result.value] == ["Engineering", "People"]

    async def test_unknown_role_cannot_list(self, departments):
        result = await departments.list_items(UNKNOWN_ROLE_USER)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_manager_cannot_create(self, departments):
        result = await departments.create_item(MANAGER_USER, Department(id=0, name="Sales"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_hr_admin_creates(self, departments, mock_logger):
        result = await departments.create_item(HR_USER, Department(id=0, name="Sales"))

        assert isinstance(result, Success)
        assert result.value.id == 3
        mock_logger.info.assert_called_once_with("department_created", item_id=3, user_id=HR_USER)

    async def test_duplicate_name_conflicts(self, departments, department_repo):
        result = await departments.create_item(HR_USER, Department(id=0, name="People"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == "Department with this name already exists"
        assert result.error.details == {"name": "People"}
        assert len(await department_repo.list_all()) == 2

    async def test_rename_onto_other_department_conflicts(self, departments):
        result = await departments.update_item(HR_USER, Department(id=1, name="People"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT

    async def test_update_keeping_own_name(self, departments):
        result = await departments.update_item(HR_USER, Department(id=1, name="Engineering"))

        assert result == Success(value=Department(id=1, name="Engineering"))

    async def test_update_missing_department(self, departments):
        result = await departments.update_item(HR_USER, Department(id=9, name="Legal"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.message == "Department not found"

    async def test_get_missing_department(self, departments):
        result = await departments.get_item(EMPLOYEE_USER, 9)

        assert isinstance(result, Failure)
        assert result.error.details == {"department_id": "9"}

    async def test_members_filtered_by_scope(self, departments):
        as_manager = await departments.list_members(MANAGER_USER, 1)
        as_employee = await departments.list_members(EMPLOYEE_USER, 1)

        assert [e.id for e in as_manager.value] == [1, 2, 4]
        assert [e.id for e in as_employee.value] == [1]

    async def test_members_of_missing_department(self, departments):
        result = await departments.list_members(HR_USER, 9)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    async def test_hr_admin_deletes(self, departments, department_repo):
        assert await departments.delete_item(HR_USER, 2) == Success(value=None)
        assert await department_repo.find_by_id(2) is None


@pytest.mark.unit
class TestSkillService:
    async def test_employee_reads_skill(self, skills):
        result = await skills.get_item(EMPLOYEE_USER, 1)

        assert isinstance(result, Success)
        assert result.value.name == "Python"

    async def test_manager_cannot_manage_skills(self, skills):
        result = await skills.create_item(MANAGER_USER, Skill(id=0, name="Go"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_hr_admin_updates_skill(self, skills, skill_repo):
        result = await skills.update_item(
            HR_USER, Skill(id=1, name="Python", description="Services and tooling")
        )

        assert isinstance(result, Success)
        assert (await skill_repo.find_by_id(1)).description == "Services and tooling"

    async def test_duplicate_skill_conflicts(self, skills):
        result = await skills.create_item(HR_USER, Skill(id=0, name="SQL"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == "Skill with this name already exists"

    async def test_name_match_is_exact(self, skills):
        result = await skills.create_item(HR_USER, Skill(id=0, name="python"))

        assert isinstance(result, Success)

    async def test_delete_missing_skill(self, skills):
        result = await skills.delete_item(HR_USER, 5)

        assert isinstance(result, Failure)
        assert result.error.message == "Skill not found"


@pytest.mark.unit
class TestReviewCycleService:
    async def test_every_known_role_lists_cycles(self, cycles):
        result = await cycles.list_items(EMPLOYEE_USER)

        assert isinstance(result, Success)
        assert [c.name for c in result.value] == ["Q1 2024", "Annual 2024"]

    async def test_unknown_role_cannot_read(self, cycles):
        result = await cycles.get_item(UNKNOWN_ROLE_USER, 1)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_manager_cannot_create(self, cycles):
        result = await cycles.create_item(MANAGER_USER, _cycle())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_hr_admin_creates(self, cycles, mock_logger):
        result = await cycles.create_item(HR_USER, _cycle())

        assert isinstance(result, Success)
        assert result.value.id == 3
        mock_logger.info.assert_called_once_with("review_cycle_created", item_id=3, user_id=HR_USER)

    async def test_duplicate_name_conflicts(self, cycles):
        result = await cycles.create_item(HR_USER, _cycle(name="Q1 2024"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == "Review cycle with this name already exists"

    async def test_get_missing_cycle(self, cycles):
        result = await cycles.get_item(HR_USER, 9)

        assert isinstance(result, Failure)
        assert result.error.message == "Review cycle not found"
        assert result.error.details == {"review_cycle_id": "9"}

    async def test_cycle_with_reviews_cannot_be_deleted(self, cycles, cycle_repo):
        result = await cycles.delete_item(HR_USER, 1)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == "Review cycle still has reviews"
        assert await cycle_repo.find_by_id(1) is not None

    async def test_empty_cycle_is_deleted(self, cycles, cycle_repo):
        assert await cycles.delete_item(HR_USER, 2) == Success(value=None)
        assert await cycle_repo.find_by_id(2) is None

    async def test_manager_delete_is_forbidden_before_conflict(self, cycles):
        result = await cycles.delete_item(MANAGER_USER, 1)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
