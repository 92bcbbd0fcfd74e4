"""Unit tests for EmployeeService.

Runs against the in-memory org chart from conftest:
    employees 1 -> mgr 2, 2, 3, 4 -> mgr 2
    users 1 Employee, 2 Manager, 3 HR Admin, 4 unknown role
"""

import pytest

from src.application.errors import ApplicationErrorCode
from src.application.services.employee_service import EmployeeService
from src.core.result import Failure, Success
from src.domain.entities import Employee
from tests.conftest import EMPLOYEE_USER, HR_USER, MANAGER_USER, UNKNOWN_ROLE_USER


@pytest.fixture
def service(engine, employee_repo, goal_repo, department_repo, mock_logger) -> EmployeeService:
    return EmployeeService(
        authorization=engine,
        employees=employee_repo,
        goals=goal_repo,
        departments=department_repo,
        logger=mock_logger,
    )


def _new_employee(**overrides) -> Employee:
    fields = {
        "id": 0,
        "first_name": "Nora",
        "last_name": "Diaz",
        "email": "nora@example.com",
        "manager_id": 2,
        "department_id": 1,
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.mark.unit
class TestListEmployees:
    async def test_employee_sees_only_self(self, service):
        employees = await service.list_employees(EMPLOYEE_USER)

        assert [e.id for e in employees] == [1]

    async def test_manager_sees_self_and_direct_reports(self, service):
        employees = await service.list_employees(MANAGER_USER)

        assert [e.id for e in employees] == [1, 2, 4]

    async def test_hr_admin_sees_everyone(self, service):
        employees = await service.list_employees(HR_USER)

        assert [e.id for e in employees] == [1, 2, 3, 4]

    async def test_unknown_role_sees_nobody(self, service):
        assert await service.list_employees(UNKNOWN_ROLE_USER) == []


@pytest.mark.unit
class TestGetEmployee:
    async def test_manager_reads_direct_report(self, service):
        result = await service.get_employee(MANAGER_USER, 4)

        assert isinstance(result, Success)
        assert result.value.full_name == "Eli Park"

    async def test_employee_cannot_read_colleague(self, service):
        result = await service.get_employee(EMPLOYEE_USER, 2)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_access_checked_before_existence(self, service):
        result = await service.get_employee(EMPLOYEE_USER, 99)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_hr_admin_gets_not_found_for_missing(self, service):
        result = await service.get_employee(HR_USER, 99)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.message == "Employee not found"

    async def test_list_goals_of_direct_report(self, service):
        result = await service.list_employee_goals(MANAGER_USER, 1)

        assert isinstance(result, Success)
        assert [g.id for g in result.value] == [1]

    async def test_list_goals_outside_scope_forbidden(self, service):
        result = await service.list_employee_goals(EMPLOYEE_USER, 3)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN


@pytest.mark.unit
class TestCreateEmployee:
    async def test_hr_admin_creates_employee(self, service, employee_repo, mock_logger):
        result = await service.create_employee(HR_USER, _new_employee())

        assert isinstance(result, Success)
        assert result.value.id == 5
        assert await employee_repo.find_by_id(5) is not None
        mock_logger.info.assert_called_once_with("employee_created", employee_id=5, user_id=HR_USER)

    async def test_manager_cannot_create(self, service):
        result = await service.create_employee(MANAGER_USER, _new_employee())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_unknown_manager_rejected(self, service):
        result = await service.create_employee(HR_USER, _new_employee(manager_id=42))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"manager_id": "42"}

    async def test_unknown_department_rejected(self, service, employee_repo):
        result = await service.create_employee(HR_USER, _new_employee(department_id=9))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == "Department does not exist"
        assert result.error.details == {"department_id": "9"}
        assert len(await employee_repo.list_all()) == 4

    async def test_duplicate_email_conflicts(self, service, employee_repo):
        result = await service.create_employee(HR_USER, _new_employee(email="erin@example.com"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.details == {"email": "erin@example.com"}
        assert len(await employee_repo.list_all()) == 4

    async def test_no_department_is_allowed(self, service):
        result = await service.create_employee(HR_USER, _new_employee(department_id=None))

        assert isinstance(result, Success)


@pytest.mark.unit
class TestUpdateEmployee:
    async def test_manager_updates_direct_report(self, service, employee_repo):
        result = await service.update_employee(
            MANAGER_USER, _new_employee(id=1, first_name="Erin", last_name="Moss-Lee")
        )

        assert isinstance(result, Success)
        stored = await employee_repo.find_by_id(1)
        assert stored.last_name == "Moss-Lee"

    async def test_manager_cannot_update_self(self, service):
        result = await service.update_employee(MANAGER_USER, _new_employee(id=2, manager_id=None))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_employee_cannot_update_self(self, service):
        result = await service.update_employee(EMPLOYEE_USER, _new_employee(id=1))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_missing_employee_is_not_found_first(self, service):
        result = await service.update_employee(EMPLOYEE_USER, _new_employee(id=77))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    async def test_self_management_rejected(self, service):
        result = await service.update_employee(HR_USER, _new_employee(id=4, manager_id=4))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED

    async def test_keeping_own_email_is_not_a_conflict(self, service):
        result = await service.update_employee(
            HR_USER, _new_employee(id=4, first_name="Eli", last_name="Park", email="eli@example.com")
        )

        assert isinstance(result, Success)

    async def test_taking_colleague_email_conflicts(self, service):
        result = await service.update_employee(
            HR_USER, _new_employee(id=4, email="mark@example.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT

    async def test_moving_to_unknown_department_rejected(self, service):
        result = await service.update_employee(MANAGER_USER, _new_employee(id=1, department_id=9))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"department_id": "9"}


@pytest.mark.unit
class TestDeleteEmployee:
    async def test_hr_admin_deletes(self, service, employee_repo):
        result = await service.delete_employee(HR_USER, 4)

        assert result == Success(value=None)
        assert await employee_repo.find_by_id(4) is None

    async def test_manager_cannot_delete(self, service):
        result = await service.delete_employee(MANAGER_USER, 1)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_delete_missing_is_not_found(self, service):
        result = await service.delete_employee(HR_USER, 99)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
