"""Employee use cases with access checks.

Rules:
    - List: filtered through the caller's AccessScope
    - Read one / read goals: can_access_employee, otherwise forbidden
    - Create / delete: employees:create / employees:delete (HR Admin)
    - Update: not found first, then can_manage_employee
    - Writes: manager and department must exist (400), email must be
      unused by any other employee (409)

Returns Result[T, ApplicationError]; the presentation layer maps failures
to problem-details responses.
"""

from dataclasses import replace

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    already_exists,
    forbidden,
    invalid_reference,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import Employee, Goal
from src.domain.enums import Action, Resource
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.catalog_repositories import DepartmentRepository
from src.domain.protocols.employee_directory import EmployeeRepository
from src.domain.protocols.goal_repository import GoalRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class EmployeeService:
    """Employee reads and writes gated by the authorization engine.

    Dependencies (injected via constructor):
        - AuthorizationProtocol: access decisions
        - EmployeeRepository: employee persistence
        - GoalRepository: goals listed per employee
        - DepartmentRepository: department references on writes
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        employees: EmployeeRepository,
        goals: GoalRepository,
        departments: DepartmentRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._authz = authorization
        self._employees = employees
        self._goals = goals
        self._departments = departments
        self._logger = logger

    async def list_employees(self, user_id: int) -> list[Employee]:
        """List employees visible to the caller.

        One scope snapshot per call; HR Admins get every row.

        Args:
            user_id: Authenticated user id.

        Returns:
            list[Employee]: Visible employees ordered by id.
        """
        scope = await self._authz.get_access_scope(user_id)
        if scope.unrestricted:
            return await self._employees.list_all()
        return await self._employees.list_by_ids(set(scope.employee_ids))

    async def get_employee(
        self, user_id: int, employee_id: int
    ) -> Result[Employee, ApplicationError]:
        """Fetch one employee.

        Access is checked before existence, so non-HR callers cannot learn
        which ids outside their scope exist.

        Args:
            user_id: Authenticated user id.
            employee_id: Employee to fetch.

        Returns:
            Success(Employee), or Failure with FORBIDDEN / NOT_FOUND.
        """
        if not await self._authz.can_access_employee(user_id, employee_id):
            return Failure(error=forbidden())

        employee = await self._employees.find_by_id(employee_id)
        if employee is None:
            return Failure(error=not_found("employee", employee_id))
        return Success(value=employee)

    async def list_employee_goals(
        self, user_id: int, employee_id: int
    ) -> Result[list[Goal], ApplicationError]:
        """List one employee's goals (same access rule as reading the employee)."""
        if not await self._authz.can_access_employee(user_id, employee_id):
            return Failure(error=forbidden())
        return Success(value=await self._goals.list_by_employee(employee_id))

    async def create_employee(
        self, user_id: int, employee: Employee
    ) -> Result[Employee, ApplicationError]:
        """Create an employee (HR Admin only).

        Args:
            user_id: Authenticated user id.
            employee: New employee (id ignored).

        Returns:
            Success(Employee) with assigned id, or Failure with FORBIDDEN /
            COMMAND_VALIDATION_FAILED / CONFLICT.
        """
        if not await self._authz.has_permission(user_id, Resource.EMPLOYEES, Action.CREATE):
            return Failure(error=forbidden())

        invalid = await self._validate_write(employee)
        if invalid is not None:
            return Failure(error=invalid)

        created = await self._employees.add(employee)
        self._logger.info("employee_created", employee_id=created.id, user_id=user_id)
        return Success(value=created)

    async def update_employee(
        self, user_id: int, employee: Employee
    ) -> Result[Employee, ApplicationError]:
        """Update an employee the caller manages.

        Args:
            user_id: Authenticated user id.
            employee: Employee carrying the id to update and the new fields.

        Returns:
            Success(Employee), or Failure with NOT_FOUND / FORBIDDEN /
            COMMAND_VALIDATION_FAILED / CONFLICT.
        """
        existing = await self._employees.find_by_id(employee.id)
        if existing is None:
            return Failure(error=not_found("employee", employee.id))

        if not await self._authz.can_manage_employee(user_id, employee.id):
            return Failure(error=forbidden())

        invalid = await self._validate_write(employee)
        if invalid is not None:
            return Failure(error=invalid)

        updated = await self._employees.update(replace(employee))
        if updated is None:
            return Failure(error=not_found("employee", employee.id))

        self._logger.info("employee_updated", employee_id=updated.id, user_id=user_id)
        return Success(value=updated)

    async def delete_employee(
        self, user_id: int, employee_id: int
    ) -> Result[None, ApplicationError]:
        """Delete an employee (HR Admin only)."""
        if not await self._authz.has_permission(user_id, Resource.EMPLOYEES, Action.DELETE):
            return Failure(error=forbidden())

        if not await self._employees.delete(employee_id):
            return Failure(error=not_found("employee", employee_id))

        self._logger.info("employee_deleted", employee_id=employee_id, user_id=user_id)
        return Success(value=None)

    async def _validate_write(self, employee: Employee) -> ApplicationError | None:
        """Check references and uniqueness for a create or update.

        Reference errors (400) are reported before conflicts (409).
        """
        invalid = await self._validate_manager(employee)
        if invalid is not None:
            return invalid

        if (
            employee.department_id is not None
            and await self._departments.find_by_id(employee.department_id) is None
        ):
            return invalid_reference("department", "department_id", employee.department_id)

        holder = await self._employees.find_by_email(employee.email)
        if holder is not None and holder.id != employee.id:
            return already_exists("employee", "email", employee.email)
        return None

    async def _validate_manager(self, employee: Employee) -> ApplicationError | None:
        if employee.manager_id is None:
            return None
        if employee.manager_id == employee.id:
            return ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message="An employee cannot be their own manager",
                details={"manager_id": str(employee.manager_id)},
            )
        if await self._employees.find_by_id(employee.manager_id) is None:
            return invalid_reference("manager", "manager_id", employee.manager_id)
        return None
