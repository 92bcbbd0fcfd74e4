"""Employee directory protocols.

EmployeeDirectory is the read-only view the authorization engine needs:
employee records and their direct-manager links. EmployeeRepository adds
the write operations used by the employees API.
"""

from typing import Protocol

from src.domain.entities.employee import Employee


class EmployeeDirectory(Protocol):
    """Read-only employee lookup (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def find_by_id(self, employee_id: int) -> Employee | None:
        """Find employee by ID.

        Args:
            employee_id: Employee's unique identifier.

        Returns:
            Employee if found, None otherwise.
        """
        ...

    async def list_all_ids(self) -> set[int]:
        """Return the ids of every employee in the directory."""
        ...

    async def list_direct_report_ids(self, manager_employee_id: int) -> set[int]:
        """Return ids of employees whose manager_id equals the given id.

        Only direct reports are returned; reports-of-reports are not.

        Args:
            manager_employee_id: Employee id of the manager.

        Returns:
            set[int]: Direct subordinate ids (empty if none).
        """
        ...


class EmployeeRepository(EmployeeDirectory, Protocol):
    """Employee persistence (port) used by the employees API."""

    async def find_by_email(self, email: str) -> Employee | None:
        """Find employee by email (emails are unique).

        Args:
            email: Email address to look up.

        Returns:
            Employee if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[Employee]:
        """Return every employee, ordered by id."""
        ...

    async def list_by_ids(self, employee_ids: set[int]) -> list[Employee]:
        """Return the employees with the given ids, ordered by id."""
        ...

    async def list_by_department(self, department_id: int) -> list[Employee]:
        """Return the employees assigned to a department, ordered by id."""
        ...

    async def add(self, employee: Employee) -> Employee:
        """Persist a new employee and return it with its assigned id."""
        ...

    async def update(self, employee: Employee) -> Employee | None:
        """Overwrite an employee. Returns None if it does not exist."""
        ...

    async def delete(self, employee_id: int) -> bool:
        """Delete an employee. Returns False if it did not exist."""
        ...
