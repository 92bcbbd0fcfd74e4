"""Employee domain entity.

Employees form a single-level reporting hierarchy: an employee's
manager_id points at another employee's id (or is None for top-level
staff such as HR administrators). Reports-of-reports are never followed.
"""

from dataclasses import dataclass


@dataclass
class Employee:
    """Employee record with an optional direct manager.

    Attributes:
        id: Unique employee identifier.
        first_name: Given name.
        last_name: Family name.
        email: Work email address.
        manager_id: Employee id of the direct manager (None if none).
        department_id: Owning department (None if unassigned).
    """

    id: int
    first_name: str
    last_name: str
    email: str
    manager_id: int | None = None
    department_id: int | None = None

    @property
    def full_name(self) -> str:
        """Display name as "First Last"."""
        return f"{self.first_name} {self.last_name}"

    def reports_to(self, manager_employee_id: int) -> bool:
        """Check whether this employee is a direct subordinate of a manager.

        Args:
            manager_employee_id: Employee id of the candidate manager.

        Returns:
            bool: True if manager_id equals the given id.
        """
        return self.manager_id is not None and self.manager_id == manager_employee_id
