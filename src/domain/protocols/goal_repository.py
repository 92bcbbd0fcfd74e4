"""GoalRepository protocol for goal persistence."""

from typing import Protocol

from src.domain.entities.goal import Goal
from src.domain.protocols.repositories import CrudRepository


class GoalRepository(CrudRepository[Goal], Protocol):
    """Goal persistence (port)."""

    async def list_by_employee(self, employee_id: int) -> list[Goal]:
        """Return the goals owned by an employee, ordered by id.

        Args:
            employee_id: Owning employee.

        Returns:
            list[Goal]: Goals (empty if none).
        """
        ...
