"""EmployeeSkillRepository protocol for employee/skill links."""

from typing import Protocol

from src.domain.entities.employee_skill import EmployeeSkill


class EmployeeSkillRepository(Protocol):
    """Employee skill persistence (port)."""

    async def find(self, employee_id: int, skill_id: int) -> EmployeeSkill | None:
        """Find the link between one employee and one skill.

        Args:
            employee_id: Employee holding the skill.
            skill_id: Catalog skill.

        Returns:
            The link if the employee holds the skill, None otherwise.
        """
        ...

    async def list_by_employee(self, employee_id: int) -> list[EmployeeSkill]:
        """Return an employee's skills, ordered by id."""
        ...

    async def list_by_skill(self, skill_id: int) -> list[EmployeeSkill]:
        """Return every holder of a skill, ordered by id."""
        ...

    async def add(self, link: EmployeeSkill) -> EmployeeSkill:
        """Persist a new link and return it with its assigned id."""
        ...

    async def delete(self, link_id: int) -> bool:
        """Delete a link. Returns False if it did not exist."""
        ...
