"""EmployeeSkill domain entity."""

from dataclasses import dataclass


@dataclass
class EmployeeSkill:
    """Link between an employee and a catalog skill.

    An employee holds a given skill at most once.

    Attributes:
        id: Unique link identifier.
        employee_id: Employee holding the skill.
        skill_id: Skill from the catalog.
        proficiency_level: Self or manager assessed level from 1 to 5.
    """

    id: int
    employee_id: int
    skill_id: int
    proficiency_level: int
