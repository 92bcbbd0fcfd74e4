"""Domain entities.

Entities are plain dataclasses with no framework dependencies.
"""

from src.domain.entities.department import Department
from src.domain.entities.employee import Employee
from src.domain.entities.employee_skill import EmployeeSkill
from src.domain.entities.goal import Goal
from src.domain.entities.principal import Principal
from src.domain.entities.review import Review
from src.domain.entities.review_cycle import ReviewCycle
from src.domain.entities.skill import Skill
from src.domain.entities.user import User

__all__ = [
    "Department",
    "Employee",
    "EmployeeSkill",
    "Goal",
    "Principal",
    "Review",
    "ReviewCycle",
    "Skill",
    "User",
]
