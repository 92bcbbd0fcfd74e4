"""Database models for persistence layer.

SQLAlchemy models that map to database tables. Domain entities
(dataclasses) live in src/domain/entities/ and are mapped to and from
these models by the repositories.

Models Organization:
    - employee.py: Employees and manager links
    - user.py: Login accounts with role strings
    - goal.py: Goals
    - review.py: Reviews
    - review_cycle.py: Review cycles
    - catalog.py: Departments and skills
    - employee_skill.py: Skills held by employees
"""

from src.infrastructure.persistence.models.catalog import Department, Skill
from src.infrastructure.persistence.models.employee import Employee
from src.infrastructure.persistence.models.employee_skill import EmployeeSkill
from src.infrastructure.persistence.models.goal import Goal
from src.infrastructure.persistence.models.review import Review
from src.infrastructure.persistence.models.review_cycle import ReviewCycle
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Department",
    "Employee",
    "EmployeeSkill",
    "Goal",
    "Review",
    "ReviewCycle",
    "Skill",
    "User",
]
