"""Repository implementations (SQLAlchemy adapters).

Adapters for the domain repository protocols. Each maps between domain
entities and SQLAlchemy models.
"""

from src.infrastructure.persistence.repositories.catalog_repository import (
    DepartmentRepository,
    ReviewCycleRepository,
    SkillRepository,
)
from src.infrastructure.persistence.repositories.employee_repository import (
    EmployeeRepository,
)
from src.infrastructure.persistence.repositories.employee_skill_repository import (
    EmployeeSkillRepository,
)
from src.infrastructure.persistence.repositories.goal_repository import GoalRepository
from src.infrastructure.persistence.repositories.review_repository import (
    ReviewRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "DepartmentRepository",
    "EmployeeRepository",
    "EmployeeSkillRepository",
    "GoalRepository",
    "ReviewCycleRepository",
    "ReviewRepository",
    "SkillRepository",
    "UserRepository",
]
