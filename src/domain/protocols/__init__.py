"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import EmployeeDirectory, UserStore
"""

# Service protocols
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_permissions_protocol import RolePermissionsProtocol

# Repository protocols
from src.domain.protocols.catalog_repositories import (
    DepartmentRepository,
    NamedCatalogRepository,
    ReviewCycleRepository,
    SkillRepository,
)
from src.domain.protocols.employee_directory import (
    EmployeeDirectory,
    EmployeeRepository,
)
from src.domain.protocols.employee_skill_repository import EmployeeSkillRepository
from src.domain.protocols.goal_repository import GoalRepository
from src.domain.protocols.repositories import CrudRepository
from src.domain.protocols.review_repository import ReviewRepository
from src.domain.protocols.user_store import UserStore

__all__ = [
    # Service protocols
    "AuthorizationProtocol",
    "LoggerProtocol",
    "RolePermissionsProtocol",
    # Repository protocols
    "CrudRepository",
    "DepartmentRepository",
    "EmployeeDirectory",
    "EmployeeRepository",
    "EmployeeSkillRepository",
    "GoalRepository",
    "NamedCatalogRepository",
    "ReviewCycleRepository",
    "ReviewRepository",
    "SkillRepository",
    "UserStore",
]
