"""Shared pytest fixtures.

Environment variables are set before anything under src is imported,
because src.core.config builds the settings singleton at import time.

Org chart used throughout:

    employees: 1 -> manager 2, 2 (Manager), 3 (HR Admin), 4 -> manager 2
    skills:    1 Python held by employees 1, 3 and 4; 2 SQL held by nobody
    cycles:    1 "Q1 2024" holds every review, 2 "Annual 2024" is empty
    users:     1 Employee/emp 1, 2 Manager/emp 2, 3 HR Admin/emp 3,
               4 unknown role/emp 4, 5 Employee/missing emp 99
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-signing-32-bytes-min")

from datetime import date  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import casbin  # noqa: E402
import pytest  # noqa: E402

from src.application.services.authorization_engine import AuthorizationEngine  # noqa: E402
from src.domain.entities import (  # noqa: E402
    Department,
    Employee,
    EmployeeSkill,
    Goal,
    Review,
    ReviewCycle,
    Skill,
    User,
)
from src.domain.enums import GoalStatus  # noqa: E402
from src.infrastructure.authorization.casbin_adapter import (  # noqa: E402
    CasbinRolePermissions,
    create_enforcer,
)
from tests.utils.in_memory import (  # noqa: E402
    InMemoryDepartmentRepository,
    InMemoryEmployeeRepository,
    InMemoryEmployeeSkillRepository,
    InMemoryGoalRepository,
    InMemoryReviewCycleRepository,
    InMemoryReviewRepository,
    InMemorySkillRepository,
    InMemoryUserStore,
)

EMPLOYEE_USER = 1
MANAGER_USER = 2
HR_USER = 3
UNKNOWN_ROLE_USER = 4
ORPHAN_USER = 5


def build_employees() -> list[Employee]:
    return [
        Employee(id=1, first_name="Erin", last_name="Moss", email="erin@example.com", manager_id=2, department_id=1),
        Employee(id=2, first_name="Mark", last_name="Reyes", email="mark@example.com", department_id=1),
        Employee(id=3, first_name="Hana", last_name="Ito", email="hana@example.com", department_id=2),
        Employee(id=4, first_name="Eli", last_name="Park", email="eli@example.com", manager_id=2, department_id=1),
    ]


def build_users() -> list[User]:
    return [
        User(id=1, username="employee1", role="Employee", employee_id=1),
        User(id=2, username="manager1", role="Manager", employee_id=2),
        User(id=3, username="hradmin1", role="HR Admin", employee_id=3),
        User(id=4, username="contractor1", role="Contractor", employee_id=4),
        User(id=5, username="ghost1", role="Employee", employee_id=99),
    ]


def build_goals() -> list[Goal]:
    return [
        Goal(id=1, employee_id=1, title="Ship onboarding flow", status=GoalStatus.IN_PROGRESS, progress=40),
        Goal(id=2, employee_id=2, title="Grow the team", start_date=date(2024, 1, 1), end_date=date(2024, 12, 31)),
        Goal(id=3, employee_id=3, title="Run review cycle", status=GoalStatus.COMPLETED, progress=100),
        Goal(id=4, employee_id=4, title="Learn SQL"),
    ]


def build_reviews() -> list[Review]:
    return [
        Review(id=1, cycle_id=1, reviewer_id=2, reviewee_id=1, rating=4),
        Review(id=2, cycle_id=1, reviewer_id=2, reviewee_id=4, rating=3),
        Review(id=3, cycle_id=1, reviewer_id=3, reviewee_id=2, rating=5),
        Review(id=4, cycle_id=1),
        Review(id=5, cycle_id=1, reviewer_id=3, reviewee_id=1, is_locked=True),
    ]


def build_cycles() -> list[ReviewCycle]:
    return [
        ReviewCycle(id=1, name="Q1 2024", start_date=date(2024, 1, 1), end_date=date(2024, 3, 31), cycle_type="Quarterly"),
        ReviewCycle(id=2, name="Annual 2024", start_date=date(2024, 1, 1), end_date=date(2024, 12, 31), cycle_type="Annual"),
    ]


def build_employee_skills() -> list[EmployeeSkill]:
    return [
        EmployeeSkill(id=1, employee_id=1, skill_id=1, proficiency_level=3),
        EmployeeSkill(id=2, employee_id=3, skill_id=1, proficiency_level=5),
        EmployeeSkill(id=3, employee_id=4, skill_id=1, proficiency_level=2),
    ]


# =============================================================================
# Collaborators
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture(scope="session")
def enforcer() -> casbin.Enforcer:
    """Casbin enforcer loaded from the shipped model and policy."""
    return create_enforcer()


@pytest.fixture
def role_permissions(enforcer, mock_logger) -> CasbinRolePermissions:
    return CasbinRolePermissions(enforcer=enforcer, logger=mock_logger)


@pytest.fixture
def employee_repo() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository(build_employees())


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore(build_users())


@pytest.fixture
def goal_repo() -> InMemoryGoalRepository:
    return InMemoryGoalRepository(build_goals())


@pytest.fixture
def review_repo() -> InMemoryReviewRepository:
    return InMemoryReviewRepository(build_reviews())


@pytest.fixture
def department_repo() -> InMemoryDepartmentRepository:
    return InMemoryDepartmentRepository(
        [Department(id=1, name="Engineering"), Department(id=2, name="People")]
    )


@pytest.fixture
def skill_repo() -> InMemorySkillRepository:
    return InMemorySkillRepository(
        [
            Skill(id=1, name="Python", description="Backend development"),
            Skill(id=2, name="SQL"),
        ]
    )


@pytest.fixture
def cycle_repo() -> InMemoryReviewCycleRepository:
    return InMemoryReviewCycleRepository(build_cycles())


@pytest.fixture
def employee_skill_repo() -> InMemoryEmployeeSkillRepository:
    return InMemoryEmployeeSkillRepository(build_employee_skills())


@pytest.fixture
def engine(user_store, employee_repo, review_repo, role_permissions, mock_logger):
    """AuthorizationEngine over the in-memory org chart."""
    return AuthorizationEngine(
        users=user_store,
        employees=employee_repo,
        role_permissions=role_permissions,
        logger=mock_logger,
        reviews=review_repo,
    )
