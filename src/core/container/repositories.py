"""Repository dependency factories.

Request-scoped repository instances. Each request gets fresh repository
instances sharing the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        DepartmentRepository,
        EmployeeRepository,
        EmployeeSkillRepository,
        GoalRepository,
        ReviewCycleRepository,
        ReviewRepository,
        SkillRepository,
        UserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        UserRepository instance (implements UserStore).
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_employee_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "EmployeeRepository":
    """Get employee repository (request-scoped).

    Returns:
        EmployeeRepository instance (implements EmployeeDirectory).
    """
    from src.infrastructure.persistence.repositories import EmployeeRepository

    return EmployeeRepository(session=session)


async def get_goal_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "GoalRepository":
    from src.infrastructure.persistence.repositories import GoalRepository

    return GoalRepository(session=session)


async def get_review_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ReviewRepository":
    from src.infrastructure.persistence.repositories import ReviewRepository

    return ReviewRepository(session=session)


async def get_department_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "DepartmentRepository":
    from src.infrastructure.persistence.repositories import DepartmentRepository

    return DepartmentRepository(session=session)


async def get_skill_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SkillRepository":
    from src.infrastructure.persistence.repositories import SkillRepository

    return SkillRepository(session=session)


async def get_review_cycle_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ReviewCycleRepository":
    from src.infrastructure.persistence.repositories import ReviewCycleRepository

    return ReviewCycleRepository(session=session)


async def get_employee_skill_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "EmployeeSkillRepository":
    from src.infrastructure.persistence.repositories import EmployeeSkillRepository

    return EmployeeSkillRepository(session=session)
