"""Application service factories (request-scoped).

Each factory wires a resource service to the request's authorization
engine and repositories.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.authorization import get_authorization_engine
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_department_repository,
    get_employee_repository,
    get_employee_skill_repository,
    get_goal_repository,
    get_review_cycle_repository,
    get_review_repository,
    get_skill_repository,
)

if TYPE_CHECKING:
    from src.application.services import (
        DepartmentService,
        EmployeeService,
        EmployeeSkillService,
        GoalService,
        ReviewCycleService,
        ReviewService,
        SkillService,
    )
    from src.domain.protocols.authorization_protocol import AuthorizationProtocol
    from src.infrastructure.persistence.repositories import (
        DepartmentRepository,
        EmployeeRepository,
        EmployeeSkillRepository,
        GoalRepository,
        ReviewCycleRepository,
        ReviewRepository,
        SkillRepository,
    )


async def get_employee_service(
    authorization: "AuthorizationProtocol" = Depends(get_authorization_engine),
    employees: "EmployeeRepository" = Depends(get_employee_repository),
    goals: "GoalRepository" = Depends(get_goal_repository),
    departments: "DepartmentRepository" = Depends(get_department_repository),
) -> "EmployeeService":
    from src.application.services import EmployeeService

    return EmployeeService(
        authorization=authorization,
        employees=employees,
        goals=goals,
        departments=departments,
        logger=get_logger(),
    )


async def get_employee_skill_service(
    authorization: "AuthorizationProtocol" = Depends(get_authorization_engine),
    employees: "EmployeeRepository" = Depends(get_employee_repository),
    skills: "SkillRepository" = Depends(get_skill_repository),
    employee_skills: "EmployeeSkillRepository" = Depends(get_employee_skill_repository),
) -> "EmployeeSkillService":
    from src.application.services import EmployeeSkillService

    return EmployeeSkillService(
        authorization=authorization,
        employees=employees,
        skills=skills,
        employee_skills=employee_skills,
        logger=get_logger(),
    )


async def get_goal_service(
    authorization: "AuthorizationProtocol" = Depends(get_authorization_engine),
    goals: "GoalRepository" = Depends(get_goal_repository),
    employees: "EmployeeRepository" = Depends(get_employee_repository),
) -> "GoalService":
    from src.application.services import GoalService

    return GoalService(
        authorization=authorization,
        goals=goals,
        employees=employees,
        logger=get_logger(),
    )


async def get_review_service(
    authorization: "AuthorizationProtocol" = Depends(get_authorization_engine),
    reviews: "ReviewRepository" = Depends(get_review_repository),
    employees: "EmployeeRepository" = Depends(get_employee_repository),
    cycles: "ReviewCycleRepository" = Depends(get_review_cycle_repository),
) -> "ReviewService":
    from src.application.services import ReviewService

    return ReviewService(
        authorization=authorization,
        reviews=reviews,
        employees=employees,
        cycles=cycles,
        logger=get_logger(),
    )


async def get_department_service(
    authorization: "AuthorizationProtocol" = Depends(get_authorization_engine),
    departments: "DepartmentRepository" = Depends(get_department_repository),
    employees: "EmployeeRepository" = Depends(get_employee_repository),
) -> "DepartmentService":
    from src.application.services import DepartmentService

    return DepartmentService(
        authorization=authorization,
        departments=departments,
        employees=employees,
        logger=get_logger(),
    )


async def get_skill_service(
    authorization: "AuthorizationProtocol" = Depends(get_authorization_engine),
    skills: "SkillRepository" = Depends(get_skill_repository),
) -> "SkillService":
    from src.application.services import SkillService

    return SkillService(authorization=authorization, skills=skills, logger=get_logger())


async def get_review_cycle_service(
    authorization: "AuthorizationProtocol" = Depends(get_authorization_engine),
    cycles: "ReviewCycleRepository" = Depends(get_review_cycle_repository),
    reviews: "ReviewRepository" = Depends(get_review_repository),
) -> "ReviewCycleService":
    from src.application.services import ReviewCycleService

    return ReviewCycleService(
        authorization=authorization,
        cycles=cycles,
        reviews=reviews,
        logger=get_logger(),
    )
