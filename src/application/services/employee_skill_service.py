"""Employee skill use cases with access checks.

Rules:
    - An employee's skills: same access rule as reading the employee
    - A skill's holders: skills:view, then filtered through the caller's
      AccessScope so nobody learns about employees outside it
    - Assign / remove: not found first, then can_manage_employee (the same
      rule as updating the employee)
"""

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    already_exists,
    forbidden,
    invalid_reference,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import EmployeeSkill
from src.domain.enums import Action, Resource
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.catalog_repositories import SkillRepository
from src.domain.protocols.employee_directory import EmployeeDirectory
from src.domain.protocols.employee_skill_repository import EmployeeSkillRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class EmployeeSkillService:
    """Reads and writes of employee/skill links.

    Dependencies (injected via constructor):
        - AuthorizationProtocol: access decisions
        - EmployeeDirectory: employee existence
        - SkillRepository: skill existence
        - EmployeeSkillRepository: link persistence
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        employees: EmployeeDirectory,
        skills: SkillRepository,
        employee_skills: EmployeeSkillRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._authz = authorization
        self._employees = employees
        self._skills = skills
        self._links = employee_skills
        self._logger = logger

    async def list_employee_skills(
        self, user_id: int, employee_id: int
    ) -> Result[list[EmployeeSkill], ApplicationError]:
        if not await self._authz.can_access_employee(user_id, employee_id):
            return Failure(error=forbidden())
        return Success(value=await self._links.list_by_employee(employee_id))

    async def list_skill_holders(
        self, user_id: int, skill_id: int
    ) -> Result[list[EmployeeSkill], ApplicationError]:
        """List the holders of a skill that the caller may see.

        Args:
            user_id: Authenticated user id.
            skill_id: Catalog skill.

        Returns:
            Success(list[EmployeeSkill]) limited to the caller's scope, or
            Failure with FORBIDDEN / NOT_FOUND.
        """
        if not await self._authz.has_permission(user_id, Resource.SKILLS, Action.VIEW):
            return Failure(error=forbidden())

        if await self._skills.find_by_id(skill_id) is None:
            return Failure(error=not_found("skill", skill_id))

        scope = await self._authz.get_access_scope(user_id)
        links = await self._links.list_by_skill(skill_id)
        return Success(value=scope.filter_employee_skills(links))

    async def assign_skill(
        self, user_id: int, link: EmployeeSkill
    ) -> Result[EmployeeSkill, ApplicationError]:
        """Record that an employee holds a skill.

        Args:
            user_id: Authenticated user id.
            link: New link (id ignored).

        Returns:
            Success(EmployeeSkill) with assigned id, or Failure with
            NOT_FOUND / FORBIDDEN / COMMAND_VALIDATION_FAILED / CONFLICT.
        """
        if await self._employees.find_by_id(link.employee_id) is None:
            return Failure(error=not_found("employee", link.employee_id))

        if not await self._authz.can_manage_employee(user_id, link.employee_id):
            return Failure(error=forbidden())

        if await self._skills.find_by_id(link.skill_id) is None:
            return Failure(error=invalid_reference("skill", "skill_id", link.skill_id))

        if await self._links.find(link.employee_id, link.skill_id) is not None:
            return Failure(error=already_exists("employee skill", "skill_id", str(link.skill_id)))

        created = await self._links.add(link)
        self._logger.info(
            "employee_skill_assigned",
            employee_id=created.employee_id,
            skill_id=created.skill_id,
            user_id=user_id,
        )
        return Success(value=created)

    async def remove_skill(
        self, user_id: int, employee_id: int, skill_id: int
    ) -> Result[None, ApplicationError]:
        if await self._employees.find_by_id(employee_id) is None:
            return Failure(error=not_found("employee", employee_id))

        if not await self._authz.can_manage_employee(user_id, employee_id):
            return Failure(error=forbidden())

        link = await self._links.find(employee_id, skill_id)
        if link is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="Employee does not hold this skill",
                    details={"skill_id": str(skill_id)},
                )
            )

        await self._links.delete(link.id)
        self._logger.info(
            "employee_skill_removed",
            employee_id=employee_id,
            skill_id=skill_id,
            user_id=user_id,
        )
        return Success(value=None)
