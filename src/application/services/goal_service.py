"""Goal use cases with access checks.

Visibility follows the goal owner: a goal is visible iff its employee_id
is in the caller's AccessScope. Writes additionally need the matching
goals:* permission, and the owner must be an existing employee.
"""

from src.application.errors import (
    ApplicationError,
    forbidden,
    invalid_reference,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import Goal
from src.domain.enums import Action, Resource
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.employee_directory import EmployeeDirectory
from src.domain.protocols.goal_repository import GoalRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class GoalService:
    """Goal reads and writes gated by the authorization engine."""

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        goals: GoalRepository,
        employees: EmployeeDirectory,
        logger: LoggerProtocol,
    ) -> None:
        self._authz = authorization
        self._goals = goals
        self._employees = employees
        self._logger = logger

    async def list_goals(self, user_id: int) -> list[Goal]:
        scope = await self._authz.get_access_scope(user_id)
        return scope.filter_goals(await self._goals.list_all())

    async def get_goal(self, user_id: int, goal_id: int) -> Result[Goal, ApplicationError]:
        goal = await self._goals.find_by_id(goal_id)
        if goal is None:
            return Failure(error=not_found("goal", goal_id))

        scope = await self._authz.get_access_scope(user_id)
        if not scope.includes(goal.employee_id):
            return Failure(error=forbidden())
        return Success(value=goal)

    async def create_goal(self, user_id: int, goal: Goal) -> Result[Goal, ApplicationError]:
        """Create a goal.

        Managers may only create goals for themselves and their direct
        reports; HR Admins for anyone. Employees lack goals:create.

        Args:
            user_id: Authenticated user id.
            goal: New goal (id ignored).

        Returns:
            Success(Goal) with assigned id, or Failure with FORBIDDEN /
            COMMAND_VALIDATION_FAILED (owner does not exist).
        """
        if not await self._authz.has_permission(user_id, Resource.GOALS, Action.CREATE):
            return Failure(error=forbidden())

        scope = await self._authz.get_access_scope(user_id)
        if not scope.includes(goal.employee_id):
            return Failure(error=forbidden())

        if await self._employees.find_by_id(goal.employee_id) is None:
            return Failure(error=invalid_reference("employee", "employee_id", goal.employee_id))

        created = await self._goals.add(goal)
        self._logger.info(
            "goal_created",
            goal_id=created.id,
            employee_id=created.employee_id,
            user_id=user_id,
        )
        return Success(value=created)

    async def update_goal(self, user_id: int, goal: Goal) -> Result[Goal, ApplicationError]:
        """Update a goal.

        Both the current owner and the proposed owner must be in scope, so
        a goal cannot be moved to or from someone the caller cannot see.

        Args:
            user_id: Authenticated user id.
            goal: Goal carrying the id to update and the new fields.

        Returns:
            Success(Goal), or Failure with NOT_FOUND / FORBIDDEN /
            COMMAND_VALIDATION_FAILED.
        """
        existing = await self._goals.find_by_id(goal.id)
        if existing is None:
            return Failure(error=not_found("goal", goal.id))

        if not await self._authz.has_permission(user_id, Resource.GOALS, Action.EDIT):
            return Failure(error=forbidden())

        scope = await self._authz.get_access_scope(user_id)
        if not (scope.includes(existing.employee_id) and scope.includes(goal.employee_id)):
            return Failure(error=forbidden())

        if await self._employees.find_by_id(goal.employee_id) is None:
            return Failure(error=invalid_reference("employee", "employee_id", goal.employee_id))

        updated = await self._goals.update(goal)
        if updated is None:
            return Failure(error=not_found("goal", goal.id))

        self._logger.info("goal_updated", goal_id=updated.id, user_id=user_id)
        return Success(value=updated)

    async def delete_goal(self, user_id: int, goal_id: int) -> Result[None, ApplicationError]:
        if not await self._authz.has_permission(user_id, Resource.GOALS, Action.DELETE):
            return Failure(error=forbidden())

        if not await self._goals.delete(goal_id):
            return Failure(error=not_found("goal", goal_id))

        self._logger.info("goal_deleted", goal_id=goal_id, user_id=user_id)
        return Success(value=None)
