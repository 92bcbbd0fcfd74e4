"""Department, skill and review cycle catalog use cases.

Catalogs are organization-wide: every known role may read them. Writes
are HR Admin only (can_manage_departments for departments, skills:manage
for skills, review_cycles:manage for cycles). Entry names are unique
within a catalog; a clashing create or rename is a conflict.
"""

from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import Generic, TypeVar

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    already_exists,
    forbidden,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import Department, Employee, ReviewCycle, Skill
from src.domain.enums import Action, Resource
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.catalog_repositories import NamedCatalogRepository
from src.domain.protocols.employee_directory import EmployeeRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.review_repository import ReviewRepository

EntityT = TypeVar("EntityT", Department, Skill, ReviewCycle)


class CatalogService(Generic[EntityT]):
    """CRUD over one catalog with a view permission and a write check.

    Args:
        authorization: Access decisions.
        repository: Catalog persistence.
        resource: Resource used for the view permission.
        name: Singular entry name used in messages and log events.
        can_write: Async predicate deciding write access for a user id.
        logger: Structured logging.
    """

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        repository: NamedCatalogRepository[EntityT],
        resource: Resource,
        name: str,
        can_write: Callable[[int], Awaitable[bool]],
        logger: LoggerProtocol,
    ) -> None:
        self._authz = authorization
        self._repository = repository
        self._resource = resource
        self._name = name
        self._can_write = can_write
        self._logger = logger

    async def list_items(self, user_id: int) -> Result[list[EntityT], ApplicationError]:
        if not await self._authz.has_permission(user_id, self._resource, Action.VIEW):
            return Failure(error=forbidden())
        return Success(value=await self._repository.list_all())

    async def get_item(self, user_id: int, item_id: int) -> Result[EntityT, ApplicationError]:
        if not await self._authz.has_permission(user_id, self._resource, Action.VIEW):
            return Failure(error=forbidden())

        item = await self._repository.find_by_id(item_id)
        if item is None:
            return Failure(error=not_found(self._name, item_id))
        return Success(value=item)

    async def create_item(self, user_id: int, item: EntityT) -> Result[EntityT, ApplicationError]:
        if not await self._can_write(user_id):
            return Failure(error=forbidden())

        if await self._repository.find_by_name(item.name) is not None:
            return Failure(error=already_exists(self._name, "name", item.name))

        created = await self._repository.add(item)
        self._logger.info(f"{self._name}_created", item_id=created.id, user_id=user_id)
        return Success(value=created)

    async def update_item(self, user_id: int, item: EntityT) -> Result[EntityT, ApplicationError]:
        """Replace an entry.

        Checks, in order: write access, exists, name not taken by another
        entry.

        Returns:
            Success(entry), or Failure with FORBIDDEN / NOT_FOUND / CONFLICT.
        """
        if not await self._can_write(user_id):
            return Failure(error=forbidden())

        if await self._repository.find_by_id(item.id) is None:
            return Failure(error=not_found(self._name, item.id))

        holder = await self._repository.find_by_name(item.name)
        if holder is not None and holder.id != item.id:
            return Failure(error=already_exists(self._name, "name", item.name))

        updated = await self._repository.update(replace(item))
        if updated is None:
            return Failure(error=not_found(self._name, item.id))

        self._logger.info(f"{self._name}_updated", item_id=item.id, user_id=user_id)
        return Success(value=updated)

    async def delete_item(self, user_id: int, item_id: int) -> Result[None, ApplicationError]:
        if not await self._can_write(user_id):
            return Failure(error=forbidden())

        blocked = await self._check_delete(item_id)
        if blocked is not None:
            return Failure(error=blocked)

        if not await self._repository.delete(item_id):
            return Failure(error=not_found(self._name, item_id))

        self._logger.info(f"{self._name}_deleted", item_id=item_id, user_id=user_id)
        return Success(value=None)

    async def _check_delete(self, item_id: int) -> ApplicationError | None:
        """Reason an entry may not be deleted, or None."""
        return None


class DepartmentService(CatalogService[Department]):
    """Department catalog, plus the scoped member listing."""

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        departments: NamedCatalogRepository[Department],
        employees: EmployeeRepository,
        logger: LoggerProtocol,
    ) -> None:
        super().__init__(
            authorization=authorization,
            repository=departments,
            resource=Resource.DEPARTMENTS,
            name="department",
            can_write=authorization.can_manage_departments,
            logger=logger,
        )
        self._employees = employees

    async def list_members(
        self, user_id: int, department_id: int
    ) -> Result[list[Employee], ApplicationError]:
        """List a department's employees visible to the caller.

        Args:
            user_id: Authenticated user id.
            department_id: Department to list.

        Returns:
            Success(list[Employee]) filtered by AccessScope, or Failure with
            FORBIDDEN / NOT_FOUND.
        """
        found = await self.get_item(user_id, department_id)
        if isinstance(found, Failure):
            return found

        scope = await self._authz.get_access_scope(user_id)
        members = await self._employees.list_by_department(department_id)
        return Success(value=scope.filter_employees(members))


class SkillService(CatalogService[Skill]):
    """Skill catalog."""

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        skills: NamedCatalogRepository[Skill],
        logger: LoggerProtocol,
    ) -> None:
        async def can_manage_skills(user_id: int) -> bool:
            return await authorization.has_permission(user_id, Resource.SKILLS, Action.MANAGE)

        super().__init__(
            authorization=authorization,
            repository=skills,
            resource=Resource.SKILLS,
            name="skill",
            can_write=can_manage_skills,
            logger=logger,
        )


class ReviewCycleService(CatalogService[ReviewCycle]):
    """Review cycle catalog.

    A cycle that still holds reviews cannot be deleted.
    """

    def __init__(
        self,
        *,
        authorization: AuthorizationProtocol,
        cycles: NamedCatalogRepository[ReviewCycle],
        reviews: ReviewRepository,
        logger: LoggerProtocol,
    ) -> None:
        async def can_manage_cycles(user_id: int) -> bool:
            return await authorization.has_permission(
                user_id, Resource.REVIEW_CYCLES, Action.MANAGE
            )

        super().__init__(
            authorization=authorization,
            repository=cycles,
            resource=Resource.REVIEW_CYCLES,
            name="review_cycle",
            can_write=can_manage_cycles,
            logger=logger,
        )
        self._reviews = reviews

    async def _check_delete(self, item_id: int) -> ApplicationError | None:
        if await self._reviews.list_by_cycle(item_id):
            return ApplicationError(
                code=ApplicationErrorCode.CONFLICT,
                message="Review cycle still has reviews",
                details={"review_cycle_id": str(item_id)},
            )
        return None
