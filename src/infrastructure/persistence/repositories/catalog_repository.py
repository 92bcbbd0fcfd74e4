"""SQLAlchemy repositories for departments, skills and review cycles.

The catalogs share the same CRUD shape, so the mapping-specific parts are
the only thing each subclass supplies.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.department import Department
from src.domain.entities.review_cycle import ReviewCycle
from src.domain.entities.skill import Skill
from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.catalog import (
    Department as DepartmentModel,
    Skill as SkillModel,
)
from src.infrastructure.persistence.models.review_cycle import (
    ReviewCycle as ReviewCycleModel,
)

EntityT = TypeVar("EntityT", Department, Skill, ReviewCycle)
ModelT = TypeVar("ModelT", bound=BaseModel)


class _CatalogRepository(Generic[EntityT, ModelT]):
    model_class: type[Any]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        model = await self.session.get(self.model_class, entity_id)
        return self._to_domain(model) if model else None

    async def find_by_name(self, name: str) -> EntityT | None:
        stmt = select(self.model_class).where(self.model_class.name == name)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_all(self) -> list[EntityT]:
        stmt = select(self.model_class).order_by(self.model_class.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, entity: EntityT) -> EntityT:
        model = self.model_class(**self._fields(entity))
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def update(self, entity: EntityT) -> EntityT | None:
        model = await self.session.get(self.model_class, entity.id)
        if model is None:
            return None
        for name, value in self._fields(entity).items():
            setattr(model, name, value)
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def delete(self, entity_id: int) -> bool:
        model = await self.session.get(self.model_class, entity_id)
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.commit()
        return True

    def _fields(self, entity: EntityT) -> dict[str, Any]:
        raise NotImplementedError

    def _to_domain(self, model: ModelT) -> EntityT:
        raise NotImplementedError


class DepartmentRepository(_CatalogRepository[Department, DepartmentModel]):
    """SQLAlchemy implementation of DepartmentRepository protocol."""

    model_class = DepartmentModel

    def _fields(self, entity: Department) -> dict[str, Any]:
        return {"name": entity.name}

    def _to_domain(self, model: DepartmentModel) -> Department:
        return Department(id=model.id, name=model.name)


class SkillRepository(_CatalogRepository[Skill, SkillModel]):
    """SQLAlchemy implementation of SkillRepository protocol."""

    model_class = SkillModel

    def _fields(self, entity: Skill) -> dict[str, Any]:
        return {"name": entity.name, "description": entity.description}

    def _to_domain(self, model: SkillModel) -> Skill:
        return Skill(id=model.id, name=model.name, description=model.description)


class ReviewCycleRepository(_CatalogRepository[ReviewCycle, ReviewCycleModel]):
    """SQLAlchemy implementation of ReviewCycleRepository protocol."""

    model_class = ReviewCycleModel

    def _fields(self, entity: ReviewCycle) -> dict[str, Any]:
        return {
            "name": entity.name,
            "cycle_type": entity.cycle_type,
            "start_date": entity.start_date,
            "end_date": entity.end_date,
        }

    def _to_domain(self, model: ReviewCycleModel) -> ReviewCycle:
        return ReviewCycle(
            id=model.id,
            name=model.name,
            cycle_type=model.cycle_type,
            start_date=model.start_date,
            end_date=model.end_date,
        )
