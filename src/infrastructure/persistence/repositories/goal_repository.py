"""GoalRepository - SQLAlchemy implementation of GoalRepository protocol."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.goal import Goal
from src.domain.enums import GoalStatus
from src.infrastructure.persistence.models.goal import Goal as GoalModel


class GoalRepository:
    """SQLAlchemy implementation of GoalRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, entity_id: int) -> Goal | None:
        model = await self.session.get(GoalModel, entity_id)
        return self._to_domain(model) if model else None

    async def list_all(self) -> list[Goal]:
        result = await self.session.execute(select(GoalModel).order_by(GoalModel.id))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_employee(self, employee_id: int) -> list[Goal]:
        stmt = (
            select(GoalModel)
            .where(GoalModel.employee_id == employee_id)
            .order_by(GoalModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, entity: Goal) -> Goal:
        model = self._to_model(entity)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def update(self, entity: Goal) -> Goal | None:
        """Update existing goal.

        Args:
            entity: Goal with updated fields (owner may change).

        Returns:
            Updated goal, or None if it does not exist.
        """
        model = await self.session.get(GoalModel, entity.id)
        if model is None:
            return None

        model.employee_id = entity.employee_id
        model.title = entity.title
        model.description = entity.description
        model.status = entity.status.value
        model.progress = entity.progress
        model.start_date = entity.start_date
        model.end_date = entity.end_date
        model.notes = entity.notes

        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def delete(self, entity_id: int) -> bool:
        model = await self.session.get(GoalModel, entity_id)
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.commit()
        return True

    def _to_domain(self, model: GoalModel) -> Goal:
        return Goal(
            id=model.id,
            employee_id=model.employee_id,
            title=model.title,
            description=model.description,
            status=GoalStatus(model.status),
            progress=model.progress,
            start_date=model.start_date,
            end_date=model.end_date,
            notes=model.notes,
        )

    def _to_model(self, goal: Goal) -> GoalModel:
        return GoalModel(
            employee_id=goal.employee_id,
            title=goal.title,
            description=goal.description,
            status=goal.status.value,
            progress=goal.progress,
            start_date=goal.start_date,
            end_date=goal.end_date,
            notes=goal.notes,
        )
