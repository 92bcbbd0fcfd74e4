"""EmployeeSkillRepository - SQLAlchemy implementation of EmployeeSkillRepository protocol."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.employee_skill import EmployeeSkill
from src.infrastructure.persistence.models.employee_skill import (
    EmployeeSkill as EmployeeSkillModel,
)


class EmployeeSkillRepository:
    """SQLAlchemy implementation of EmployeeSkillRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, employee_id: int, skill_id: int) -> EmployeeSkill | None:
        stmt = select(EmployeeSkillModel).where(
            EmployeeSkillModel.employee_id == employee_id,
            EmployeeSkillModel.skill_id == skill_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_employee(self, employee_id: int) -> list[EmployeeSkill]:
        stmt = (
            select(EmployeeSkillModel)
            .where(EmployeeSkillModel.employee_id == employee_id)
            .order_by(EmployeeSkillModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_skill(self, skill_id: int) -> list[EmployeeSkill]:
        stmt = (
            select(EmployeeSkillModel)
            .where(EmployeeSkillModel.skill_id == skill_id)
            .order_by(EmployeeSkillModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, link: EmployeeSkill) -> EmployeeSkill:
        """Create a new link.

        Args:
            link: Link entity (id is assigned by the database).

        Returns:
            The link with its assigned id.
        """
        model = EmployeeSkillModel(
            employee_id=link.employee_id,
            skill_id=link.skill_id,
            proficiency_level=link.proficiency_level,
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def delete(self, link_id: int) -> bool:
        model = await self.session.get(EmployeeSkillModel, link_id)
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.commit()
        return True

    def _to_domain(self, model: EmployeeSkillModel) -> EmployeeSkill:
        return EmployeeSkill(
            id=model.id,
            employee_id=model.employee_id,
            skill_id=model.skill_id,
            proficiency_level=model.proficiency_level,
        )
