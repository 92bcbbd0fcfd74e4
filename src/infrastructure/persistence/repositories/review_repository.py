"""ReviewRepository - SQLAlchemy implementation of ReviewRepository protocol."""

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.review import Review
from src.infrastructure.persistence.models.review import Review as ReviewModel


class ReviewRepository:
    """SQLAlchemy implementation of ReviewRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, entity_id: int) -> Review | None:
        model = await self.session.get(ReviewModel, entity_id)
        return self._to_domain(model) if model else None

    async def list_all(self) -> list[Review]:
        result = await self.session.execute(select(ReviewModel).order_by(ReviewModel.id))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_cycle(self, cycle_id: int) -> list[Review]:
        return await self._list_where(ReviewModel.cycle_id == cycle_id)

    async def list_by_reviewee(self, employee_id: int) -> list[Review]:
        return await self._list_where(ReviewModel.reviewee_id == employee_id)

    async def list_by_reviewer(self, employee_id: int) -> list[Review]:
        return await self._list_where(ReviewModel.reviewer_id == employee_id)

    async def add(self, entity: Review) -> Review:
        model = self._to_model(entity)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def update(self, entity: Review) -> Review | None:
        """Update existing review, including its lock flag.

        Args:
            entity: Review with updated fields.

        Returns:
            Updated review, or None if it does not exist.
        """
        model = await self.session.get(ReviewModel, entity.id)
        if model is None:
            return None

        model.cycle_id = entity.cycle_id
        model.reviewer_id = entity.reviewer_id
        model.reviewee_id = entity.reviewee_id
        model.rating = entity.rating
        model.comments = entity.comments
        model.is_locked = entity.is_locked

        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def set_locked(self, review_id: int, locked: bool) -> Review | None:
        model = await self.session.get(ReviewModel, review_id)
        if model is None:
            return None
        model.is_locked = locked
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def delete(self, entity_id: int) -> bool:
        model = await self.session.get(ReviewModel, entity_id)
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.commit()
        return True

    async def _list_where(self, condition: ColumnElement[bool]) -> list[Review]:
        stmt = select(ReviewModel).where(condition).order_by(ReviewModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    def _to_domain(self, model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            cycle_id=model.cycle_id,
            reviewer_id=model.reviewer_id,
            reviewee_id=model.reviewee_id,
            rating=model.rating,
            comments=model.comments,
            is_locked=model.is_locked,
        )

    def _to_model(self, review: Review) -> ReviewModel:
        return ReviewModel(
            cycle_id=review.cycle_id,
            reviewer_id=review.reviewer_id,
            reviewee_id=review.reviewee_id,
            rating=review.rating,
            comments=review.comments,
            is_locked=review.is_locked,
        )
