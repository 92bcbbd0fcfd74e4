"""ReviewRepository protocol for review persistence."""

from typing import Protocol

from src.domain.entities.review import Review
from src.domain.protocols.repositories import CrudRepository


class ReviewRepository(CrudRepository[Review], Protocol):
    """Review persistence (port)."""

    async def set_locked(self, review_id: int, locked: bool) -> Review | None:
        """Lock or unlock a review.

        Args:
            review_id: Review to change.
            locked: New lock state.

        Returns:
            The updated review, or None if it does not exist.
        """
        ...

    async def list_by_cycle(self, cycle_id: int) -> list[Review]:
        """Return the reviews in a cycle, ordered by id."""
        ...

    async def list_by_reviewee(self, employee_id: int) -> list[Review]:
        """Return the reviews about an employee, ordered by id."""
        ...

    async def list_by_reviewer(self, employee_id: int) -> list[Review]:
        """Return the reviews written by an employee, ordered by id."""
        ...
