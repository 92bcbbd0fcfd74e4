"""Review domain entity."""

from dataclasses import dataclass


@dataclass
class Review:
    """Performance review within a review cycle.

    Either side of the review may be missing (e.g. a reviewer who left the
    organization). A review with neither side set is visible to HR Admins
    only.

    Attributes:
        id: Unique review identifier.
        cycle_id: Review cycle the review belongs to.
        reviewer_id: Employee writing the review (None if unassigned).
        reviewee_id: Employee being reviewed (None if unassigned).
        rating: Score from 1 to 5 (None until submitted).
        comments: Reviewer comments.
        is_locked: Locked reviews cannot be edited until unlocked.
    """

    id: int
    cycle_id: int
    reviewer_id: int | None = None
    reviewee_id: int | None = None
    rating: int | None = None
    comments: str | None = None
    is_locked: bool = False

    def involves(self, employee_id: int) -> bool:
        """Check whether an employee is the reviewer or the reviewee.

        Args:
            employee_id: Employee to test.

        Returns:
            bool: True if the employee is on either side of the review.
        """
        return employee_id in (self.reviewer_id, self.reviewee_id)
