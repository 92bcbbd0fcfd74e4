"""Review request and response schemas."""

from pydantic import BaseModel, Field

from src.domain.entities import Review


class ReviewRequest(BaseModel):
    """Create or replace a review.

    Lock state is not part of the request; use the lock/unlock endpoints.

    Attributes:
        cycle_id: Review cycle.
        reviewer_id: Reviewing employee.
        reviewee_id: Reviewed employee.
        rating: Score from 1 to 5.
        comments: Reviewer comments.
    """

    cycle_id: int = Field(..., description="Review cycle id")
    reviewer_id: int | None = Field(None, description="Reviewer employee id")
    reviewee_id: int | None = Field(None, description="Reviewee employee id")
    rating: int | None = Field(None, ge=1, le=5)
    comments: str | None = None

    def to_entity(self, review_id: int = 0) -> Review:
        return Review(
            id=review_id,
            cycle_id=self.cycle_id,
            reviewer_id=self.reviewer_id,
            reviewee_id=self.reviewee_id,
            rating=self.rating,
            comments=self.comments,
        )


class ReviewResponse(BaseModel):
    """Single review response."""

    id: int
    cycle_id: int
    reviewer_id: int | None = None
    reviewee_id: int | None = None
    rating: int | None = None
    comments: str | None = None
    is_locked: bool

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewResponse":
        return cls(
            id=review.id,
            cycle_id=review.cycle_id,
            reviewer_id=review.reviewer_id,
            reviewee_id=review.reviewee_id,
            rating=review.rating,
            comments=review.comments,
            is_locked=review.is_locked,
        )


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]
    total_count: int

    @classmethod
    def from_entities(cls, reviews: list[Review]) -> "ReviewListResponse":
        return cls(
            reviews=[ReviewResponse.from_entity(r) for r in reviews],
            total_count=len(reviews),
        )
