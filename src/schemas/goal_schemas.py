"""Goal request and response schemas."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from src.domain.entities import Goal
from src.domain.enums import GoalStatus


class GoalRequest(BaseModel):
    """Create or replace a goal.

    Attributes:
        employee_id: Owning employee.
        title: Short goal title.
        description: Longer description.
        status: Lifecycle status.
        progress: Completion percentage (0-100).
        start_date: Planned start.
        end_date: Planned end (not before start_date).
        notes: Free-form notes.
    """

    employee_id: int = Field(..., description="Owning employee id")
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    status: GoalStatus = GoalStatus.NOT_STARTED
    progress: int | None = Field(None, ge=0, le=100)
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "GoalRequest":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def to_entity(self, goal_id: int = 0) -> Goal:
        return Goal(
            id=goal_id,
            employee_id=self.employee_id,
            title=self.title,
            description=self.description,
            status=self.status,
            progress=self.progress,
            start_date=self.start_date,
            end_date=self.end_date,
            notes=self.notes,
        )


class GoalResponse(BaseModel):
    """Single goal response."""

    id: int
    employee_id: int
    title: str
    description: str | None = None
    status: GoalStatus
    progress: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None

    @classmethod
    def from_entity(cls, goal: Goal) -> "GoalResponse":
        return cls(
            id=goal.id,
            employee_id=goal.employee_id,
            title=goal.title,
            description=goal.description,
            status=goal.status,
            progress=goal.progress,
            start_date=goal.start_date,
            end_date=goal.end_date,
            notes=goal.notes,
        )


class GoalListResponse(BaseModel):
    goals: list[GoalResponse]
    total_count: int

    @classmethod
    def from_entities(cls, goals: list[Goal]) -> "GoalListResponse":
        return cls(goals=[GoalResponse.from_entity(g) for g in goals], total_count=len(goals))
