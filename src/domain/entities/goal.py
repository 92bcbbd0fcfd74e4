"""Goal domain entity."""

from dataclasses import dataclass
from datetime import date

from src.domain.enums.goal_status import GoalStatus


@dataclass
class Goal:
    """Performance goal owned by a single employee.

    Attributes:
        id: Unique goal identifier.
        employee_id: Owning employee. Visibility follows the owner.
        title: Short goal title.
        description: Longer description.
        status: Lifecycle status.
        progress: Completion percentage 0-100 (None if not tracked).
        start_date: Planned start.
        end_date: Planned end.
        notes: Free-form notes.
    """

    id: int
    employee_id: int
    title: str
    description: str | None = None
    status: GoalStatus = GoalStatus.NOT_STARTED
    progress: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None
