"""Goal lifecycle status."""

from enum import Enum


class GoalStatus(str, Enum):
    """Status of a performance goal."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
