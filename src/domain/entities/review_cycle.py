"""ReviewCycle domain entity."""

from dataclasses import dataclass
from datetime import date


@dataclass
class ReviewCycle:
    """Named period that groups performance reviews.

    Attributes:
        id: Unique cycle identifier.
        name: Display name, unique across cycles (e.g. "Q1 2024").
        start_date: First day of the cycle.
        end_date: Last day of the cycle.
        cycle_type: Free-form cadence label (e.g. "Quarterly", "Annual").
    """

    id: int
    name: str
    start_date: date
    end_date: date
    cycle_type: str | None = None
