"""Department domain entity."""

from dataclasses import dataclass


@dataclass
class Department:
    """Organization-wide department.

    Attributes:
        id: Unique department identifier.
        name: Department name.
    """

    id: int
    name: str
