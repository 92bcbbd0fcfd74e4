"""User database model.

Role is stored as the display string ("Employee", "Manager", "HR Admin")
and parsed by the domain entity; unknown strings are kept as-is so the
authorization engine can deny them.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """Login account linked to exactly one employee."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
