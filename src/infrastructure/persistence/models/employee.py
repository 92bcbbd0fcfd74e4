"""Employee database model.

Fields:
    id, created_at, updated_at: From BaseMutableModel
    first_name, last_name, email: Identity
    manager_id: Self-referencing FK to the direct manager (nullable)
    department_id: FK to departments (nullable)

Indexes:
    - ix_employees_manager_id: direct-report lookups by the authorization engine
    - ix_employees_email: unique email
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Employee(BaseMutableModel):
    """Employee record with a single-level manager link."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    manager_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    department_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
