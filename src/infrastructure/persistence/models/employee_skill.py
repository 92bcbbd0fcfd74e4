"""Employee skill database model.

Indexes:
    - uq_employee_skills_employee_skill: one row per (employee, skill)
    - ix_employee_skills_skill_id: holder lookups per skill
"""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class EmployeeSkill(BaseMutableModel):
    """Skill held by an employee at a proficiency level."""

    __tablename__ = "employee_skills"
    __table_args__ = (
        UniqueConstraint("employee_id", "skill_id", name="uq_employee_skills_employee_skill"),
    )

    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    skill_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("skills.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    proficiency_level: Mapped[int] = mapped_column(Integer, nullable=False)
