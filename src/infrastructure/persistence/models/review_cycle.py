"""Review cycle database model."""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class ReviewCycle(BaseMutableModel):
    """Named review period (e.g. "Q1 2024")."""

    __tablename__ = "review_cycles"

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    cycle_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
