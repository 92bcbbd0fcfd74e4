"""Protocols for organization-wide catalogs (departments, skills, cycles).

Catalog entries are identified by a unique name as well as their id, so
every catalog repository can look an entry up by name.
"""

from typing import Protocol, TypeVar

from src.domain.entities.department import Department
from src.domain.entities.review_cycle import ReviewCycle
from src.domain.entities.skill import Skill
from src.domain.protocols.repositories import CrudRepository

T = TypeVar("T")


class NamedCatalogRepository(CrudRepository[T], Protocol[T]):
    """Catalog persistence with unique names (port)."""

    async def find_by_name(self, name: str) -> T | None:
        """Find an entry by its exact name.

        Args:
            name: Catalog entry name.

        Returns:
            The entry if found, None otherwise.
        """
        ...


class DepartmentRepository(NamedCatalogRepository[Department], Protocol):
    """Department persistence (port)."""


class SkillRepository(NamedCatalogRepository[Skill], Protocol):
    """Skill persistence (port)."""


class ReviewCycleRepository(NamedCatalogRepository[ReviewCycle], Protocol):
    """Review cycle persistence (port)."""
