"""Repository protocols (ports) for domain layer.

This module defines the generic CRUD interface shared by the resource
repositories. Infrastructure provides the SQLAlchemy adapters.

Following hexagonal architecture:
- Domain defines what it needs (protocols/ports)
- Infrastructure provides implementations (adapters)
- Domain has no knowledge of how data is stored

Identifiers:
    Ids are integers assigned by the store. ``add`` ignores any id set on
    the incoming entity and returns the stored copy with its new id.
"""

from typing import Protocol, TypeVar

# Generic type for entities
T = TypeVar("T")


class CrudRepository(Protocol[T]):
    """Base repository protocol defining common operations."""

    async def find_by_id(self, entity_id: int) -> T | None:
        """Find an entity by its ID.

        Args:
            entity_id: The id of the entity to find.

        Returns:
            The entity if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[T]:
        """Return every entity, ordered by id."""
        ...

    async def add(self, entity: T) -> T:
        """Persist a new entity.

        Args:
            entity: Entity to store (its id is ignored).

        Returns:
            The stored entity with its assigned id.
        """
        ...

    async def update(self, entity: T) -> T | None:
        """Overwrite an existing entity.

        Args:
            entity: Entity carrying the id of the row to replace.

        Returns:
            The updated entity, or None if no row has that id.
        """
        ...

    async def delete(self, entity_id: int) -> bool:
        """Delete an entity by id.

        Args:
            entity_id: The id of the entity to delete.

        Returns:
            True if a row was removed, False if it did not exist.
        """
        ...
