"""UserStore protocol for resolving authenticated users."""

from typing import Protocol

from src.domain.entities.user import User


class UserStore(Protocol):
    """User lookup (port).

    Maps an authenticated user id to the user's role and linked employee.
    Read on every authorization decision so role changes apply on the
    next request.
    """

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...
