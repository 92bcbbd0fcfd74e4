"""UserRepository - SQLAlchemy implementation of UserStore protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserStore protocol.

    This class does NOT inherit from UserStore (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_id(2)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: int) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_username(self, username: str) -> User | None:
        """Find user by login name (case-insensitive)."""
        stmt = select(UserModel).where(UserModel.username == username.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        return self._to_domain(user_model) if user_model else None

    async def add(self, user: User) -> User:
        """Create new user.

        Args:
            user: User entity to persist (id is assigned by the database).

        Returns:
            User with its assigned id.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await self.session.commit()
        await self.session.refresh(user_model)
        return self._to_domain(user_model)

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            username=user_model.username,
            role=user_model.role,
            employee_id=user_model.employee_id,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            username=user.username.lower(),
            role=user.role,
            employee_id=user.employee_id,
        )
