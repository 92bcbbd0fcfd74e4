"""User domain entity.

A user is an authenticated login linked to exactly one employee record
(the "linked identity" used for ownership checks). The link never changes
after creation.
"""

from dataclasses import dataclass

from src.domain.enums.role import Role


@dataclass
class User:
    """Application user account.

    The role is kept as the raw stored string. Use ``access_role`` to get
    the parsed Role; unrecognized strings yield None and are denied by every
    authorization check.

    Attributes:
        id: Unique user identifier.
        username: Login name.
        role: Role string as stored (e.g. "Manager").
        employee_id: Linked employee record.

    Example:
        >>> user = User(id=2, username="manager1", role="Manager", employee_id=2)
        >>> user.access_role
        <Role.MANAGER: 'Manager'>
    """

    id: int
    username: str
    role: str
    employee_id: int

    @property
    def access_role(self) -> Role | None:
        """Parsed role, or None if the stored string is not a known role."""
        return Role.parse(self.role)
