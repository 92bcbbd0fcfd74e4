"""Organizational roles for access control.

Roles are a closed set. They are NOT ordered: Manager and HR Admin share
some powers (creating reviews, viewing analytics) but each also has rules
of its own, so code must match on the specific role rather than compare
privilege levels.

Values match the role strings carried in the role claim of access tokens
and stored on user records.

Usage:
    from src.domain.enums import Role

    role = Role.parse(user.role)
    match role:
        case Role.HR_ADMIN:
            ...
        case _:
            # Unknown role string: deny
            ...
"""

from enum import Enum


class Role(str, Enum):
    """User roles for access control.

    String Enum:
        Inherits from str so values serialize directly into token claims
        and JSON responses.
    """

    EMPLOYEE = "Employee"
    """Individual contributor. Sees and edits only their own records."""

    MANAGER = "Manager"
    """Line manager. Sees self plus direct subordinates, manages subordinates."""

    HR_ADMIN = "HR Admin"
    """HR administrator. Full access to every employee and org-wide data."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['Employee', 'Manager', 'HR Admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def parse(cls, value: "str | Role | None") -> "Role | None":
        """Convert a stored or claimed role string to a Role.

        Only the exact role values and the "HRAdmin" alias match. Anything
        else (other casing, underscores, extra spaces) returns None rather
        than raising so callers can treat it as "no role" and deny.

        Args:
            value: Raw role string (e.g. from a database row or JWT claim).

        Returns:
            Role | None: Matching role, or None if unrecognized.
        """
        if isinstance(value, Role):
            return value
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return _ROLE_ALIASES.get(value)

    @property
    def policy_subject(self) -> str:
        """Subject name used in the role permission policy."""
        return self.name.lower()


_ROLE_ALIASES: dict[str, Role] = {"HRAdmin": Role.HR_ADMIN}
"""Exact alternate spellings. Matching is case and whitespace sensitive."""


MANAGEMENT_ROLES: frozenset[Role] = frozenset({Role.MANAGER, Role.HR_ADMIN})
"""Roles allowed to create reviews and view analytics."""
