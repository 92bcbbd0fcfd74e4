"""Resolved caller identity used by authorization decisions."""

from dataclasses import dataclass

from src.domain.enums.role import Role


@dataclass(frozen=True, slots=True, kw_only=True)
class Principal:
    """Caller identity resolved from the user store for one request.

    Attributes:
        user_id: Authenticated user id.
        role: Parsed role (None if the stored role is unrecognized).
        employee_id: Linked employee id.
    """

    user_id: int
    role: Role | None
    employee_id: int

    @property
    def is_hr_admin(self) -> bool:
        return self.role is Role.HR_ADMIN

    @property
    def is_manager(self) -> bool:
        return self.role is Role.MANAGER
