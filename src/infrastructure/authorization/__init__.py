"""Authorization infrastructure (Casbin role permission matrix)."""

from src.infrastructure.authorization.casbin_adapter import (
    CasbinRolePermissions,
    create_enforcer,
)

__all__ = [
    "CasbinRolePermissions",
    "create_enforcer",
]
