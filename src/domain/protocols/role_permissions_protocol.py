"""Role permission matrix protocol (port).

Answers coarse "may this role perform this action on this resource type"
questions. Per-record decisions (which employees a Manager may edit) are
made by the authorization engine, not by this port.
"""

from typing import Protocol

from src.domain.enums.permission import Action, Resource
from src.domain.enums.role import Role


class RolePermissionsProtocol(Protocol):
    """Static role to permission mapping.

    Implementations:
        - CasbinRolePermissions: Casbin enforcer over model.conf + policy.csv

    Error Handling:
        Checks fail closed. Enforcer errors are logged and reported as
        "not allowed" or an empty permission list.
    """

    def is_allowed(self, role: Role | None, resource: Resource, action: Action) -> bool:
        """Check if a role grants an action on a resource.

        Args:
            role: Caller's role (None for unrecognized roles, always denied).
            resource: Resource type.
            action: Action on the resource.

        Returns:
            bool: True if granted.
        """
        ...

    def permissions_for(self, role: Role | None) -> list[str]:
        """List the permissions a role grants.

        Args:
            role: Role to inspect (None returns an empty list).

        Returns:
            list[str]: Sorted "resource:action" strings.
        """
        ...
