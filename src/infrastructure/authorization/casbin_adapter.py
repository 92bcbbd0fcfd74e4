"""Casbin implementation of RolePermissionsProtocol.

The role permission matrix lives in two files next to this module:
- model.conf: flat request/policy match on (role, resource, action), no
  role inheritance since roles are not ordered
- policy.csv: one ``p`` line per granted permission

Following hexagonal architecture:
- Infrastructure implements domain protocol (RolePermissionsProtocol)
- Domain doesn't know about Casbin
"""

from pathlib import Path
from typing import TYPE_CHECKING

import casbin

from src.domain.enums import Action, Resource, Role

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


AUTHORIZATION_DIR = Path(__file__).parent
DEFAULT_MODEL_PATH = AUTHORIZATION_DIR / "model.conf"
DEFAULT_POLICY_PATH = AUTHORIZATION_DIR / "policy.csv"


def create_enforcer(
    model_path: Path = DEFAULT_MODEL_PATH,
    policy_path: Path = DEFAULT_POLICY_PATH,
) -> casbin.Enforcer:
    """Build a Casbin enforcer from model and policy files.

    Args:
        model_path: Casbin model definition.
        policy_path: CSV policy file.

    Returns:
        casbin.Enforcer: Enforcer with the policy loaded.
    """
    return casbin.Enforcer(str(model_path), str(policy_path))


class CasbinRolePermissions:
    """Casbin-backed role permission matrix.

    Policy subjects are the lower-cased role member names ("employee",
    "manager", "hr_admin").

    Attributes:
        _enforcer: Casbin Enforcer instance.
        _logger: Structured logger.
    """

    def __init__(self, enforcer: casbin.Enforcer, logger: "LoggerProtocol") -> None:
        """Initialize adapter with dependencies.

        Args:
            enforcer: Pre-loaded Casbin Enforcer.
            logger: Structured logger.
        """
        self._enforcer = enforcer
        self._logger = logger

    def is_allowed(self, role: Role | None, resource: Resource, action: Action) -> bool:
        """Check if a role grants an action on a resource.

        Args:
            role: Caller's role (None is always denied).
            resource: Resource type.
            action: Action on the resource.

        Returns:
            bool: True if the policy grants it. Enforcer errors fail closed.
        """
        if role is None:
            return False

        try:
            allowed = bool(
                self._enforcer.enforce(role.policy_subject, resource.value, action.value)
            )
        except Exception as e:
            # Fail closed on errors
            self._logger.error(
                "authorization_check_error",
                error=e,
                role=role.value,
                resource=resource.value,
                action=action.value,
            )
            return False

        self._logger.debug(
            "authorization_check",
            role=role.value,
            resource=resource.value,
            action=action.value,
            allowed=allowed,
        )
        return allowed

    def permissions_for(self, role: Role | None) -> list[str]:
        """List the permissions a role grants.

        Args:
            role: Role to inspect (None returns an empty list).

        Returns:
            list[str]: Sorted "resource:action" strings.
        """
        if role is None:
            return []

        try:
            rules = self._enforcer.get_filtered_policy(0, role.policy_subject)
        except Exception as e:
            self._logger.error("get_permissions_error", error=e, role=role.value)
            return []

        return sorted(f"{rule[1]}:{rule[2]}" for rule in rules)
