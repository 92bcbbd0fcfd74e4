"""Unit tests for CasbinRolePermissions.

Tests cover:
- Policy loaded from the shipped model.conf / policy.csv
- Flat role model (no inheritance between roles)
- permissions_for listing
- Fail-closed behavior on enforcer errors

Reference:
    - src/infrastructure/authorization/casbin_adapter.py
    - src/infrastructure/authorization/policy.csv
"""

from unittest.mock import MagicMock

import pytest

from src.domain.enums import Action, Resource, Role
from src.infrastructure.authorization.casbin_adapter import CasbinRolePermissions

ALL_ROLES = [Role.EMPLOYEE, Role.MANAGER, Role.HR_ADMIN]


@pytest.mark.unit
class TestPolicyMatrix:
    @pytest.mark.parametrize(
        "resource",
        [Resource.EMPLOYEES, Resource.GOALS, Resource.REVIEWS, Resource.SKILLS, Resource.DEPARTMENTS, Resource.REVIEW_CYCLES],
    )
    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_every_role_can_view_core_resources(self, role_permissions, role, resource):
        assert role_permissions.is_allowed(role, resource, Action.VIEW) is True

    @pytest.mark.parametrize(
        ("resource", "action", "allowed_roles"),
        [
            (Resource.EMPLOYEES, Action.EDIT, {Role.MANAGER, Role.HR_ADMIN}),
            (Resource.EMPLOYEES, Action.CREATE, {Role.HR_ADMIN}),
            (Resource.EMPLOYEES, Action.DELETE, {Role.HR_ADMIN}),
            (Resource.GOALS, Action.CREATE, {Role.MANAGER, Role.HR_ADMIN}),
            (Resource.GOALS, Action.EDIT, {Role.EMPLOYEE, Role.MANAGER, Role.HR_ADMIN}),
            (Resource.GOALS, Action.DELETE, {Role.HR_ADMIN}),
            (Resource.REVIEWS, Action.CREATE, {Role.MANAGER, Role.HR_ADMIN}),
            (Resource.REVIEWS, Action.EDIT, {Role.MANAGER, Role.HR_ADMIN}),
            (Resource.REVIEWS, Action.DELETE, {Role.HR_ADMIN}),
            (Resource.SKILLS, Action.MANAGE, {Role.HR_ADMIN}),
            (Resource.DEPARTMENTS, Action.MANAGE, {Role.HR_ADMIN}),
            (Resource.REVIEW_CYCLES, Action.MANAGE, {Role.HR_ADMIN}),
            (Resource.ANALYTICS, Action.VIEW, {Role.MANAGER, Role.HR_ADMIN}),
            (Resource.ANALYTICS, Action.ADVANCED, {Role.HR_ADMIN}),
        ],
    )
    def test_write_permissions(self, role_permissions, resource, action, allowed_roles):
        for role in ALL_ROLES:
            expected = role in allowed_roles
            assert role_permissions.is_allowed(role, resource, action) is expected, (
                f"{role.value} {resource.value}:{action.value} should be {expected}"
            )

    def test_hr_admin_does_not_inherit_unlisted_actions(self, role_permissions):
        assert role_permissions.is_allowed(Role.HR_ADMIN, Resource.EMPLOYEES, Action.MANAGE) is False

    def test_no_role_is_denied(self, role_permissions):
        assert role_permissions.is_allowed(None, Resource.EMPLOYEES, Action.VIEW) is False

    def test_check_logged_at_debug(self, role_permissions, mock_logger):
        role_permissions.is_allowed(Role.MANAGER, Resource.GOALS, Action.DELETE)

        mock_logger.debug.assert_called_once_with(
            "authorization_check",
            role="Manager",
            resource="goals",
            action="delete",
            allowed=False,
        )


@pytest.mark.unit
class TestPermissionsFor:
    def test_employee_permissions(self, role_permissions):
        assert role_permissions.permissions_for(Role.EMPLOYEE) == [
            "departments:view",
            "employees:view",
            "goals:edit",
            "goals:view",
            "review_cycles:view",
            "reviews:view",
            "skills:view",
        ]

    def test_hr_admin_has_advanced_analytics(self, role_permissions):
        permissions = role_permissions.permissions_for(Role.HR_ADMIN)

        assert "analytics:advanced" in permissions
        assert len(permissions) == len(set(permissions))

    def test_no_role_has_no_permissions(self, role_permissions):
        assert role_permissions.permissions_for(None) == []


@pytest.mark.unit
class TestFailClosed:
    def test_enforcer_error_denies_and_logs(self, mock_logger):
        enforcer = MagicMock()
        enforcer.enforce.side_effect = RuntimeError("model not loaded")
        permissions = CasbinRolePermissions(enforcer=enforcer, logger=mock_logger)

        assert permissions.is_allowed(Role.HR_ADMIN, Resource.EMPLOYEES, Action.VIEW) is False
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "authorization_check_error"

    def test_listing_error_returns_empty(self, mock_logger):
        enforcer = MagicMock()
        enforcer.get_filtered_policy.side_effect = RuntimeError("boom")
        permissions = CasbinRolePermissions(enforcer=enforcer, logger=mock_logger)

        assert permissions.permissions_for(Role.MANAGER) == []
        mock_logger.error.assert_called_once()
