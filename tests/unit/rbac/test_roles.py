"""Tests for role definitions and the role-permission table."""

import pytest

from dronecomply.core.rbac.exceptions import InvalidRoleError
from dronecomply.core.rbac.permissions import list_permissions
from dronecomply.core.rbac.roles import (
    Role, ROLE_PERMISSIONS, ROLE_DISPLAY_NAMES,
    permissions_for_role, display_name, parse_role, get_role_definitions,
    OPERATIONS_MANAGER_PERMISSIONS, QA_MANAGER_PERMISSIONS,
    PILOT_PERMISSIONS, TECHNICIAN_PERMISSIONS, VIEWER_PERMISSIONS,
)


class TestRoleTable:
    """Test structural invariants of the role table."""

    def test_all_roles_defined(self):
        """Test that all 7 roles are defined."""
        assert len(Role) == 7
        assert set(ROLE_PERMISSIONS) == set(Role)

    def test_every_role_has_permissions(self):
        """Test every role maps to a non-empty frozenset."""
        for role in Role:
            perms = permissions_for_role(role)
            assert isinstance(perms, frozenset)
            assert len(perms) > 0

    def test_only_catalog_permissions_assigned(self):
        """Test roles only hold catalog permissions."""
        for role in Role:
            assert permissions_for_role(role) <= list_permissions()

    def test_super_admin_has_everything(self):
        """Test super admin holds the full catalog."""
        assert permissions_for_role(Role.SUPER_ADMIN) == list_permissions()

    def test_admin_lacks_only_settings_admin(self):
        """Test admin holds everything except settings:admin."""
        missing = list_permissions() - permissions_for_role(Role.ADMIN)
        assert missing == {"settings:admin"}

    def test_super_admin_is_superset_of_all_roles(self):
        """Test super admin covers every other role."""
        super_admin = permissions_for_role(Role.SUPER_ADMIN)
        for role in Role:
            assert super_admin >= permissions_for_role(role)

    def test_admin_is_superset_of_non_super_admin_roles(self):
        """Test admin covers every role below super admin."""
        admin = permissions_for_role(Role.ADMIN)
        for role in Role:
            if role is Role.SUPER_ADMIN:
                continue
            assert admin >= permissions_for_role(role)

    def test_non_admin_roles_are_strict_subsets_of_admin(self):
        """Test job-function roles hold strictly less than admin."""
        admin = permissions_for_role(Role.ADMIN)
        for role in Role:
            if role in (Role.SUPER_ADMIN, Role.ADMIN):
                continue
            assert permissions_for_role(role) < admin

    def test_table_is_read_only(self):
        """Test the role table cannot be modified."""
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[Role.VIEWER] = frozenset()
        with pytest.raises(AttributeError):
            ROLE_PERMISSIONS[Role.VIEWER].add("drone:delete")


class TestRoleMembership:
    """Test exact membership of each job-function role."""

    def test_operations_manager_permissions(self):
        """Test operations manager permissions."""
        assert OPERATIONS_MANAGER_PERMISSIONS == {
            "drone:view", "drone:create", "drone:edit",
            "order:view", "order:create", "order:edit",
            "team:view", "team:create", "team:edit",
            "subcontractor:view", "subcontractor:create", "subcontractor:edit",
            "battery:view", "battery:create", "battery:edit",
            "compliance:view", "compliance:upload",
            "report:view", "report:export",
            "settings:view",
        }

    def test_qa_manager_permissions(self):
        """Test QA manager permissions."""
        assert QA_MANAGER_PERMISSIONS == {
            "drone:view", "drone:edit",
            "order:view", "team:view", "subcontractor:view", "battery:view",
            "compliance:view", "compliance:upload", "compliance:approve",
            "report:view", "report:export",
        }

    def test_pilot_permissions(self):
        """Test pilot permissions."""
        assert PILOT_PERMISSIONS == {
            "drone:view", "team:view", "battery:view",
            "compliance:view", "compliance:upload",
        }

    def test_technician_permissions(self):
        """Test technician permissions."""
        assert TECHNICIAN_PERMISSIONS == {
            "drone:view",
            "battery:view", "battery:create", "battery:edit",
            "team:view",
            "compliance:view", "compliance:upload",
        }

    def test_viewer_is_readonly(self):
        """Test viewer role only holds view permissions."""
        assert VIEWER_PERMISSIONS == {
            "drone:view", "order:view", "team:view", "subcontractor:view",
            "battery:view", "compliance:view", "report:view",
        }
        assert all(p.endswith(":view") for p in VIEWER_PERMISSIONS)

    def test_no_job_role_can_delete(self):
        """Test no job-function role can delete records."""
        for role in (Role.OPERATIONS_MANAGER, Role.QA_MANAGER, Role.PILOT,
                     Role.TECHNICIAN, Role.VIEWER):
            assert not any(p.endswith(":delete") for p in permissions_for_role(role))


class TestRoleLookup:
    """Test role parsing and display names."""

    def test_parse_role_from_string(self):
        """Test parsing a role from its string form."""
        assert parse_role("PILOT") is Role.PILOT
        assert parse_role(Role.QA_MANAGER) is Role.QA_MANAGER

    def test_parse_role_rejects_unknown(self):
        """Test parsing an unknown role raises."""
        with pytest.raises(InvalidRoleError) as exc_info:
            parse_role("CAPTAIN")
        assert exc_info.value.value == "CAPTAIN"

    def test_parse_role_is_case_sensitive(self):
        """Test role names are case sensitive."""
        with pytest.raises(InvalidRoleError):
            parse_role("pilot")

    def test_permissions_for_role_accepts_strings(self):
        """Test permission lookup by role string."""
        assert permissions_for_role("VIEWER") == VIEWER_PERMISSIONS

    def test_permissions_for_invalid_role_raises(self):
        """Test permission lookup for an unknown role raises."""
        with pytest.raises(InvalidRoleError):
            permissions_for_role("unknown_role")
        # InvalidRoleError is a ValueError
        with pytest.raises(ValueError):
            permissions_for_role(None)

    def test_display_names(self):
        """Test display names for every role."""
        assert display_name(Role.SUPER_ADMIN) == "Super Administrator"
        assert display_name(Role.ADMIN) == "Administrator"
        assert display_name("OPERATIONS_MANAGER") == "Operations Manager"
        assert display_name(Role.QA_MANAGER) == "QA Manager"
        assert display_name(Role.PILOT) == "Remote Pilot"
        assert display_name(Role.TECHNICIAN) == "Technician"
        assert display_name(Role.VIEWER) == "Viewer"

    def test_every_role_has_one_display_name(self):
        """Test display names are complete and distinct."""
        assert set(ROLE_DISPLAY_NAMES) == set(Role)
        assert len(set(ROLE_DISPLAY_NAMES.values())) == len(Role)

    def test_display_name_for_invalid_role_raises(self):
        """Test display name for an unknown role raises."""
        with pytest.raises(InvalidRoleError):
            display_name("CAPTAIN")

    def test_role_definitions(self):
        """Test role definitions used by the API."""
        definitions = get_role_definitions()
        assert set(definitions) == set(Role)
        pilot = definitions[Role.PILOT]
        assert pilot["name"] == "Remote Pilot"
        assert pilot["permissions"] == sorted(PILOT_PERMISSIONS)
