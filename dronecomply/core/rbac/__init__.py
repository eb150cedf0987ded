"""RBAC (Role-Based Access Control) module for DroneComply.

This module defines the permission catalog, role table, and access decision
functions.
"""

from .exceptions import InvalidPermissionError, InvalidRoleError
from .permissions import (
    Action,
    Permission,
    PERMISSION_DEFINITIONS,
    Resource,
    is_valid_permission,
    list_permissions,
)
from .roles import (
    ROLE_DISPLAY_NAMES,
    ROLE_PERMISSIONS,
    Role,
    display_name,
    parse_role,
    permissions_for_role,
)
from .checker import (
    PermissionChecker,
    can_access,
    get_accessible_resources,
    has_all_permissions,
    has_any_permission,
    has_permission,
)
from .gate import PermissionGate, resource_gate

__all__ = [
    "Action",
    "InvalidPermissionError",
    "InvalidRoleError",
    "PERMISSION_DEFINITIONS",
    "Permission",
    "PermissionChecker",
    "PermissionGate",
    "ROLE_DISPLAY_NAMES",
    "ROLE_PERMISSIONS",
    "Resource",
    "Role",
    "can_access",
    "display_name",
    "get_accessible_resources",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "is_valid_permission",
    "list_permissions",
    "parse_role",
    "permissions_for_role",
    "resource_gate",
]
