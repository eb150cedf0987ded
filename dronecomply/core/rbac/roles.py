"""Role definitions for DroneComply.

Defines the 7 roles with their permission sets:
1. Super Admin - Every permission
2. Admin - Everything except settings administration
3. Operations Manager - Fleet, orders, staff and batteries; no deletes
4. QA Manager - Compliance review and approval, report export
5. Pilot - Flight-facing view access and compliance uploads
6. Technician - Battery maintenance and compliance uploads
7. Viewer - Read-only access

The table below is the single source of truth. It is built once at import
time and exposed through read-only mappings of frozensets.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Union

from dronecomply.core.logger import get_logger

from .exceptions import InvalidRoleError
from .permissions import (
    Action,
    Permission,
    Resource,
    SETTINGS_ADMIN,
    list_permissions,
)

logger = get_logger("rbac")


class Role(str, Enum):
    """Roles a user account can be assigned."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    OPERATIONS_MANAGER = "OPERATIONS_MANAGER"
    QA_MANAGER = "QA_MANAGER"
    PILOT = "PILOT"
    TECHNICIAN = "TECHNICIAN"
    VIEWER = "VIEWER"


RoleLike = Union[str, Role]


def _build_permissions(*perms: tuple) -> FrozenSet[str]:
    """Build permission strings from (Resource, Action) tuples."""
    return frozenset(str(Permission(r, a)) for r, a in perms)


SUPER_ADMIN_PERMISSIONS = list_permissions()

ADMIN_PERMISSIONS = SUPER_ADMIN_PERMISSIONS - {SETTINGS_ADMIN}

# Operations Manager: runs day-to-day operations, cannot delete records
OPERATIONS_MANAGER_PERMISSIONS = _build_permissions(
    (Resource.DRONE, Action.VIEW),
    (Resource.DRONE, Action.CREATE),
    (Resource.DRONE, Action.EDIT),

    (Resource.ORDER, Action.VIEW),
    (Resource.ORDER, Action.CREATE),
    (Resource.ORDER, Action.EDIT),

    (Resource.TEAM, Action.VIEW),
    (Resource.TEAM, Action.CREATE),
    (Resource.TEAM, Action.EDIT),

    (Resource.SUBCONTRACTOR, Action.VIEW),
    (Resource.SUBCONTRACTOR, Action.CREATE),
    (Resource.SUBCONTRACTOR, Action.EDIT),

    (Resource.BATTERY, Action.VIEW),
    (Resource.BATTERY, Action.CREATE),
    (Resource.BATTERY, Action.EDIT),

    (Resource.COMPLIANCE, Action.VIEW),
    (Resource.COMPLIANCE, Action.UPLOAD),

    (Resource.REPORT, Action.VIEW),
    (Resource.REPORT, Action.EXPORT),

    (Resource.SETTINGS, Action.VIEW),
)

# QA Manager: reviews and approves compliance evidence
QA_MANAGER_PERMISSIONS = _build_permissions(
    (Resource.DRONE, Action.VIEW),
    (Resource.DRONE, Action.EDIT),
    (Resource.ORDER, Action.VIEW),
    (Resource.TEAM, Action.VIEW),
    (Resource.SUBCONTRACTOR, Action.VIEW),
    (Resource.BATTERY, Action.VIEW),

    (Resource.COMPLIANCE, Action.VIEW),
    (Resource.COMPLIANCE, Action.UPLOAD),
    (Resource.COMPLIANCE, Action.APPROVE),

    (Resource.REPORT, Action.VIEW),
    (Resource.REPORT, Action.EXPORT),
)

PILOT_PERMISSIONS = _build_permissions(
    (Resource.DRONE, Action.VIEW),
    (Resource.TEAM, Action.VIEW),
    (Resource.BATTERY, Action.VIEW),
    (Resource.COMPLIANCE, Action.VIEW),
    (Resource.COMPLIANCE, Action.UPLOAD),
)

# Technician: maintains batteries
TECHNICIAN_PERMISSIONS = _build_permissions(
    (Resource.DRONE, Action.VIEW),
    (Resource.BATTERY, Action.VIEW),
    (Resource.BATTERY, Action.CREATE),
    (Resource.BATTERY, Action.EDIT),
    (Resource.TEAM, Action.VIEW),
    (Resource.COMPLIANCE, Action.VIEW),
    (Resource.COMPLIANCE, Action.UPLOAD),
)

VIEWER_PERMISSIONS = _build_permissions(
    (Resource.DRONE, Action.VIEW),
    (Resource.ORDER, Action.VIEW),
    (Resource.TEAM, Action.VIEW),
    (Resource.SUBCONTRACTOR, Action.VIEW),
    (Resource.BATTERY, Action.VIEW),
    (Resource.COMPLIANCE, Action.VIEW),
    (Resource.REPORT, Action.VIEW),
)


ROLE_PERMISSIONS: Mapping[Role, FrozenSet[str]] = MappingProxyType({
    Role.SUPER_ADMIN: SUPER_ADMIN_PERMISSIONS,
    Role.ADMIN: ADMIN_PERMISSIONS,
    Role.OPERATIONS_MANAGER: OPERATIONS_MANAGER_PERMISSIONS,
    Role.QA_MANAGER: QA_MANAGER_PERMISSIONS,
    Role.PILOT: PILOT_PERMISSIONS,
    Role.TECHNICIAN: TECHNICIAN_PERMISSIONS,
    Role.VIEWER: VIEWER_PERMISSIONS,
})

ROLE_DISPLAY_NAMES: Mapping[Role, str] = MappingProxyType({
    Role.SUPER_ADMIN: "Super Administrator",
    Role.ADMIN: "Administrator",
    Role.OPERATIONS_MANAGER: "Operations Manager",
    Role.QA_MANAGER: "QA Manager",
    Role.PILOT: "Remote Pilot",
    Role.TECHNICIAN: "Technician",
    Role.VIEWER: "Viewer",
})


def parse_role(value: Any) -> Role:
    """
    Validate an untrusted role value.

    Args:
        value: A Role or its string form, e.g. "PILOT"

    Returns:
        The matching Role

    Raises:
        InvalidRoleError: if the value is not an enumerated role
    """
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        logger.warning(f"Rejected unknown role value: {value!r}")
        raise InvalidRoleError(value) from None


def permissions_for_role(role: RoleLike) -> FrozenSet[str]:
    """Get the permission set for a role."""
    return ROLE_PERMISSIONS[parse_role(role)]


def display_name(role: RoleLike) -> str:
    """Get the presentation label for a role."""
    return ROLE_DISPLAY_NAMES[parse_role(role)]


def get_role_definitions() -> Dict[Role, dict]:
    """Get all role definitions with display names and sorted permissions."""
    return {
        role: {
            "name": ROLE_DISPLAY_NAMES[role],
            "permissions": sorted(ROLE_PERMISSIONS[role]),
        }
        for role in Role
    }
