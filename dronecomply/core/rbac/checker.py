"""Access decisions for DroneComply RBAC.

Every function here is a pure lookup against the role table. Denial is a
``False`` return; an absent role (``None`` or empty string) is always denied.
Only a role value outside the ``Role`` enumeration raises, with
``InvalidRoleError``.
"""

from typing import FrozenSet, Iterable, List, Optional, Union

from dronecomply.core.logger import get_logger

from .permissions import (
    CRUD_ACTIONS,
    Action,
    PermissionLike,
    Resource,
    is_valid_permission,
    to_token,
)
from .roles import Role, RoleLike, parse_role, permissions_for_role

logger = get_logger("rbac.checker")

_CRUD_ACTION_NAMES = frozenset(a.value for a in CRUD_ACTIONS)


def _granted(role: Optional[RoleLike]) -> FrozenSet[str]:
    """Resolve a possibly absent role to its permission set."""
    if not role:
        return frozenset()
    return permissions_for_role(role)


def has_permission(role: Optional[RoleLike], permission: PermissionLike) -> bool:
    """
    Check if a role has a specific permission.

    Args:
        role: Role of the acting user, or None when unauthenticated
        permission: Permission string or Permission object

    Returns:
        True if the role's permission set contains the permission
    """
    return to_token(permission) in _granted(role)


def has_any_permission(
    role: Optional[RoleLike], permissions: Iterable[PermissionLike]
) -> bool:
    """Check if a role has any of the given permissions. Empty input denies."""
    granted = _granted(role)
    return any(to_token(p) in granted for p in permissions)


def has_all_permissions(
    role: Optional[RoleLike], permissions: Iterable[PermissionLike]
) -> bool:
    """Check if a role has all of the given permissions. Empty input grants."""
    granted = _granted(role)
    return all(to_token(p) in granted for p in permissions)


def can_access(
    role: Optional[RoleLike],
    resource: Union[str, Resource],
    action: Union[str, Action],
) -> bool:
    """
    Check if a role can perform a CRUD action on a resource.

    Unknown resources, non-CRUD actions and pairs missing from the catalog
    are denied rather than raised.
    """
    if not role:
        return False
    role = parse_role(role)

    resource_name = resource.value if isinstance(resource, Resource) else resource
    action_name = action.value if isinstance(action, Action) else action
    token = f"{resource_name}:{action_name}"

    if action_name not in _CRUD_ACTION_NAMES or not is_valid_permission(token):
        logger.debug(f"Denied unrecognised capability request: {token}")
        return False

    return has_permission(role, token)


def get_accessible_resources(
    role: Optional[RoleLike], action: Union[str, Action]
) -> List[Resource]:
    """Get list of resources the role can perform the action on."""
    return [resource for resource in Resource if can_access(role, resource, action)]


class PermissionChecker:
    """Answers permission queries for one role.

    Usage:
        checker = PermissionChecker(Role.PILOT)
        if checker.can_access("battery", "view"):
            ...
    """

    def __init__(self, role: Optional[RoleLike]):
        self.role: Optional[Role] = parse_role(role) if role else None

    @property
    def permissions(self) -> FrozenSet[str]:
        return _granted(self.role)

    def has_permission(self, permission: PermissionLike) -> bool:
        return has_permission(self.role, permission)

    def has_any_permission(self, permissions: Iterable[PermissionLike]) -> bool:
        return has_any_permission(self.role, permissions)

    def has_all_permissions(self, permissions: Iterable[PermissionLike]) -> bool:
        return has_all_permissions(self.role, permissions)

    def can_access(self, resource: Union[str, Resource], action: Union[str, Action]) -> bool:
        return can_access(self.role, resource, action)

    def get_accessible_resources(self, action: Union[str, Action]) -> List[Resource]:
        return get_accessible_resources(self.role, action)
