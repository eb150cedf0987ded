"""Permission gates for role-based rendering.

A gate binds a permission requirement to a choice between a granted value
and a fallback, so callers can hide or disable actions without branching on
roles themselves.
"""

from typing import Any, Iterable, List, Optional, Union

from .checker import can_access, has_all_permissions, has_any_permission
from .permissions import Action, Permission, PermissionLike, Resource, to_token
from .roles import RoleLike


class PermissionGate:
    """
    Decides whether content guarded by permissions is shown for a role.

    Usage:
        gate = PermissionGate("drone:create")
        button = gate.select(role, add_drone_button)

        # Any of several permissions (default)
        gate = PermissionGate(["drone:edit", "drone:delete"])

        # All permissions required
        gate = PermissionGate(
            ["compliance:upload", "compliance:approve"], require_all=True
        )
    """

    def __init__(
        self,
        permission: Union[PermissionLike, Iterable[PermissionLike]],
        require_all: bool = False,
    ):
        """
        Args:
            permission: Required permission, or a collection of them using
                'any' logic by default
            require_all: Require every permission instead of any one
        """
        # Permission is a NamedTuple, so single values are matched before iterables
        if isinstance(permission, (str, Permission)):
            self.permissions: List[str] = [to_token(permission)]
        else:
            self.permissions = [to_token(p) for p in permission]
        self.require_all = require_all

    def allows(self, role: Optional[RoleLike]) -> bool:
        """Check if the role passes the gate. Absent roles never pass."""
        if not role:
            return False
        if self.require_all:
            return has_all_permissions(role, self.permissions)
        return has_any_permission(role, self.permissions)

    def select(self, role: Optional[RoleLike], granted: Any, fallback: Any = None) -> Any:
        """Return ``granted`` if the role passes the gate, else ``fallback``."""
        return granted if self.allows(role) else fallback

    def __repr__(self) -> str:
        mode = "all" if self.require_all else "any"
        return f"PermissionGate({self.permissions!r}, {mode})"


class ResourceGate:
    """Gate on a single resource/action pair, checked through ``can_access``."""

    def __init__(self, resource: Union[str, Resource], action: Union[str, Action]):
        self.resource = resource
        self.action = action

    def allows(self, role: Optional[RoleLike]) -> bool:
        return can_access(role, self.resource, self.action)

    def select(self, role: Optional[RoleLike], granted: Any, fallback: Any = None) -> Any:
        return granted if self.allows(role) else fallback


def resource_gate(resource: Union[str, Resource], action: Union[str, Action]) -> ResourceGate:
    """Build a gate for one CRUD action on a resource."""
    return ResourceGate(resource, action)
