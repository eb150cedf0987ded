"""Permission catalog for DroneComply RBAC.

Defines every protected resource, the actions available on it, and the
resulting permission tokens.

Permission string format: "resource:action"
Examples:
  - drone:view
  - battery:create
  - compliance:approve
  - settings:admin
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, NamedTuple, Tuple, Union

from .exceptions import InvalidPermissionError


class Resource(str, Enum):
    """Resources that can be protected by permissions."""

    # Fleet and operations
    DRONE = "drone"                   # Aircraft records
    ORDER = "order"                   # Customer orders / flight jobs
    BATTERY = "battery"               # Battery inventory and cycles

    # People
    TEAM = "team"                     # Staff and pilots
    SUBCONTRACTOR = "subcontractor"   # External contractors

    # Compliance
    COMPLIANCE = "compliance"         # Certificates, logs, uploaded evidence
    REPORT = "report"                 # Compliance reports

    # Administration
    SETTINGS = "settings"             # Organization and system settings


class Action(str, Enum):
    """Actions that can be performed on resources."""

    # Standard CRUD actions
    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"

    # Specialized actions
    UPLOAD = "upload"     # Upload compliance documents
    APPROVE = "approve"   # Approve compliance submissions
    EXPORT = "export"     # Export reports (CSV, PDF)
    ADMIN = "admin"       # Settings administration


class Permission(NamedTuple):
    """A permission is a combination of resource and action."""
    resource: Resource
    action: Action

    def __str__(self) -> str:
        return f"{self.resource.value}:{self.action.value}"

    @classmethod
    def from_string(cls, perm_str: str) -> "Permission":
        """Parse a permission string like 'drone:view'.

        Raises InvalidPermissionError if the string is malformed or names a
        resource/action pair that is not in the catalog.
        """
        parts = perm_str.split(":") if isinstance(perm_str, str) else []
        if len(parts) != 2:
            raise InvalidPermissionError(perm_str, "expected 'resource:action'")
        perm = PERMISSION_DEFINITIONS.get(perm_str)
        if perm is None:
            raise InvalidPermissionError(perm_str)
        return perm


CRUD_ACTIONS: FrozenSet[Action] = frozenset([
    Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE,
])


# Permission definitions matrix
# Maps each resource to its valid actions, in catalog order
PERMISSION_MATRIX: Mapping[Resource, Tuple[Action, ...]] = MappingProxyType({
    Resource.DRONE: (Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE),
    Resource.ORDER: (Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE),
    Resource.TEAM: (Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE),
    Resource.SUBCONTRACTOR: (Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE),
    Resource.BATTERY: (Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE),
    Resource.COMPLIANCE: (Action.VIEW, Action.UPLOAD, Action.APPROVE),
    Resource.REPORT: (Action.VIEW, Action.EXPORT),
    Resource.SETTINGS: (Action.VIEW, Action.EDIT, Action.ADMIN),
})


def _generate_permission_definitions() -> Dict[str, Permission]:
    """Generate all valid permission combinations from the matrix."""
    permissions = {}
    for resource, actions in PERMISSION_MATRIX.items():
        for action in actions:
            perm = Permission(resource, action)
            permissions[str(perm)] = perm
    return permissions


# All valid permissions as a dictionary: "resource:action" -> Permission
PERMISSION_DEFINITIONS: Mapping[str, Permission] = MappingProxyType(_generate_permission_definitions())

_ALL_PERMISSIONS: FrozenSet[str] = frozenset(PERMISSION_DEFINITIONS)

# The single permission reserved for super administrators
SETTINGS_ADMIN = str(Permission(Resource.SETTINGS, Action.ADMIN))


PermissionLike = Union[str, Permission]


def to_token(permission: PermissionLike) -> str:
    """Normalise a Permission or plain string to its token form."""
    return str(permission) if isinstance(permission, Permission) else permission


def is_valid_permission(perm_str: PermissionLike) -> bool:
    """Check if a permission string is valid."""
    return to_token(perm_str) in _ALL_PERMISSIONS


def get_permissions_for_resource(resource: Union[str, Resource]) -> List[str]:
    """Get all valid permission strings for a resource."""
    try:
        resource = Resource(resource)
    except ValueError:
        return []
    return [
        str(Permission(resource, action))
        for action in PERMISSION_MATRIX[resource]
    ]


def list_permissions() -> FrozenSet[str]:
    """Get every defined permission string."""
    return _ALL_PERMISSIONS
