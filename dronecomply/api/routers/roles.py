"""Role and permission catalog API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from dronecomply.api.deps import get_current_role, get_required_role, require_permission
from dronecomply.api.schemas.rbac import (
    AccessDecision,
    PermissionCheckRequest,
    PermissionInfo,
    RoleInfo,
)
from dronecomply.core.rbac import (
    PERMISSION_DEFINITIONS,
    Permission,
    Resource,
    Role,
    can_access,
    display_name,
    has_all_permissions,
    has_any_permission,
    parse_role,
    permissions_for_role,
)
from dronecomply.core.rbac.permissions import get_permissions_for_resource
from dronecomply.core.rbac.roles import get_role_definitions

router = APIRouter(prefix="/roles", tags=["roles"])


def _role_info(role: Role) -> RoleInfo:
    return RoleInfo(
        role=role,
        name=display_name(role),
        permissions=sorted(permissions_for_role(role)),
    )


@router.get("", response_model=List[RoleInfo], dependencies=[require_permission("settings:view")])
async def list_roles():
    """List every role with its permissions."""
    return [
        RoleInfo(role=role, name=definition["name"], permissions=definition["permissions"])
        for role, definition in get_role_definitions().items()
    ]


@router.get("/permissions", response_model=List[PermissionInfo])
async def list_all_permissions():
    """List all defined permissions."""
    return [
        PermissionInfo(
            permission=token,
            resource=perm.resource.value,
            action=perm.action.value,
        )
        for token, perm in sorted(PERMISSION_DEFINITIONS.items())
    ]


@router.get("/permissions/{resource}", response_model=List[str])
async def list_resource_permissions(resource: str):
    """List the permissions defined for one resource, in catalog order."""
    if resource not in {r.value for r in Resource}:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    return get_permissions_for_resource(resource)


@router.get("/me", response_model=RoleInfo)
async def get_my_role(role: Role = Depends(get_required_role)):
    """Get the caller's role and permissions."""
    return _role_info(role)


@router.post("/check", response_model=AccessDecision)
async def check_permissions(
    request: PermissionCheckRequest,
    role: Optional[Role] = Depends(get_current_role),
):
    """Check the caller's role against a list of permissions.

    Every token must be in the catalog; unknown tokens are rejected with 400.
    """
    permissions = [str(Permission.from_string(p)) for p in request.permissions]
    if request.require_all:
        allowed = has_all_permissions(role, permissions)
    else:
        allowed = has_any_permission(role, permissions)
    return AccessDecision(allowed=allowed, role=role)


@router.get("/access/{resource}/{action}", response_model=AccessDecision)
async def check_resource_access(
    resource: str,
    action: str,
    role: Optional[Role] = Depends(get_current_role),
):
    """Check whether the caller may perform a CRUD action on a resource."""
    return AccessDecision(allowed=can_access(role, resource, action), role=role)


@router.get("/{role_name}", response_model=RoleInfo)
async def get_role(role_name: str):
    """Get a specific role by name."""
    return _role_info(parse_role(role_name))
