from typing import Optional, Union

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from dronecomply.core.config import get_settings
from dronecomply.core.logger import get_logger
from dronecomply.core.rbac import (
    Action,
    Permission,
    PermissionChecker,
    Resource,
    Role,
)
from dronecomply.core.security import decode_role_token

logger = get_logger("api.deps")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=get_settings().token_url, auto_error=False)


def get_current_role(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[Role]:
    """Resolve the caller's role from a bearer token. None means unauthenticated."""
    if not token:
        return None
    return decode_role_token(token)


def get_required_role(role: Optional[Role] = Depends(get_current_role)) -> Role:
    """Like get_current_role, but rejects unauthenticated callers."""
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return role


class PermissionDependency:
    """
    FastAPI dependency for permission checking.

    Usage:
        @router.get("/drones", dependencies=[Depends(PermissionDependency("drone:view"))])
        async def list_drones():
            ...

        @router.delete("/drones/{id}")
        async def delete_drone(
            id: str,
            role: Role = Depends(PermissionDependency("drone:delete", "settings:admin")),
        ):
            ...
    """

    def __init__(self, *permissions: Union[str, Permission], require_all: bool = False):
        self.permissions = [str(p) if isinstance(p, Permission) else p for p in permissions]
        self.require_all = require_all

    def __call__(self, role: Role = Depends(get_required_role)) -> Role:
        checker = PermissionChecker(role)

        if self.require_all:
            has_access = checker.has_all_permissions(self.permissions)
        else:
            has_access = checker.has_any_permission(self.permissions)

        if not has_access:
            logger.info(f"Denied {role.value}: requires {', '.join(self.permissions)}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required: {', '.join(self.permissions)}"
            )

        return role


def require_permission(*permissions: Union[str, Permission], require_all: bool = False):
    """
    Dependency factory for endpoints requiring specific permissions.

    Usage:
        @router.get("/reports/export", dependencies=[require_permission("report:export")])
    """
    return Depends(PermissionDependency(*permissions, require_all=require_all))


def require_resource_access(resource: Union[str, Resource], action: Union[str, Action]):
    """
    Shorthand dependency for checking CRUD access to a resource.

    Usage:
        @router.post("/batteries", dependencies=[require_resource_access(Resource.BATTERY, Action.CREATE)])
    """
    def dependency(role: Role = Depends(get_required_role)) -> Role:
        checker = PermissionChecker(role)
        if not checker.can_access(resource, action):
            res = resource.value if isinstance(resource, Resource) else resource
            act = action.value if isinstance(action, Action) else action
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required: {res}:{act}"
            )
        return role

    return Depends(dependency)
