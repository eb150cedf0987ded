from typing import List, Optional
from pydantic import BaseModel, Field

from dronecomply.core.rbac import Role


class PermissionInfo(BaseModel):
    permission: str
    resource: str
    action: str


class RoleInfo(BaseModel):
    role: Role
    name: str
    permissions: List[str] = Field(default_factory=list)


class PermissionCheckRequest(BaseModel):
    permissions: List[str] = Field(default_factory=list)
    require_all: bool = False


class AccessDecision(BaseModel):
    allowed: bool
    role: Optional[Role] = None
