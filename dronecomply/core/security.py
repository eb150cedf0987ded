"""Session tokens carrying the caller's role.

The RBAC core trusts the role it is handed; this module is where that role
comes from. Tokens are signed JWTs with a ``role`` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import uuid

from jose import JWTError, jwt

from dronecomply.core.config import get_settings
from dronecomply.core.logger import get_logger
from dronecomply.core.rbac import Role, parse_role

logger = get_logger("security")


def create_access_token(
    subject: str,
    role: Role,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed JWT access token for a user and role."""
    settings = get_settings()
    role = parse_role(role)

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": str(subject),
        settings.role_claim: role.value,
        "exp": expire,
        "jti": str(uuid.uuid4()),
        "type": "access",
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_role_token(token: str) -> Optional[Role]:
    """
    Decode and validate a JWT access token.

    Returns:
        The token's Role, or None if the token is invalid, expired, not an
        access token, or carries no role claim.

    Raises:
        InvalidRoleError: if a correctly signed token names an unknown role
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        logger.info(f"Rejected session token: {e}")
        return None

    if payload.get("type") != "access":
        return None

    role = payload.get(settings.role_claim)
    if not role:
        return None

    return parse_role(role)
