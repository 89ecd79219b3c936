"""Identity helpers for CareerPilot.

Tokens are issued by an external identity provider; this module only decodes
them into the ``{"id", "role"}`` user dict the services consume.
``create_access_token`` exists for local tooling and tests.
"""

import secrets
from datetime import timedelta
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from careerpilot.core.config import get_settings
from careerpilot.utils.constants import UserRole
from careerpilot.utils.datetime_utils import utc_now
from careerpilot.utils.exceptions import AuthenticationError, AuthorizationError
from careerpilot.utils.logger import get_security_logger, log_security_event

settings = get_settings()
logger = get_security_logger()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed access token.

    Args:
        data: Claims to embed; ``sub`` carries the user id
        expires_delta: Lifetime override

    Returns:
        str: Encoded JWT
    """
    to_encode = data.copy()
    now = utc_now()
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({
        "exp": expire,
        "iat": now,
        "type": "access",
        "jti": secrets.token_urlsafe(16),
    })
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify a token and return its claims.

    Raises:
        AuthenticationError: If the token is expired, malformed or unsigned
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired", cause=e)
    except JWTError as e:
        logger.warning(f"JWT verification failed: {str(e)}")
        raise AuthenticationError("Could not validate credentials", cause=e)


def user_from_claims(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Build the user dict passed to services from token claims."""
    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Token missing user ID")
    return {
        "id": str(user_id),
        "email": payload.get("email"),
        "name": payload.get("name"),
        "role": payload.get("role", UserRole.USER.value),
    }


def require_user_id(user: Optional[Dict[str, Any]]) -> str:
    """User id of a resolved identity.

    Raises:
        AuthenticationError: When no identity was resolved
    """
    if not user or not user.get("id"):
        raise AuthenticationError()
    return str(user["id"])


def is_admin(user: Optional[Dict[str, Any]]) -> bool:
    return bool(user) and user.get("role") == UserRole.ADMIN.value


def ensure_admin(user: Optional[Dict[str, Any]]) -> str:
    """Admin user id, or raise.

    Raises:
        AuthenticationError: When no identity was resolved
        AuthorizationError: When the identity is not an admin
    """
    user_id = require_user_id(user)
    if not is_admin(user):
        log_security_event(
            "admin_access_denied",
            {"user_id": user_id, "role": user.get("role")},
            severity="WARNING",
            logger=logger,
        )
        raise AuthorizationError(
            "Only admins can perform this action",
            user_id=user_id,
            required_role=UserRole.ADMIN.value,
        )
    return user_id


__all__ = [
    "create_access_token",
    "decode_access_token",
    "ensure_admin",
    "is_admin",
    "require_user_id",
    "user_from_claims",
]
