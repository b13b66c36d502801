"""
Authentication module for Todo Service.
Resolves the current user from the JWT bearer token.
"""
import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .exceptions import AuthError, ForbiddenError
from .jwt_handler import decode_token
from ..models.user import UserRole

# Configure logging
logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer(
    scheme_name="Bearer Token",
    description="JWT Bearer token issued by /auth/signup or /auth/signin",
    auto_error=False
)


class AuthUser:
    """Represents the current authenticated user."""

    def __init__(self, user_id: int, email: str, user_role: UserRole):
        self.user_id = user_id
        self.email = email
        self.user_role = user_role

    def __str__(self):
        return f"User(id={self.user_id}, email={self.email}, role={self.user_role.value})"

    def __repr__(self):
        return self.__str__()

    @property
    def is_admin(self) -> bool:
        return self.user_role == UserRole.ADMIN

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "AuthUser":
        """Create AuthUser from decoded token claims."""
        try:
            return cls(
                user_id=int(claims["sub"]),
                email=claims["email"],
                user_role=UserRole(claims["user_role"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise AuthError("Malformed token claims") from e


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> AuthUser:
    """
    Dependency to get current authenticated user.

    Raises:
        AuthError: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise AuthError("A bearer token is required")

    current_user = AuthUser.from_claims(decode_token(credentials.credentials))
    logger.debug(f"Authenticated user: {current_user}")
    return current_user


def require_admin(current_user: AuthUser = Depends(get_current_user)) -> AuthUser:
    """Dependency that only lets ADMIN users through."""
    if not current_user.is_admin:
        raise ForbiddenError("Administrator role required", {"user_id": current_user.user_id})
    return current_user


def log_admin_access(request: Request, current_user: AuthUser = Depends(require_admin)) -> AuthUser:
    """Record every call to an admin endpoint."""
    logger.info(
        f"Admin access: user_id={current_user.user_id} "
        f"{request.method} {request.url.path} at {datetime.now(timezone.utc).isoformat()}"
    )
    return current_user
