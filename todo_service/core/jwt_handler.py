from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError

from .config import get_settings
from .exceptions import AuthError

settings = get_settings()

BEARER_PREFIX = "Bearer "


def create_access_token(user_id: int, email: str, user_role: str, expires_minutes: Optional[int] = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=(expires_minutes or settings.access_token_expire_minutes)
    )
    payload = {"sub": str(user_id), "email": email, "user_role": user_role, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def create_bearer_token(user_id: int, email: str, user_role: str) -> str:
    return BEARER_PREFIX + create_access_token(user_id, email, user_role)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise AuthError("Invalid or expired token") from e
