from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    user_id: UUID, email: str, expires_minutes: Optional[int] = None
) -> str:
    """
    Generate JWT identity token

    Args:
        user_id: User UUID
        email: User email
        expires_minutes: Optional lifetime. When None (the default) no exp
            claim is set and the token never expires.

    Returns:
        JWT token string (HS256)
    """
    if expires_minutes is None:
        expires_minutes = ApplicationConfig.JWT_EXPIRES_MINUTES

    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "iat": now,
    }
    if expires_minutes is not None:
        payload["exp"] = now + timedelta(minutes=int(expires_minutes))
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
