from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

ACCESS_TOKEN_TTL = timedelta(hours=12)
ALGORITHM = "HS256"


def generate_jwt(user_id: UUID, email: str, role: str) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID (becomes the "sub" claim)
        email: User email
        role: User role (ADMIN, USER)

    Returns:
        JWT token string (HS256, 12-hour expiry)
    """
    return create_access_token(str(user_id), email, role, ACCESS_TOKEN_TTL)


def create_access_token(
    user_id: str, email: str, role: str, expires_delta: timedelta
) -> str:
    """
    Create JWT access token with custom expiry

    Args:
        user_id: User UUID as string
        email: User email
        role: User role (ADMIN, USER)
        expires_delta: Token expiration duration

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": user_id,
        "email": email,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm=ALGORITHM)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Signature and expiry are both checked. A forged, malformed or expired
    token all give the same None so callers cannot tell them apart.

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=[ALGORITHM]
        )
        return payload
    except JWTError:
        return None
