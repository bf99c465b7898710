from typing import Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from feedback_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from feedback_service.api.error import UNAUTHORIZED, ClientError
from feedback_service.api.utils.jwt import verify_jwt
from feedback_service.app.repositories.password_reset_repository import IPasswordResetStore
from feedback_service.app.services.notification_sink import INotificationSink

BEARER_SCHEME = "Bearer"

# Missing credentials are reported by get_current_user, not by HTTPBearer
security = HTTPBearer(auto_error=False)


class AuthenticatedUser(BaseModel):
    """Identity context built from verified token claims"""

    id: UUID
    email: str
    role: str


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_reset_store(request: Request) -> IPasswordResetStore:
    return request.app.state.password_reset_store


def get_notification_sink(request: Request) -> INotificationSink:
    return request.app.state.notification_sink


def extract_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Token from an "Authorization: Bearer <token>" header, else None

    HTTPBearer accepts any casing of the scheme; only "Bearer" is allowed here.
    """
    if credentials is None or credentials.scheme != BEARER_SCHEME:
        return None
    return credentials.credentials or None


def identity_from_claims(payload: dict) -> Optional[AuthenticatedUser]:
    try:
        return AuthenticatedUser(
            id=UUID(payload["sub"]), email=payload["email"], role=payload["role"]
        )
    except (KeyError, TypeError, ValueError):
        return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthenticatedUser:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Authorization header split by HTTPBearer, must use the
            exact "Bearer" scheme

    Returns:
        AuthenticatedUser built from the token's sub, email and role claims,
        also stored on request.state.user

    Raises:
        ClientError: 401 for a missing, malformed, forged or expired token,
        always with the same message
    """
    unauthorized = ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    token = extract_bearer_token(credentials)
    if token is None:
        raise unauthorized

    payload = verify_jwt(token)
    if payload is None:
        raise unauthorized

    current_user = identity_from_claims(payload)
    if current_user is None:
        raise unauthorized

    request.state.user = current_user
    return current_user
