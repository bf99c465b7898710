"""
Role Authorization

Gates routes on the role claim of the authenticated user.
"""

from typing import Optional

from fastapi import Depends, status

from feedback_service.api.error import FORBIDDEN, UNAUTHORIZED, ClientError
from feedback_service.depends import AuthenticatedUser, get_current_user
from feedback_service.domain.entities import UserRole


def authorize_role(current_user: Optional[AuthenticatedUser], role: UserRole) -> AuthenticatedUser:
    """
    Check current_user holds exactly role.

    Matching is exact: ADMIN does not satisfy a USER requirement.

    Raises:
        ClientError: 401 if there is no authenticated user, 403 on role mismatch
    """
    if current_user is None:
        raise ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    if current_user.role != role.value:
        raise ClientError(FORBIDDEN, status_code=status.HTTP_403_FORBIDDEN)

    return current_user


def require_role(role: UserRole):
    """Dependency factory: authenticate, then require role"""

    async def verify_role(
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        return authorize_role(current_user, role)

    return verify_role
