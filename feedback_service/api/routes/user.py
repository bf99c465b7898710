from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from feedback_service.api.error import ClientError, ServerError
from feedback_service.api.utils.role_auth import require_role
from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.app.use_cases.auth import UserInfo
from feedback_service.app.use_cases.users import (
    ChangeRoleResponse,
    ChangeRoleUseCase,
    DeleteUserResponse,
    DeleteUserUseCase,
    ListUsersUseCase,
    LoadCurrentUserUseCase,
    UserSummary,
)
from feedback_service.depends import AuthenticatedUser, get_current_user, get_unit_of_work
from feedback_service.domain.entities import UserRole

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: Account deleted since the token was issued
    """
    use_case = LoadCurrentUserUseCase(uow)
    result = await use_case.execute(current_user.id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/users", status_code=status.HTTP_200_OK, response_model=List[UserSummary])
async def list_users(
    current_user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List all users (ADMIN only)"""
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


class ChangeRoleRequest(BaseModel):
    role: Optional[str] = None


@router.patch(
    "/users/{user_id}/role", status_code=status.HTTP_200_OK, response_model=ChangeRoleResponse
)
async def change_role(
    user_id: UUID,
    request: ChangeRoleRequest,
    current_user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User Role (ADMIN only)

    Raises:
        - 400 Bad Request: Role is not ADMIN or USER
        - 404 Not Found: No such user
    """
    use_case = ChangeRoleUseCase(uow)
    result = await use_case.execute(user_id, request.role)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/users/{user_id}", status_code=status.HTTP_200_OK, response_model=DeleteUserResponse
)
async def delete_user(
    user_id: UUID,
    current_user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User (ADMIN only)

    Raises:
        - 400 Bad Request: Admin tried to delete their own account
        - 404 Not Found: No such user
    """
    use_case = DeleteUserUseCase(uow)
    result = await use_case.execute(current_user.id, user_id)

    if result.is_err():
        error = result.error
        if error.code == "CANNOT_DELETE_SELF":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
