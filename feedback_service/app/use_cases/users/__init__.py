"""
User Management Use Cases
"""

from .dtos import UserSummary, ChangeRoleResponse, DeleteUserResponse
from .load_current_user_use_case import LoadCurrentUserUseCase
from .list_users_use_case import ListUsersUseCase
from .change_role_use_case import ChangeRoleUseCase
from .delete_user_use_case import DeleteUserUseCase

__all__ = [
    "UserSummary",
    "ChangeRoleResponse",
    "DeleteUserResponse",
    "LoadCurrentUserUseCase",
    "ListUsersUseCase",
    "ChangeRoleUseCase",
    "DeleteUserUseCase",
]
