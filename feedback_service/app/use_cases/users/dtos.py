"""
User Management DTOs
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from feedback_service.app.use_cases.auth.dtos import UserInfo


class UserSummary(BaseModel):
    """User row in the admin user list"""

    id: str
    name: Optional[str] = None
    email: str
    role: str
    created_at: datetime
    updated_at: datetime
    response_count: int


class ChangeRoleResponse(BaseModel):
    message: str
    user: UserInfo


class DeleteUserResponse(BaseModel):
    message: str
