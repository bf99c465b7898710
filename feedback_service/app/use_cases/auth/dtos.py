"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated registration intent, built by the API layer"""

    email: str
    password: str
    name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: str
    name: Optional[str] = None
    email: str
    role: str


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    user: UserInfo


class LoginResponse(BaseModel):
    """Response for user login use case"""

    message: str
    access_token: str
    token_type: str = "bearer"
    user: UserInfo


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
