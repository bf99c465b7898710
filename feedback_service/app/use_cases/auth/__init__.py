"""
Authentication Use Cases

Registration, login and the password reset flow.
"""

from .dtos import (
    RegisterCommand,
    RegisterResponse,
    LoginResponse,
    UserInfo,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase

__all__ = [
    "RegisterCommand",
    "RegisterResponse",
    "LoginResponse",
    "UserInfo",
    "RequestPasswordResetResponse",
    "ConfirmPasswordResetResponse",
    "RegisterUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
]
