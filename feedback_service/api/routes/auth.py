from typing import Annotated, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import AfterValidator, BaseModel, Field
from pydantic.networks import validate_email

from config import ApplicationConfig
from feedback_service.api.error import ClientError, ServerError
from feedback_service.app.repositories.password_reset_repository import IPasswordResetStore
from feedback_service.app.services.notification_sink import INotificationSink
from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    LoginResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from feedback_service.depends import (
    get_notification_sink,
    get_password_reset_store,
    get_unit_of_work,
)

router = APIRouter(tags=["Authentication"])


def check_email(value: str) -> str:
    """Validate like EmailStr but keep the address exactly as submitted"""
    validate_email(value)
    return value


# Emails are stored and matched case-sensitively, so the normalized form
# email-validator produces is not used
SubmittedEmail = Annotated[str, AfterValidator(check_email)]


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: SubmittedEmail = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")
    name: Optional[str] = Field(None, max_length=255, description="Display name")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Registration

    Creates a USER account.

    Raises:
        - 400 Bad Request: Invalid input or password too short/long
        - 409 Conflict: Email already exists
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        email=request.email, password=request.password, name=request.name
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    email: SubmittedEmail = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Returns a bearer token valid for 12 hours.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    email: SubmittedEmail = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    reset_store: IPasswordResetStore = Depends(get_password_reset_store),
    notification_sink: INotificationSink = Depends(get_notification_sink),
):
    """
    Request Password Reset

    Mails a reset link valid for 1 hour.

    Security:
        - No email enumeration (same response for valid/invalid emails)
        - Mail is sent after the response, so response time does not
          reveal whether the email is registered
        - Mail delivery failures are logged, never reported to the caller

    Returns:
        - 200 OK: Always returns success (no enumeration)
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        reset_store,
        notification_sink,
        ApplicationConfig.FRONTEND_URL,
        schedule=background_tasks.add_task,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Reset password HTTP request payload

    Fields are optional here so a missing one is reported as
    MISSING_PARAMETERS by the use case.
    """

    user_id: Optional[str] = Field(None, description="User ID from the reset link")
    token: Optional[str] = Field(None, description="Password reset token from email")
    new_password: Optional[str] = Field(None, description="New password")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    reset_store: IPasswordResetStore = Depends(get_password_reset_store),
):
    """
    Confirm Password Reset

    Security:
        - Token must not be expired (1 hour window)
        - Token is deleted once used or found expired

    Raises:
        - 400 Bad Request: Missing parameters, invalid/expired token, bad password
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow, reset_store)
    result = await use_case.execute(request.user_id, request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in (
            "MISSING_PARAMETERS",
            "INVALID_PASSWORD",
            "INVALID_TOKEN",
            "TOKEN_EXPIRED",
        ):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
