"""
Login Use Case

Handles user authentication and returns a signed JWT.
"""

from feedback_service.api.utils.jwt import generate_jwt
from feedback_service.app.services.password_hasher import burn_password_check, verify_password
from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserInfo


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password give the same error
    - A hash is computed even for unknown emails to keep timing similar
    - JWT carries sub, email and role and expires after 12 hours
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                burn_password_check()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            access_token = generate_jwt(user.id, user.email, user.role.value)

            return Return.ok(
                LoginResponse(
                    message="Login successful",
                    access_token=access_token,
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role=user.role.value,
                    ),
                )
            )
