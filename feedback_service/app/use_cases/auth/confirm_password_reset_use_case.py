"""
Confirm Password Reset Use Case

Consumes a reset token and sets the new password.
"""

import logging
from typing import Optional
from uuid import UUID

from feedback_service.app.repositories.password_reset_repository import IPasswordResetStore
from feedback_service.app.services.password_hasher import hash_password
from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.domain.base import utc_now
from feedback_service.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse
from .password_policy import validate_password
from .request_password_reset_use_case import hash_reset_token

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - user id, token and new password are all required
    - Record is found by (user id, SHA-256 of token)
    - An expired record is deleted and rejected
    - The record is claimed (deleted) before the password changes, so a
      token works at most once even under concurrent requests
    - Password is hashed with bcrypt
    """

    def __init__(self, uow: UnitOfWork, reset_store: IPasswordResetStore):
        self.uow = uow
        self.reset_store = reset_store

    async def execute(
        self,
        user_id: Optional[str],
        token: Optional[str],
        new_password: Optional[str],
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            user_id: ID of the account, from the reset link
            token: Password reset token (plain text from email)
            new_password: New password to set

        Errors:
            - MISSING_PARAMETERS: an input is missing or empty
            - INVALID_PASSWORD: Password does not meet length requirements
            - INVALID_TOKEN: no record for this user and token
            - TOKEN_EXPIRED: record found but past its expiry (now deleted)
        """
        if not user_id or not token or not new_password:
            return Return.err(Error("MISSING_PARAMETERS", "Missing parameters"))

        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        invalid_token = Error("INVALID_TOKEN", "Invalid or expired token")

        try:
            owner_id = UUID(user_id)
        except ValueError:
            return Return.err(invalid_token)

        record = await self.reset_store.find_by_owner_and_hash(
            owner_id, hash_reset_token(token)
        )
        if record is None:
            return Return.err(invalid_token)

        if record.is_expired(utc_now()):
            await self.reset_store.delete(record.id)
            return Return.err(Error("TOKEN_EXPIRED", "Token expired"))

        # Claim the record before touching the account; a concurrent
        # request presenting the same token loses here
        if not await self.reset_store.delete(record.id):
            return Return.err(invalid_token)

        async with self.uow:
            user = await self.uow.users.get_by_id(owner_id)
            if user is None:
                # Account deleted after the reset was requested
                return Return.err(invalid_token)

            user.password_hash = hash_password(new_password)
            await self.uow.users.update(user)
            await self.uow.commit()

        logger.info("Password reset completed for user %s", owner_id)

        return Return.ok(
            ConfirmPasswordResetResponse(
                status="success",
                message="Password updated",
            )
        )
