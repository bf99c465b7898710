"""
Request Password Reset Use Case

Generates a single-use reset token and mails the reset link.
"""

import hashlib
import logging
import secrets
from datetime import timedelta
from typing import Any, Callable, Optional
from uuid import UUID

from feedback_service.app.repositories.password_reset_repository import IPasswordResetStore
from feedback_service.app.services.notification_sink import (
    DispatchResult,
    INotificationSink,
    MailMessage,
)
from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.domain.base import utc_now
from feedback_service.domain.entities import PasswordReset
from feedback_service.libs.result import Result, Return
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

RESET_TOKEN_TTL = timedelta(hours=1)
RESET_EMAIL_SUBJECT = "Password reset request"
GENERIC_RESET_MESSAGE = "If the email exists, a reset link will be sent"


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest stored in place of the plaintext token"""
    return hashlib.sha256(token.encode()).hexdigest()


def build_reset_link(frontend_url: str, token: str, user_id: UUID) -> str:
    return f"{frontend_url.rstrip('/')}/reset-password?token={token}&id={user_id}"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Plaintext token is 32 random bytes, hex encoded
    - Only the SHA-256 hash of the token is stored
    - Token expires in 1 hour
    - No email enumeration (same response for known and unknown emails)
    - A failed email dispatch is logged and does not fail the request
    - The email is sent after the response when a scheduler is given, so
      known and unknown emails answer equally fast
    """

    def __init__(
        self,
        uow: UnitOfWork,
        reset_store: IPasswordResetStore,
        notification_sink: INotificationSink,
        frontend_url: str,
        schedule: Optional[Callable[..., Any]] = None,
    ):
        """
        Args:
            schedule: runs the mail delivery after the response is sent,
                e.g. BackgroundTasks.add_task; delivery is awaited inline
                when omitted
        """
        self.uow = uow
        self.reset_store = reset_store
        self.notification_sink = notification_sink
        self.frontend_url = frontend_url
        self.schedule = schedule

    def _generic_response(self) -> Result[RequestPasswordResetResponse]:
        return Return.ok(
            RequestPasswordResetResponse(status="sent", message=GENERIC_RESET_MESSAGE)
        )

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with the generic "sent" response, whether or not the
            email belongs to an account
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return self._generic_response()
            # Leaving the unit of work rolls back and expires user
            user_id, user_email = user.id, user.email

        reset_token = secrets.token_hex(32)
        now = utc_now()
        record = PasswordReset(
            user_id=user_id,
            token_hash=hash_reset_token(reset_token),
            expires_at=now + RESET_TOKEN_TTL,
            created_at=now,
        )
        await self.reset_store.put(record)

        reset_link = build_reset_link(self.frontend_url, reset_token, user_id)
        message = MailMessage(
            to=user_email,
            subject=RESET_EMAIL_SUBJECT,
            body=(
                "<p>You requested a password reset. Click the link below to "
                "reset your password (valid 1 hour):</p>"
                f'<p><a href="{reset_link}">Reset password</a></p>'
            ),
        )
        if self.schedule is None:
            await self.deliver(user_id, message)
        else:
            self.schedule(self.deliver, user_id, message)

        return self._generic_response()

    async def deliver(self, user_id: UUID, message: MailMessage) -> DispatchResult:
        """Send the reset email, logging a delivery failure instead of raising"""
        dispatch = await self.notification_sink.send(message)
        if not dispatch.delivered:
            logger.warning(
                "Password reset email for user %s not delivered: %s",
                user_id,
                dispatch.warning,
            )
        return dispatch
