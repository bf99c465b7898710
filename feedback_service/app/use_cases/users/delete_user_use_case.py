"""
Delete User Use Case
"""

import logging
from uuid import UUID

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.libs.result import Error, Result, Return
from .dtos import DeleteUserResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for an admin deleting an account.

    Business Rules:
    - An admin cannot delete their own account
    - Target user must exist
    - The user's feedback responses are deleted with the account
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_user_id: UUID, target_user_id: UUID) -> Result[DeleteUserResponse]:
        if actor_user_id == target_user_id:
            return Return.err(
                Error("CANNOT_DELETE_SELF", "You cannot delete your own account")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            removed = await self.uow.feedback_responses.delete_by_user_id(user.id)
            await self.uow.users.delete(user)
            await self.uow.commit()

        logger.info("User %s deleted by %s (%d responses removed)", target_user_id, actor_user_id, removed)
        return Return.ok(DeleteUserResponse(message="User deleted successfully"))
