"""
Load Current User Use Case
"""

from uuid import UUID

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.app.use_cases.auth.dtos import UserInfo
from feedback_service.libs.result import Error, Result, Return


class LoadCurrentUserUseCase:
    """Fetch the account behind an authenticated token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                UserInfo(
                    id=str(user.id),
                    name=user.name,
                    email=user.email,
                    role=user.role.value,
                )
            )
