from typing import List

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.libs.result import Result, Return
from .dtos import UserSummary


class ListUsersUseCase:
    """All users, newest first, with their response counts (admin only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserSummary]]:
        async with self.uow:
            rows = await self.uow.users.list_with_response_counts()

            return Return.ok(
                [
                    UserSummary(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role=user.role.value,
                        created_at=user.created_at,
                        updated_at=user.updated_at,
                        response_count=count,
                    )
                    for user, count in rows
                ]
            )
