from typing import List
from uuid import UUID

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.libs.result import Result, Return
from .dtos import FeedbackResponseDetail, FeedbackResponseInfo, ResponseAuthor
from .mappers import to_response_info


class ListResponsesUseCase:
    """Every response with author and template (admin only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[FeedbackResponseDetail]]:
        async with self.uow:
            rows = await self.uow.feedback_responses.list_all()

            return Return.ok(
                [
                    FeedbackResponseDetail(
                        **to_response_info(response, template).model_dump(),
                        user=ResponseAuthor(id=str(user.id), name=user.name, email=user.email),
                    )
                    for response, user, template in rows
                ]
            )


class ListMyResponsesUseCase:
    """The caller's own responses"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[FeedbackResponseInfo]]:
        async with self.uow:
            rows = await self.uow.feedback_responses.list_by_user_id(user_id)

            return Return.ok(
                [to_response_info(response, template) for response, template in rows]
            )
