from typing import List, Tuple
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from feedback_service.app.repositories.feedback_response_repository import (
    IFeedbackResponseRepository,
)
from feedback_service.domain.entities import FeedbackResponse, FeedbackTemplate, User


class FeedbackResponseRepository(IFeedbackResponseRepository):
    """FeedbackResponse repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, response: FeedbackResponse) -> FeedbackResponse:
        self.session.add(response)
        await self.session.flush()
        await self.session.refresh(response)
        return response

    async def list_all(self) -> List[Tuple[FeedbackResponse, User, FeedbackTemplate]]:
        stmt = (
            select(FeedbackResponse, User, FeedbackTemplate)
            .join(User, User.id == FeedbackResponse.user_id)
            .join(FeedbackTemplate, FeedbackTemplate.id == FeedbackResponse.template_id)
            .order_by(col(FeedbackResponse.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return [tuple(row) for row in result.all()]

    async def list_by_user_id(
        self, user_id: UUID
    ) -> List[Tuple[FeedbackResponse, FeedbackTemplate]]:
        stmt = (
            select(FeedbackResponse, FeedbackTemplate)
            .join(FeedbackTemplate, FeedbackTemplate.id == FeedbackResponse.template_id)
            .where(FeedbackResponse.user_id == user_id)
            .order_by(col(FeedbackResponse.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return [tuple(row) for row in result.all()]

    async def delete_by_template_id(self, template_id: UUID) -> int:
        stmt = delete(FeedbackResponse).where(FeedbackResponse.template_id == template_id)
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_user_id(self, user_id: UUID) -> int:
        stmt = delete(FeedbackResponse).where(FeedbackResponse.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.rowcount
