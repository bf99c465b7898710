from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from feedback_service.app.repositories.feedback_template_repository import (
    IFeedbackTemplateRepository,
)
from feedback_service.domain.entities import FeedbackResponse, FeedbackTemplate


class FeedbackTemplateRepository(IFeedbackTemplateRepository):
    """FeedbackTemplate repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, template: FeedbackTemplate) -> FeedbackTemplate:
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def get_by_id(self, template_id: UUID) -> Optional[FeedbackTemplate]:
        stmt = select(FeedbackTemplate).where(FeedbackTemplate.id == template_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_with_response_counts(self) -> List[Tuple[FeedbackTemplate, int]]:
        stmt = (
            select(FeedbackTemplate, func.count(FeedbackResponse.id))
            .outerjoin(FeedbackResponse, FeedbackResponse.template_id == FeedbackTemplate.id)
            .group_by(FeedbackTemplate.id)
            .order_by(col(FeedbackTemplate.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return [(template, count) for template, count in result.all()]

    async def list_active(self) -> List[FeedbackTemplate]:
        stmt = (
            select(FeedbackTemplate)
            .where(FeedbackTemplate.is_active == True)  # noqa: E712
            .order_by(col(FeedbackTemplate.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete(self, template: FeedbackTemplate) -> None:
        await self.session.delete(template)
        await self.session.flush()
