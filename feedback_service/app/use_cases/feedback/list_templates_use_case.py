from typing import List

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.libs.result import Result, Return
from .dtos import ActiveTemplate, TemplateSummary


class ListTemplatesUseCase:
    """All templates with response counts (admin only)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[TemplateSummary]]:
        async with self.uow:
            rows = await self.uow.feedback_templates.list_with_response_counts()

            return Return.ok(
                [
                    TemplateSummary(
                        id=str(template.id),
                        title=template.title,
                        question=template.question,
                        is_active=template.is_active,
                        created_at=template.created_at,
                        response_count=count,
                    )
                    for template, count in rows
                ]
            )


class ListActiveTemplatesUseCase:
    """Templates still accepting responses, for any signed-in user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[ActiveTemplate]]:
        async with self.uow:
            templates = await self.uow.feedback_templates.list_active()

            return Return.ok(
                [
                    ActiveTemplate(
                        id=str(template.id),
                        title=template.title,
                        question=template.question,
                        created_at=template.created_at,
                    )
                    for template in templates
                ]
            )
