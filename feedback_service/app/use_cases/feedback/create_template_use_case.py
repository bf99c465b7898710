"""
Create Feedback Template Use Case
"""

from typing import List, Optional

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.domain.entities import FeedbackTemplate
from feedback_service.libs.result import Error, Result, Return
from .dtos import CreateTemplateCommand, CreateTemplateResponse
from .mappers import to_template_info


def join_questions(question: Optional[str], questions: Optional[List[str]]) -> Optional[str]:
    """Single question wins; otherwise non-blank questions joined by a blank line"""
    if question:
        return question
    if questions:
        joined = "\n\n".join(q for q in questions if q and q.strip())
        return joined or None
    return None


class CreateTemplateUseCase:
    """
    Use case for publishing a feedback template.

    Business Rules:
    - Title and at least one question are required
    - New templates are active
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateTemplateCommand) -> Result[CreateTemplateResponse]:
        question = join_questions(command.question, command.questions)
        if not command.title or not question:
            return Return.err(
                Error("INVALID_TEMPLATE", "Title and question(s) are required")
            )

        async with self.uow:
            template = FeedbackTemplate(title=command.title, question=question, is_active=True)
            template = await self.uow.feedback_templates.create(template)
            await self.uow.commit()

            return Return.ok(
                CreateTemplateResponse(
                    message="Feedback template created",
                    template=to_template_info(template),
                )
            )
