"""
Submit Feedback Use Case
"""

from typing import List, Optional
from uuid import UUID

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.domain.entities import FeedbackResponse
from feedback_service.libs.result import Error, Result, Return
from .dtos import SubmitFeedbackCommand, SubmitFeedbackResponse
from .mappers import to_response_info

DEFAULT_RATING = 5


def join_answers(answer: Optional[str], answers: Optional[List[Optional[str]]]) -> Optional[str]:
    if answer:
        return answer
    if answers:
        joined = "\n\n".join(a for a in answers if a is not None)
        return joined or None
    return None


class SubmitFeedbackUseCase:
    """
    Use case for answering a feedback template.

    Business Rules:
    - Template ID and at least one answer are required
    - Template must exist and be active
    - Rating defaults to 5
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: SubmitFeedbackCommand) -> Result[SubmitFeedbackResponse]:
        answer = join_answers(command.answer, command.answers)
        invalid = Error("INVALID_RESPONSE", "Template ID and answer(s) are required")
        if not command.template_id or not answer:
            return Return.err(invalid)

        try:
            template_id = UUID(command.template_id)
        except ValueError:
            return Return.err(invalid)

        async with self.uow:
            template = await self.uow.feedback_templates.get_by_id(template_id)
            if template is None:
                return Return.err(
                    Error("TEMPLATE_NOT_FOUND", "Feedback template not found")
                )

            if not template.is_active:
                return Return.err(
                    Error(
                        "TEMPLATE_INACTIVE",
                        "This feedback is no longer accepting responses",
                    )
                )

            response = FeedbackResponse(
                template_id=template.id,
                user_id=user_id,
                answer=answer,
                rating=command.rating if command.rating is not None else DEFAULT_RATING,
            )
            response = await self.uow.feedback_responses.create(response)
            await self.uow.commit()

            return Return.ok(
                SubmitFeedbackResponse(
                    message="Feedback submitted successfully",
                    response=to_response_info(response, template),
                )
            )
