from uuid import UUID

from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.libs.result import Error, Result, Return
from .dtos import DeleteTemplateResponse


class DeleteTemplateUseCase:
    """
    Use case for deleting a feedback template.

    Responses to the template are deleted with it.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, template_id: UUID) -> Result[DeleteTemplateResponse]:
        async with self.uow:
            template = await self.uow.feedback_templates.get_by_id(template_id)
            if template is None:
                return Return.err(
                    Error("TEMPLATE_NOT_FOUND", "Feedback template not found")
                )

            await self.uow.feedback_responses.delete_by_template_id(template.id)
            await self.uow.feedback_templates.delete(template)
            await self.uow.commit()

            return Return.ok(DeleteTemplateResponse(message="Template deleted"))
