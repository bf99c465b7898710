from feedback_service.domain.entities import FeedbackResponse, FeedbackTemplate
from .dtos import FeedbackResponseInfo, TemplateInfo, TemplateRef


def to_template_info(template: FeedbackTemplate) -> TemplateInfo:
    return TemplateInfo(
        id=str(template.id),
        title=template.title,
        question=template.question,
        is_active=template.is_active,
        created_at=template.created_at,
    )


def to_response_info(response: FeedbackResponse, template: FeedbackTemplate) -> FeedbackResponseInfo:
    return FeedbackResponseInfo(
        id=str(response.id),
        template_id=str(response.template_id),
        user_id=str(response.user_id),
        answer=response.answer,
        rating=response.rating,
        created_at=response.created_at,
        template=TemplateRef(
            id=str(template.id), title=template.title, question=template.question
        ),
    )
