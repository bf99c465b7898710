"""
Feedback Use Cases

Template administration and response submission.
"""

from .dtos import (
    CreateTemplateCommand,
    SubmitFeedbackCommand,
    TemplateSummary,
    ActiveTemplate,
    FeedbackResponseInfo,
    FeedbackResponseDetail,
    CreateTemplateResponse,
    SubmitFeedbackResponse,
    DeleteTemplateResponse,
)
from .create_template_use_case import CreateTemplateUseCase
from .list_templates_use_case import ListTemplatesUseCase, ListActiveTemplatesUseCase
from .delete_template_use_case import DeleteTemplateUseCase
from .submit_feedback_use_case import SubmitFeedbackUseCase
from .list_responses_use_case import ListResponsesUseCase, ListMyResponsesUseCase

__all__ = [
    "CreateTemplateCommand",
    "SubmitFeedbackCommand",
    "TemplateSummary",
    "ActiveTemplate",
    "FeedbackResponseInfo",
    "FeedbackResponseDetail",
    "CreateTemplateResponse",
    "SubmitFeedbackResponse",
    "DeleteTemplateResponse",
    "CreateTemplateUseCase",
    "ListTemplatesUseCase",
    "ListActiveTemplatesUseCase",
    "DeleteTemplateUseCase",
    "SubmitFeedbackUseCase",
    "ListResponsesUseCase",
    "ListMyResponsesUseCase",
]
