"""
Feedback Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTemplateCommand(BaseModel):
    """Either one question or a list of questions"""

    title: Optional[str] = None
    question: Optional[str] = None
    questions: Optional[List[str]] = None


class SubmitFeedbackCommand(BaseModel):
    """Either one answer or a list of answers"""

    template_id: Optional[str] = None
    answer: Optional[str] = None
    answers: Optional[List[Optional[str]]] = None
    rating: Optional[int] = None


# ============================================================================
# Response DTOs
# ============================================================================


class TemplateInfo(BaseModel):
    id: str
    title: str
    question: str
    is_active: bool
    created_at: datetime


class TemplateSummary(TemplateInfo):
    """Template row in the admin list"""

    response_count: int


class ActiveTemplate(BaseModel):
    id: str
    title: str
    question: str
    created_at: datetime


class TemplateRef(BaseModel):
    id: str
    title: str
    question: str


class ResponseAuthor(BaseModel):
    id: str
    name: Optional[str] = None
    email: str


class FeedbackResponseInfo(BaseModel):
    id: str
    template_id: str
    user_id: str
    answer: str
    rating: int
    created_at: datetime
    template: TemplateRef


class FeedbackResponseDetail(FeedbackResponseInfo):
    """Response row in the admin list, with its author"""

    user: ResponseAuthor


class CreateTemplateResponse(BaseModel):
    message: str
    template: TemplateInfo


class SubmitFeedbackResponse(BaseModel):
    message: str
    response: FeedbackResponseInfo


class DeleteTemplateResponse(BaseModel):
    message: str
