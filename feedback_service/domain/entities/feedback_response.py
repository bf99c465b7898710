"""
FeedbackResponse Entity
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utc_now


class FeedbackResponse(SQLModel, table=True):
    """FeedbackResponse entity - one user's answers to a template"""

    __tablename__ = "feedback_responses"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    template_id: UUID = Field(foreign_key="feedback_templates.id", index=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)

    answer: str = Field(sa_column=Column(Text, nullable=False))
    rating: int = Field(default=5)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
