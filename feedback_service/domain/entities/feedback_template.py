"""
FeedbackTemplate Entity
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utc_now


class FeedbackTemplate(SQLModel, table=True):
    """
    FeedbackTemplate entity - a questionnaire published by an admin.

    Several questions are stored in one text column separated by a blank line.
    """

    __tablename__ = "feedback_templates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    question: str = Field(sa_column=Column(Text, nullable=False))
    is_active: bool = Field(default=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
