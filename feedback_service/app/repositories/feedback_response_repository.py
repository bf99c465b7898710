from abc import ABC, abstractmethod
from typing import List, Tuple
from uuid import UUID

from feedback_service.domain.entities import FeedbackResponse, FeedbackTemplate, User


class IFeedbackResponseRepository(ABC):
    """FeedbackResponse repository interface - application layer"""

    @abstractmethod
    async def create(self, response: FeedbackResponse) -> FeedbackResponse:
        pass

    @abstractmethod
    async def list_all(self) -> List[Tuple[FeedbackResponse, User, FeedbackTemplate]]:
        """All responses, newest first, joined with their author and template"""
        pass

    @abstractmethod
    async def list_by_user_id(
        self, user_id: UUID
    ) -> List[Tuple[FeedbackResponse, FeedbackTemplate]]:
        """One user's responses, newest first, joined with their template"""
        pass

    @abstractmethod
    async def delete_by_template_id(self, template_id: UUID) -> int:
        """Delete every response to a template, returns the count deleted"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every response written by a user, returns the count deleted"""
        pass
