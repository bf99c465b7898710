from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from feedback_service.domain.entities import FeedbackTemplate


class IFeedbackTemplateRepository(ABC):
    """FeedbackTemplate repository interface - application layer"""

    @abstractmethod
    async def create(self, template: FeedbackTemplate) -> FeedbackTemplate:
        pass

    @abstractmethod
    async def get_by_id(self, template_id: UUID) -> Optional[FeedbackTemplate]:
        pass

    @abstractmethod
    async def list_with_response_counts(self) -> List[Tuple[FeedbackTemplate, int]]:
        """All templates, newest first, with their response count"""
        pass

    @abstractmethod
    async def list_active(self) -> List[FeedbackTemplate]:
        """Templates still accepting responses, newest first"""
        pass

    @abstractmethod
    async def delete(self, template: FeedbackTemplate) -> None:
        pass
