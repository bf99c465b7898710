from abc import ABC, abstractmethod

from feedback_service.app.repositories.feedback_response_repository import (
    IFeedbackResponseRepository,
)
from feedback_service.app.repositories.feedback_template_repository import (
    IFeedbackTemplateRepository,
)
from feedback_service.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    feedback_templates: IFeedbackTemplateRepository
    feedback_responses: IFeedbackResponseRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
