from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from feedback_service.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user"""
        pass

    @abstractmethod
    async def list_with_response_counts(self) -> List[Tuple[User, int]]:
        """All users, newest first, with their feedback response count"""
        pass
