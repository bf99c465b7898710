from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from feedback_service.app.repositories.user_repository import IUserRepository
from feedback_service.domain.base import utc_now
from feedback_service.domain.entities import FeedbackResponse, User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.updated_at = utc_now()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Delete a user"""
        await self.session.delete(user)
        await self.session.flush()

    async def list_with_response_counts(self) -> List[Tuple[User, int]]:
        """All users, newest first, with their feedback response count"""
        stmt = (
            select(User, func.count(FeedbackResponse.id))
            .outerjoin(FeedbackResponse, FeedbackResponse.user_id == User.id)
            .group_by(User.id)
            .order_by(col(User.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return [(user, count) for user, count in result.all()]
