from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from feedback_service.domain.entities import PasswordReset


class IPasswordResetStore(ABC):
    """
    Password reset record store - application layer

    Records are looked up by (owner, token hash), never by plaintext token.
    Implementations do not purge expired records on their own.
    """

    @abstractmethod
    async def put(self, record: PasswordReset) -> PasswordReset:
        """Store a new reset record"""
        pass

    @abstractmethod
    async def find_by_owner_and_hash(
        self, user_id: UUID, token_hash: str
    ) -> Optional[PasswordReset]:
        """Get the record issued to user_id for token_hash"""
        pass

    @abstractmethod
    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Returns True only for the call that actually removed it, so a
        record can be claimed once even under concurrent requests.
        """
        pass

    async def create_schema(self) -> None:
        """Prepare backing storage, if any"""
        pass

    async def close(self) -> None:
        """Release backing resources, if any"""
        pass
