"""
PasswordReset Entity

Single-use password reset records.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now


class PasswordReset(SQLModel, table=True):
    """
    PasswordReset entity - one outstanding reset request.

    Business Rules:
    - Expires 1 hour after creation
    - token_hash is the SHA-256 hex digest of the emailed token;
      the plaintext token is never stored
    - Deleted when consumed or when found expired, never updated
    - Several records for the same user may coexist
    """

    __tablename__ = "password_resets"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(index=True)
    token_hash: str = Field(max_length=64)  # SHA-256 hex output

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_password_reset_owner_hash", "user_id", "token_hash"),)

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
