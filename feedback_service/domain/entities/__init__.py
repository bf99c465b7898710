"""
Feedback Service Domain Entities

Each entity in its own file.
"""

from .enums import UserRole

from .user import User
from .password_reset import PasswordReset
from .feedback_template import FeedbackTemplate
from .feedback_response import FeedbackResponse

__all__ = [
    # Enums
    "UserRole",
    # Entities
    "User",
    "PasswordReset",
    "FeedbackTemplate",
    "FeedbackResponse",
]
