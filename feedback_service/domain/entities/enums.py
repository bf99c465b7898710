"""
Feedback Service Domain Enums
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role, compared by exact match"""

    ADMIN = "ADMIN"
    USER = "USER"
