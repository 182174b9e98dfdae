"""
Account Service Domain Entities
"""

from .enums import UserState
from .user import User

__all__ = [
    "UserState",
    "User",
]
