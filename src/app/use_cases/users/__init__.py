"""
User Management Use Cases
"""

from .get_all_users_use_case import GetAllUsersUseCase
from .get_user_use_case import GetUserUseCase
from .create_user_use_case import CreateUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .dtos import CreateUserCommand, UpdateUserCommand, UserInfo

__all__ = [
    # Use Cases
    "GetAllUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
    # DTOs
    "CreateUserCommand",
    "UpdateUserCommand",
    "UserInfo",
]
